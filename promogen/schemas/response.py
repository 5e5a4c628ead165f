from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageResponse(_CamelResponse):
    images: list[str]
    mime_types: list[str]
    failed_attempts: int = 0


class AudioResponse(_CamelResponse):
    audio_data: str
    mime_type: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
