from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class InlineImage(CamelModel):
    base64: str = ""
    mime_type: str = ""

    @property
    def present(self) -> bool:
        return bool(self.base64)


class ImageRequest(CamelModel):
    type: Literal["image"] = "image"
    product_name: str = ""
    product_type: str = ""
    product_image: InlineImage | None = None
    face_image: InlineImage | None = None
    photo_concept: str | None = None
    model_gender: str = "Wanita"
    custom_background: str | None = None


class TextRequest(CamelModel):
    type: Literal["text"] = "text"
    product_name: str = ""
    product_type: str | None = None


class AudioRequest(CamelModel):
    type: Literal["audio"] = "audio"
    narrative: str = ""
    gender: str = ""


GenerationRequest = ImageRequest | TextRequest | AudioRequest

REQUEST_TYPES: dict[str, type[CamelModel]] = {
    "image": ImageRequest,
    "text": TextRequest,
    "audio": AudioRequest,
}
