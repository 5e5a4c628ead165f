from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from promogen.core.config import Settings, get_settings
from promogen.core.errors import ConfigurationError, GenerationError, ValidationError
from promogen.core.security import require_google_key
from promogen.llms.base import UpstreamClient
from promogen.llms.gemini_client import GeminiClient
from promogen.llms.replicate_client import ReplicateClient
from promogen.schemas.request import (
    REQUEST_TYPES,
    GenerationRequest,
    ImageRequest,
    TextRequest,
)
from promogen.schemas.response import AudioResponse, ErrorResponse, ImageResponse
from promogen.services.orchestrator import BatchGenerationOrchestrator
from promogen.utils.logger import logger

GENERIC_FAILURE = "Error while communicating with Google AI."


def _provider_status(settings: Settings) -> dict[str, str]:
    status = {
        "google": "configured" if settings.google_api_key.strip() else "missing_key",
    }
    if settings.audio_provider == "replicate":
        status["replicate"] = "configured" if settings.replicate_api_token.strip() else "missing_key"
    return status


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _parse(request_cls, body: dict) -> GenerationRequest:
    try:
        return request_cls.model_validate(body)
    except PydanticValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ValidationError(f"Invalid request fields: {fields}") from e


async def _dispatch(orchestrator: BatchGenerationOrchestrator, kind: str, body: dict) -> dict:
    req = _parse(REQUEST_TYPES[kind], body)
    if isinstance(req, ImageRequest):
        result = await orchestrator.run_image_batch(req)
        return ImageResponse(
            images=[a.data for a in result.artifacts],
            mime_types=[a.mime_type for a in result.artifacts],
            failed_attempts=result.failed_attempts,
        ).model_dump(by_alias=True)
    if isinstance(req, TextRequest):
        return await orchestrator.run_text_generation(req)
    audio = await orchestrator.run_audio_generation(req)
    return AudioResponse(audio_data=audio.data, mime_type=audio.mime_type).model_dump(by_alias=True)


def create_app(
    settings: Settings | None = None,
    client: UpstreamClient | None = None,
    replicate: ReplicateClient | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    client = client or GeminiClient(settings)
    if replicate is None and settings.audio_provider == "replicate":
        replicate = ReplicateClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await client.close()
        if replicate is not None:
            await replicate.close()

    app = FastAPI(title="Promo Content Generator", lifespan=lifespan)
    app.state.settings = settings
    app.state.orchestrator = BatchGenerationOrchestrator(settings, client, replicate)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail))

    @app.get("/")
    async def root():
        return {"message": "Promo Content Generator API", "generate": "POST /api/generate", "health": "/health"}

    @app.get("/health")
    async def get_health():
        providers = _provider_status(settings)
        status = "ok" if all(v == "configured" for v in providers.values()) else "degraded"
        return {"status": status, "providers": providers}

    @app.post("/api/generate")
    async def post_generate(request: Request):
        try:
            require_google_key(settings)
        except ConfigurationError as e:
            logger.critical("credentials_missing", extra={"error": str(e)})
            return _error_response(500, "Google API key is not configured on the server.")

        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Request body must be a JSON object.")
        kind = body.get("type") if isinstance(body, dict) else None
        if not isinstance(kind, str) or kind not in REQUEST_TYPES:
            raise HTTPException(status_code=400, detail="Invalid generation type.")

        try:
            return await _dispatch(request.app.state.orchestrator, kind, body)
        except GenerationError as e:
            logger.error(
                "generation_failed",
                extra={"type": kind, "error_kind": type(e).__name__, "error": e.message},
            )
            return _error_response(500, e.public_message, e.message)
        except Exception as e:
            logger.exception("generation_crashed", extra={"type": kind})
            return _error_response(500, GENERIC_FAILURE, str(e))

    return app


app = create_app()
