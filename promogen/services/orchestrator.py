# =============================================================================
# promogen/services/orchestrator.py — Batch generation over the upstream client
# =============================================================================
# Image: exactly IMAGE_ATTEMPTS independent calls, each with its own prompt
# variation. A failed attempt is recorded and dropped; the batch only fails
# when every attempt failed. Results keep attempt-index order whether the
# attempts ran concurrently or one after another.
# Text / audio: one call each.
# =============================================================================

import asyncio
import time
from dataclasses import dataclass, field
from typing import Any

from promogen.core.config import Settings
from promogen.core.errors import (
    AudioExtractionError,
    BatchExhaustedError,
    ConfigurationError,
    GenerationError,
    UpstreamCallError,
    ValidationError,
)
from promogen.core.presets import IMAGE_ATTEMPTS, VOICES
from promogen.core.security import require_google_key
from promogen.llms.base import UpstreamClient
from promogen.llms.payloads import (
    build_payload,
    image_generation_config,
    inline_part,
    speech_generation_config,
    text_part,
)
from promogen.llms.replicate_client import ReplicateClient
from promogen.schemas.request import AudioRequest, ImageRequest, TextRequest
from promogen.services.extractors import (
    AudioArtifact,
    ImageArtifact,
    extract_inline_audio,
    extract_inline_image,
    extract_text,
)
from promogen.services.prompts import (
    audio_prompt,
    base_image_prompt,
    image_instruction,
    resolve_setting,
    text_prompt,
    variation_prompt,
)
from promogen.services.sections import extract_sections
from promogen.utils.audio import encode_bytes_to_base64, is_raw_pcm, pcm_to_wav
from promogen.utils.logger import logger


@dataclass(frozen=True)
class AttemptOutcome:
    index: int
    artifact: ImageArtifact | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.artifact is not None


@dataclass(frozen=True)
class BatchResult:
    artifacts: list[ImageArtifact] = field(default_factory=list)
    failed_attempts: int = 0


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


def select_voice(gender: str) -> dict[str, str]:
    """Exactly ``male`` gets the male-coded preset; every other value gets the female one."""
    if gender not in VOICES:
        logger.warning("unrecognized_speaker_gender", extra={"gender": gender, "fallback": "female"})
    return VOICES["male"] if gender == "male" else VOICES["female"]


class BatchGenerationOrchestrator:
    def __init__(
        self,
        settings: Settings,
        client: UpstreamClient,
        replicate: ReplicateClient | None = None,
    ) -> None:
        self._settings = settings
        self._client = client
        self._replicate = replicate

    async def _call(self, model: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            return await asyncio.wait_for(
                self._client.generate_content(model, payload),
                timeout=self._settings.attempt_timeout,
            )
        except asyncio.TimeoutError as e:
            raise UpstreamCallError(
                f"{model} did not answer within {self._settings.attempt_timeout:g}s"
            ) from e

    # -- image ---------------------------------------------------------------

    @staticmethod
    def _validate_image(req: ImageRequest) -> None:
        image = req.product_image
        if (
            _blank(req.product_name)
            or _blank(req.product_type)
            or image is None
            or _blank(image.base64)
            or _blank(image.mime_type)
        ):
            raise ValidationError(
                "Incomplete product data. Make sure the product name, type and image were sent."
            )
        face = req.face_image
        if face is not None and face.present and _blank(face.mime_type):
            raise ValidationError("The face reference image is missing its MIME type.")

    @staticmethod
    def build_image_payload(req: ImageRequest, description: str) -> dict[str, Any]:
        face = req.face_image if req.face_image is not None and req.face_image.present else None
        parts = [text_part(image_instruction(description, with_face=face is not None))]
        if face is not None:
            parts.append(inline_part(face.mime_type, face.base64))
        parts.append(inline_part(req.product_image.mime_type, req.product_image.base64))
        return build_payload(parts, image_generation_config())

    async def _run_image_attempt(self, index: int, req: ImageRequest, base_prompt: str) -> AttemptOutcome:
        payload = self.build_image_payload(req, variation_prompt(base_prompt, index))
        start = time.perf_counter()
        try:
            response = await self._call(self._settings.image_model, payload)
            artifact = extract_inline_image(response)
        except GenerationError as e:
            logger.warning(
                "image_attempt_failed",
                extra={"attempt": index, "error": str(e), "error_kind": type(e).__name__},
            )
            return AttemptOutcome(index=index, error=str(e))
        logger.info(
            "image_attempt_succeeded",
            extra={"attempt": index, "latency_ms": round((time.perf_counter() - start) * 1000, 2)},
        )
        return AttemptOutcome(index=index, artifact=artifact)

    async def run_image_batch(self, req: ImageRequest) -> BatchResult:
        require_google_key(self._settings)
        self._validate_image(req)
        setting = resolve_setting(req.photo_concept, req.custom_background)
        base_prompt = base_image_prompt(req.product_name, req.product_type, req.model_gender, setting)

        start = time.perf_counter()
        if self._settings.image_dispatch == "sequential":
            outcomes = []
            for i in range(IMAGE_ATTEMPTS):
                outcomes.append(await self._run_image_attempt(i, req, base_prompt))
        else:
            outcomes = await asyncio.gather(
                *(self._run_image_attempt(i, req, base_prompt) for i in range(IMAGE_ATTEMPTS))
            )
        outcomes = sorted(outcomes, key=lambda o: o.index)

        artifacts = [o.artifact for o in outcomes if o.succeeded]
        failed = [o for o in outcomes if not o.succeeded]
        logger.info(
            "image_batch_completed",
            extra={
                "dispatch": self._settings.image_dispatch,
                "succeeded": len(artifacts),
                "failed": len(failed),
                "latency_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        if not artifacts:
            reasons = [f"attempt {o.index}: {o.error}" for o in failed]
            raise BatchExhaustedError("; ".join(reasons), reasons=reasons)
        return BatchResult(artifacts=artifacts, failed_attempts=len(failed))

    # -- text ----------------------------------------------------------------

    async def run_text_generation(self, req: TextRequest) -> dict[str, str | None]:
        if _blank(req.product_name):
            raise ValidationError("Product name was not sent.")
        sections = list(self._settings.text_sections)
        names = [name for name, _ in sections]
        prompt = text_prompt(req.product_name.strip(), (req.product_type or "").strip() or None, names)

        response = await self._call(self._settings.text_model, build_payload([text_part(prompt)]))
        extracted = extract_sections(extract_text(response), names)
        result = {key: extracted[name] for name, key in sections}
        logger.info(
            "text_generation_completed",
            extra={"sections_found": sum(v is not None for v in result.values()), "sections": len(result)},
        )
        return result

    # -- audio ---------------------------------------------------------------

    async def run_audio_generation(self, req: AudioRequest) -> AudioArtifact:
        if _blank(req.narrative) or _blank(req.gender):
            raise ValidationError("Incomplete audio data. Narrative and gender are required.")
        voice = select_voice(req.gender)
        if self._settings.audio_provider == "replicate":
            artifact = await self._run_replicate_audio(req, voice)
        else:
            prompt = audio_prompt(voice["style"], req.narrative.strip())
            payload = build_payload([text_part(prompt)], speech_generation_config(voice["voice_name"]))
            response = await self._call(self._settings.tts_model, payload)
            artifact = extract_inline_audio(response)
        if self._settings.wrap_pcm_as_wav and is_raw_pcm(artifact.mime_type):
            artifact = AudioArtifact(data=pcm_to_wav(artifact.data, artifact.mime_type), mime_type="audio/wav")
        logger.info(
            "audio_generation_completed",
            extra={"voice": voice["voice_name"], "mime_type": artifact.mime_type},
        )
        return artifact

    async def _run_replicate_audio(self, req: AudioRequest, voice: dict[str, str]) -> AudioArtifact:
        if self._replicate is None:
            raise ConfigurationError("AUDIO_PROVIDER=replicate but no Replicate client is configured")
        version = self._settings.replicate_tts_version
        if _blank(version):
            raise ConfigurationError("REPLICATE_TTS_VERSION is not set")
        prediction = await self._replicate.create_prediction(
            version,
            {"text": req.narrative.strip(), "speaker": voice["voice_name"]},
        )
        finished = await self._replicate.wait_for_prediction(prediction)
        output = finished.get("output")
        if isinstance(output, list):
            output = output[0] if output else None
        if not isinstance(output, str) or not output:
            raise AudioExtractionError("Replicate prediction finished without an audio URL")
        data, mime_type = await self._replicate.download(output)
        if not data:
            raise AudioExtractionError("Replicate audio download was empty")
        return AudioArtifact(data=encode_bytes_to_base64(data), mime_type=mime_type)
