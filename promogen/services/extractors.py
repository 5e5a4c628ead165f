# =============================================================================
# promogen/services/extractors.py — Pull artifacts out of generateContent bodies
# =============================================================================
# Response shape: {"candidates": [{"content": {"parts": [...]}}]}
# Each extractor raises ExtractionError (or AudioExtractionError) when the
# artifact is structurally absent; it never inspects HTTP status.
# =============================================================================

from dataclasses import dataclass
from typing import Any

from promogen.core.errors import AudioExtractionError, ExtractionError


@dataclass(frozen=True)
class ImageArtifact:
    data: str
    mime_type: str


@dataclass(frozen=True)
class AudioArtifact:
    data: str
    mime_type: str


def candidate_parts(response: dict[str, Any], index: int = 0) -> list[dict[str, Any]]:
    candidates = _candidates(response)
    if len(candidates) <= index or not isinstance(candidates[index], dict):
        return []
    content = candidates[index].get("content")
    if not isinstance(content, dict):
        return []
    parts = content.get("parts")
    if not isinstance(parts, list):
        return []
    return [p for p in parts if isinstance(p, dict)]


def _candidates(response: dict[str, Any]) -> list[Any]:
    candidates = response.get("candidates") if isinstance(response, dict) else None
    return candidates if isinstance(candidates, list) else []


def _first_inline(parts: list[dict[str, Any]]) -> dict[str, Any] | None:
    for part in parts:
        inline = part.get("inlineData") or part.get("inline_data")
        if isinstance(inline, dict) and isinstance(inline.get("data"), str) and inline["data"]:
            return inline
    return None


def extract_inline_image(response: dict[str, Any]) -> ImageArtifact:
    for i in range(len(_candidates(response))):
        inline = _first_inline(candidate_parts(response, i))
        if inline is not None:
            return ImageArtifact(
                data=inline["data"],
                mime_type=inline.get("mimeType") or inline.get("mime_type") or "image/png",
            )
    feedback = response.get("promptFeedback") if isinstance(response, dict) else None
    reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
    if reason:
        raise ExtractionError(f"No image data in the response (blocked: {reason})")
    raise ExtractionError("No image data in the response")


def extract_text(response: dict[str, Any]) -> str:
    text = "".join(p["text"] for p in candidate_parts(response) if isinstance(p.get("text"), str))
    if not text.strip():
        raise ExtractionError("Text generation failed, the response has no text")
    return text


def extract_inline_audio(response: dict[str, Any]) -> AudioArtifact:
    inline = _first_inline(candidate_parts(response))
    if inline is None:
        raise AudioExtractionError()
    return AudioArtifact(
        data=inline["data"],
        mime_type=inline.get("mimeType") or inline.get("mime_type") or "audio/wav",
    )
