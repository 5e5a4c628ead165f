# =============================================================================
# promogen/llms/payloads.py — generateContent request bodies
# =============================================================================
# Shape: {"contents": [{"parts": [...]}], "generationConfig": {...}}
# A part is either {"text": str} or {"inlineData": {"mimeType", "data"}}.
# Part order is significant: the model reads inline images in the order sent.
# =============================================================================

from typing import Any


def text_part(text: str) -> dict[str, Any]:
    return {"text": text}


def inline_part(mime_type: str, data: str) -> dict[str, Any]:
    return {"inlineData": {"mimeType": mime_type, "data": data}}


def build_payload(
    parts: list[dict[str, Any]],
    generation_config: dict[str, Any] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"contents": [{"parts": list(parts)}]}
    if generation_config:
        payload["generationConfig"] = generation_config
    return payload


def image_generation_config() -> dict[str, Any]:
    return {"responseModalities": ["IMAGE"]}


def speech_generation_config(voice_name: str) -> dict[str, Any]:
    return {
        "responseModalities": ["AUDIO"],
        "speechConfig": {
            "voiceConfig": {"prebuiltVoiceConfig": {"voiceName": voice_name}},
        },
    }
