"""Shared fixtures: settings with a test key and a scriptable upstream client."""

import asyncio
import base64
from typing import Any, Callable

import pytest

from promogen.core.config import Settings
from promogen.core.presets import VARIATION_SUFFIXES
from promogen.llms.base import UpstreamClient

PRODUCT_B64 = base64.b64encode(b"product-image-bytes").decode()
FACE_B64 = base64.b64encode(b"face-image-bytes").decode()


def image_response(data: str, mime_type: str = "image/png") -> dict:
    return {
        "candidates": [
            {"content": {"parts": [{"text": "here you go"}, {"inlineData": {"mimeType": mime_type, "data": data}}]}}
        ]
    }


def text_response(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def audio_response(data: str, mime_type: str = "audio/wav") -> dict:
    return {"candidates": [{"content": {"parts": [{"inlineData": {"mimeType": mime_type, "data": data}}]}}]}


def attempt_index(payload: dict) -> int:
    """Recover the attempt index from the variation suffix in the prompt."""
    text = payload["contents"][0]["parts"][0]["text"]
    for i in range(len(VARIATION_SUFFIXES) - 1, 0, -1):
        if VARIATION_SUFFIXES[i] in text:
            return i
    return 0


class FakeUpstreamClient(UpstreamClient):
    """Records every call; answers through ``handler(model, payload)``.

    The handler may return a response dict or raise. ``delays`` maps an image
    attempt index to seconds slept before answering.
    """

    def __init__(
        self,
        handler: Callable[[str, dict], dict] | None = None,
        delays: dict[int, float] | None = None,
    ) -> None:
        self.handler = handler or (lambda model, payload: image_response("img"))
        self.delays = delays or {}
        self.calls: list[tuple[str, dict]] = []
        self.completed: list[int] = []
        self.closed = False

    async def generate_content(self, model: str, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((model, payload))
        index = attempt_index(payload) if payload.get("generationConfig", {}).get("responseModalities") == ["IMAGE"] else 0
        delay = self.delays.get(index, 0)
        if delay:
            await asyncio.sleep(delay)
        result = self.handler(model, payload)
        self.completed.append(index)
        return result

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(google_api_key="test-key", attempt_timeout=5)


@pytest.fixture
def fake_client() -> FakeUpstreamClient:
    return FakeUpstreamClient()


@pytest.fixture
def image_body() -> dict:
    return {
        "type": "image",
        "productName": "Kemeja Linen",
        "productType": "kemeja",
        "productImage": {"base64": PRODUCT_B64, "mimeType": "image/jpeg"},
        "photoConcept": "Golden Hour Glow",
        "modelGender": "Pria",
    }
