import json

import httpx
import pytest

from promogen.core.config import Settings
from promogen.core.errors import ConfigurationError, UpstreamCallError
from promogen.llms.gemini_client import GeminiClient
from promogen.llms.payloads import build_payload, text_part


def make_client(handler, api_key: str = "test-key") -> GeminiClient:
    settings = Settings(google_api_key=api_key)
    return GeminiClient(settings, transport=httpx.MockTransport(handler))


PAYLOAD = build_payload([text_part("hello")])


async def test_posts_payload_to_model_endpoint():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"candidates": []})

    client = make_client(handler)
    assert await client.generate_content("gemini-test", PAYLOAD) == {"candidates": []}
    await client.close()

    assert seen["url"].path == "/v1beta/models/gemini-test:generateContent"
    assert seen["url"].params["key"] == "test-key"
    assert seen["body"] == {"contents": [{"parts": [{"text": "hello"}]}]}


async def test_non_2xx_carries_status_and_provider_message():
    def handler(request):
        return httpx.Response(400, json={"error": {"code": 400, "message": "API key not valid."}})

    with pytest.raises(UpstreamCallError) as exc_info:
        await make_client(handler).generate_content("gemini-test", PAYLOAD)
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "API key not valid."


async def test_non_json_error_body():
    def handler(request):
        return httpx.Response(503, text="<html>unavailable</html>")

    with pytest.raises(UpstreamCallError) as exc_info:
        await make_client(handler).generate_content("gemini-test", PAYLOAD)
    assert exc_info.value.status_code == 503
    assert "503" in exc_info.value.message
    assert "not valid JSON" in exc_info.value.message


async def test_transport_error_has_no_status():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamCallError) as exc_info:
        await make_client(handler).generate_content("gemini-test", PAYLOAD)
    assert exc_info.value.status_code is None


async def test_missing_key_fails_before_any_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(ConfigurationError):
        await make_client(handler, api_key="").generate_content("gemini-test", PAYLOAD)
    assert calls == []


def test_endpoint_tolerates_base_without_trailing_slash():
    client = GeminiClient(Settings(google_api_key="k", google_api_base_url="http://localhost:9000/models"))
    assert client.endpoint("m") == "http://localhost:9000/models/m:generateContent"
