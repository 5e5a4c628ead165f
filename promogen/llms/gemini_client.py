# =============================================================================
# promogen/llms/gemini_client.py — Google generativelanguage API client
# =============================================================================
# One POST per call to {base}{model}:generateContent?key=...
# Non-2xx responses become UpstreamCallError carrying the status and, when the
# body is JSON, the provider's error.message. No automatic retry: the image
# batch gets its redundancy from running four independent attempts.
# =============================================================================

from typing import Any

import httpx

from promogen.core.config import Settings, get_settings
from promogen.core.errors import UpstreamCallError
from promogen.core.security import require_google_key
from promogen.llms.base import UpstreamClient
from promogen.utils.logger import logger


def _error_message(response: httpx.Response) -> str:
    message = f"Google API responded with status {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return f"{message} and the body is not valid JSON"
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return f"{message}: {str(data)[:500]}"


class GeminiClient(UpstreamClient):
    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._settings.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def endpoint(self, model: str) -> str:
        base = self._settings.google_api_base_url
        if not base.endswith("/"):
            base += "/"
        return f"{base}{model}:generateContent"

    async def generate_content(self, model: str, payload: dict[str, Any]) -> dict[str, Any]:
        key = require_google_key(self._settings)
        client = await self._get_client()
        try:
            r = await client.post(self.endpoint(model), params={"key": key}, json=payload)
        except httpx.RequestError as e:
            logger.error("google_api_unreachable", extra={"model": model, "error": str(e)})
            raise UpstreamCallError(f"Google API unreachable: {e!s}") from e
        if r.is_error:
            message = _error_message(r)
            logger.error(
                "google_api_error",
                extra={"model": model, "status_code": r.status_code, "error": message},
            )
            raise UpstreamCallError(message, status_code=r.status_code)
        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamCallError("Google API returned a body that is not valid JSON") from e
        if not isinstance(data, dict):
            raise UpstreamCallError("Google API returned an unexpected body")
        return data
