# =============================================================================
# promogen/llms/replicate_client.py — Replicate predictions API (TTS backend)
# =============================================================================
# Predictions run asynchronously: create, then poll until a terminal status.
# Polling is bounded by POLL_INTERVAL / POLL_TIMEOUT / POLL_MAX_ATTEMPTS.
# =============================================================================

import asyncio
from typing import Any

import httpx

from promogen.core.config import Settings, get_settings
from promogen.core.errors import UpstreamCallError
from promogen.core.security import require_replicate_token
from promogen.llms.polling import poll_until_done
from promogen.utils.logger import logger

TERMINAL_STATUSES = ("succeeded", "failed", "canceled")


class ReplicateClient:
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

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {require_replicate_token(self._settings)}"}

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()
        try:
            r = await client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise UpstreamCallError(f"Replicate API unreachable: {e!s}") from e
        if r.is_error:
            message = f"Replicate API responded with status {r.status_code}"
            if r.text:
                message = f"{message}: {r.text[:500]}"
            raise UpstreamCallError(message, status_code=r.status_code)
        return r

    async def create_prediction(self, version: str, inputs: dict[str, Any]) -> dict[str, Any]:
        headers = self._headers()
        base = self._settings.replicate_base_url.rstrip("/")
        r = await self._request(
            "POST",
            f"{base}/predictions",
            headers=headers,
            json={"version": version, "input": inputs},
        )
        prediction = r.json()
        logger.info(
            "replicate_prediction_created",
            extra={"prediction_id": prediction.get("id"), "status": prediction.get("status")},
        )
        return prediction

    async def get_prediction(self, prediction: dict[str, Any]) -> dict[str, Any]:
        url = (prediction.get("urls") or {}).get("get")
        if not url:
            base = self._settings.replicate_base_url.rstrip("/")
            url = f"{base}/predictions/{prediction['id']}"
        r = await self._request("GET", url, headers=self._headers())
        return r.json()

    async def wait_for_prediction(
        self,
        prediction: dict[str, Any],
        cancel_event: asyncio.Event | None = None,
    ) -> dict[str, Any]:
        if prediction.get("status") in TERMINAL_STATUSES:
            result = prediction
        else:
            result = await poll_until_done(
                lambda: self.get_prediction(prediction),
                lambda p: p.get("status") in TERMINAL_STATUSES,
                interval=self._settings.poll_interval,
                timeout=self._settings.poll_timeout,
                max_attempts=self._settings.poll_max_attempts,
                cancel_event=cancel_event,
            )
        status = result.get("status")
        if status != "succeeded":
            raise UpstreamCallError(
                f"Replicate prediction {status}: {result.get('error') or 'no error message'}"
            )
        return result

    async def download(self, url: str) -> tuple[bytes, str]:
        r = await self._request("GET", url)
        mime_type = r.headers.get("content-type", "application/octet-stream").split(";")[0]
        return r.content, mime_type.strip()
