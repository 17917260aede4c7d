from __future__ import annotations

import asyncio
from typing import Any

import httpx

from seocheck.core.errors import (
    EngineHTTPError,
    EngineInvalidResponseError,
    EngineOfflineError,
    EngineTimeoutError,
    EngineUnavailableError,
)
from seocheck.core.logging import get_logger
from seocheck.utils.url import encode_url_component

logger = get_logger(__name__)


class CoreEngineClient:
    """Forwards analysis requests to the downstream core engine.

    Each call opens its own ``httpx.AsyncClient`` so concurrent requests share no
    connection state. Failures are classified into the ``AnalysisServiceError``
    hierarchy; successful bodies are returned untouched.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    @staticmethod
    def build_payload(*, content: str | None, url: str | None) -> dict[str, Any]:
        return {
            "content": content or "",
            "url": encode_url_component(url) if url else None,
        }

    async def analyze(self, *, content: str | None, url: str | None) -> Any:
        payload = self.build_payload(content=content, url=url)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout_seconds),
                headers={"Accept": "application/json"},
                transport=self.transport,
            ) as client:
                # Hard bound on the whole call; httpx limits each phase separately.
                response = await asyncio.wait_for(
                    client.post(self.endpoint, json=payload),
                    timeout=self.timeout_seconds,
                )
        except httpx.ConnectError as exc:
            logger.error("core_engine_offline", endpoint=self.endpoint, error=str(exc))
            raise EngineOfflineError() from exc
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            logger.error("core_engine_timeout", endpoint=self.endpoint, timeout_seconds=self.timeout_seconds)
            raise EngineTimeoutError() from exc
        except httpx.RequestError as exc:
            logger.exception("core_engine_no_response", endpoint=self.endpoint)
            raise EngineUnavailableError() from exc

        if response.status_code >= 400:
            logger.warning(
                "core_engine_http_error",
                endpoint=self.endpoint,
                status_code=response.status_code,
                preview=response.text[:180],
            )
            raise EngineHTTPError(
                response.status_code,
                response.reason_phrase or f"HTTP {response.status_code}",
                details=self._error_details(response),
            )

        try:
            body = response.json()
        except ValueError as exc:
            logger.warning("core_engine_unparseable_response", preview=response.text[:180])
            raise EngineInvalidResponseError() from exc

        logger.info("core_engine_report_received", endpoint=self.endpoint, status_code=response.status_code)
        return body

    @staticmethod
    def _error_details(response: httpx.Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        for key in ("details", "error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value
        return None
