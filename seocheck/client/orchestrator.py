from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from seocheck.client.validator import AnalysisRequest
from seocheck.core.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."
ANALYZE_PATH = "/api/analyze"


@dataclass(frozen=True)
class AnalysisError:
    message: str
    details: str | None = None
    status: int | None = None


class SubmissionInProgressError(RuntimeError):
    """Raised when a submission is attempted while another is in flight."""


class AnalysisOrchestrator:
    """Sends one analysis request per submission and classifies the outcome."""

    def __init__(
        self,
        base_url: str,
        *,
        path: str = ANALYZE_PATH,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.path = path
        self.transport = transport
        self._in_flight = False

    @property
    def submit_enabled(self) -> bool:
        return not self._in_flight

    async def submit(self, request: AnalysisRequest) -> dict[str, Any] | AnalysisError:
        if self._in_flight:
            raise SubmissionInProgressError("An analysis is already in progress.")

        self._in_flight = True
        try:
            return await self._send(request)
        finally:
            self._in_flight = False

    async def _send(self, request: AnalysisRequest) -> dict[str, Any] | AnalysisError:
        # No client-side timeout: the server bounds the downstream call.
        try:
            async with httpx.AsyncClient(base_url=self.base_url, timeout=None, transport=self.transport) as client:
                response = await client.post(self.path, json=request.payload())
        except httpx.RequestError as exc:
            logger.warning("analysis_transport_failed", base_url=self.base_url, error=str(exc))
            return AnalysisError(message=str(exc) or UNKNOWN_ERROR_MESSAGE)

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success or (isinstance(data, dict) and data.get("error")):
            return self._error_from(response, data)

        if data is None:
            return AnalysisError(message=UNKNOWN_ERROR_MESSAGE, status=response.status_code)
        return data

    @staticmethod
    def _error_from(response: httpx.Response, data: Any) -> AnalysisError:
        body = data if isinstance(data, dict) else {}
        message = body.get("error") or f"Server returned status {response.status_code}."
        details = body.get("details")
        status = body.get("status") if isinstance(body.get("status"), int) else response.status_code
        logger.info("analysis_failed", status=status, error=message)
        return AnalysisError(
            message=str(message),
            details=str(details) if details else None,
            status=status,
        )
