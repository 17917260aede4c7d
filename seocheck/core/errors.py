from __future__ import annotations

from typing import Any

from fastapi import status

MISSING_INPUT_MESSAGE = "Missing content or URL in the request."
ENGINE_OFFLINE_MESSAGE = "Core engine is offline or unreachable."
ENGINE_TIMEOUT_MESSAGE = "Core engine request timed out (30s limit)."
ENGINE_UNAVAILABLE_MESSAGE = "Core engine is unavailable. No response was received."
ENGINE_INVALID_RESPONSE_MESSAGE = "Core engine returned an invalid response."
ENGINE_LOGS_HINT = "Check the core engine logs for details."


class AnalysisServiceError(Exception):
    """Failure that is reported to the caller as ``{error, details?, status?}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"
    expose_status: bool = False

    def __init__(self, message: str | None = None, *, details: str | None = None, status_code: int | None = None):
        self.message = message or self.message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        if self.expose_status:
            payload["status"] = self.status_code
        return payload


class InputContractError(AnalysisServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = MISSING_INPUT_MESSAGE


class EngineOfflineError(AnalysisServiceError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = ENGINE_OFFLINE_MESSAGE
    expose_status = True


class EngineTimeoutError(AnalysisServiceError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    message = ENGINE_TIMEOUT_MESSAGE
    expose_status = True


class EngineUnavailableError(AnalysisServiceError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = ENGINE_UNAVAILABLE_MESSAGE
    expose_status = True


class EngineInvalidResponseError(AnalysisServiceError):
    status_code = status.HTTP_502_BAD_GATEWAY
    message = ENGINE_INVALID_RESPONSE_MESSAGE
    expose_status = True


class EngineHTTPError(AnalysisServiceError):
    """The core engine answered with an error status; that status is relayed."""

    expose_status = True

    def __init__(self, status_code: int, reason: str, *, details: str | None = None):
        super().__init__(
            f"Core engine failed ({reason}).",
            details=details or ENGINE_LOGS_HINT,
            status_code=status_code,
        )
