from __future__ import annotations

from typing import Any

import httpx

from seocheck.core.config import Settings, get_settings
from seocheck.core.errors import InputContractError
from seocheck.core.logging import get_logger
from seocheck.schemas.analyze import AnalyzeRequest
from seocheck.services.engine import CoreEngineClient
from seocheck.services.mock_engine import MockEngine

logger = get_logger(__name__)


class AnalysisService:
    """Chooses between the configured core engine and the mock fallback."""

    def __init__(self, settings: Settings | None = None, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = settings or get_settings()
        self.engine: CoreEngineClient | None = None
        if self.settings.core_engine_url:
            self.engine = CoreEngineClient(
                self.settings.core_engine_url,
                timeout_seconds=self.settings.core_engine_timeout_seconds,
                transport=transport,
            )
        self.mock = MockEngine(delay_ms=self.settings.mock_delay_ms)

    @property
    def backend(self) -> str:
        return "core_engine" if self.engine is not None else "mock"

    async def analyze(self, request: AnalyzeRequest) -> Any:
        logger.info("analysis_requested", backend=self.backend, mode=request.mode)
        if self.engine is not None:
            return await self.engine.analyze(content=request.content, url=request.url)

        if not request.has_input:
            raise InputContractError()
        return await self.mock.analyze(content=request.content, url=request.url)


def get_analysis_service() -> AnalysisService:
    return AnalysisService()
