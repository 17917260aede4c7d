from __future__ import annotations

import asyncio
from collections.abc import Callable

from seocheck.client import state as transitions
from seocheck.client.orchestrator import AnalysisError, AnalysisOrchestrator
from seocheck.client.progress import DEFAULT_RAMP_MS, ProgressController
from seocheck.client.state import UIState
from seocheck.client.validator import Mode, ValidationFailure, validate_input
from seocheck.core.logging import get_logger
from seocheck.services.report_renderer import ReportShapeError, render_error, render_report

logger = get_logger(__name__)

CANCELLED_MESSAGE = "The analysis request was cancelled."


class AnalysisSession:
    """Drives one UI through validation, submission, progress and rendering.

    State changes are computed by the pure functions in
    :mod:`seocheck.client.state`; ``on_change`` is the single view binding and
    receives every new state.
    """

    def __init__(
        self,
        orchestrator: AnalysisOrchestrator,
        *,
        on_change: Callable[[UIState], None] | None = None,
        mode: Mode = "text",
        ramp_ms: int = DEFAULT_RAMP_MS,
    ) -> None:
        self.orchestrator = orchestrator
        self.on_change = on_change
        self.state = UIState(mode=mode)
        self.last_report: object | None = None
        self.progress = ProgressController(self._on_progress, total_ms=ramp_ms)

    def _apply(self, new_state: UIState) -> UIState:
        if new_state != self.state:
            self.state = new_state
            if self.on_change is not None:
                self.on_change(new_state)
        return self.state

    def _on_progress(self, percent: int) -> None:
        self._apply(transitions.progress_ticked(self.state, percent))

    def switch_mode(self, mode: Mode) -> UIState:
        return self._apply(transitions.switch_mode(self.state, mode))

    async def analyze(self, raw_text: str | None = None, raw_url: str | None = None) -> UIState:
        if not self.state.submit_enabled:
            return self.state

        self._apply(transitions.begin_validation(self.state))
        request = validate_input(self.state.mode, raw_text, raw_url)
        if isinstance(request, ValidationFailure):
            logger.info("analysis_blocked", reason=request.reason)
            return self._apply(transitions.validation_failed(self.state, request.message))

        self.last_report = None
        self._apply(transitions.submission_started(self.state))
        self.progress.start()
        try:
            outcome = await self.orchestrator.submit(request)
        except BaseException as exc:
            self.progress.stop()
            message = CANCELLED_MESSAGE if isinstance(exc, asyncio.CancelledError) else str(exc)
            self._apply(transitions.submission_failed(self.state, render_error(message)))
            raise
        self.progress.stop()

        if isinstance(outcome, AnalysisError):
            return self._apply(transitions.submission_failed(self.state, render_error(outcome.message, outcome.details)))

        try:
            view = render_report(outcome)
        except ReportShapeError as exc:
            return self._apply(transitions.submission_failed(self.state, render_error(str(exc), exc.details)))
        self.last_report = outcome
        return self._apply(transitions.submission_succeeded(self.state, view))
