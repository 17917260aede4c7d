from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal, Union

from seocheck.client.progress import HOLD_PERCENT
from seocheck.client.validator import Mode
from seocheck.services.report_renderer import ErrorPanel, ReportView

Phase = Literal["idle", "validating", "in_flight", "success", "error"]
Outcome = Union[ReportView, ErrorPanel]


@dataclass(frozen=True)
class UIState:
    mode: Mode = "text"
    phase: Phase = "idle"
    progress_percent: int = 0
    submit_enabled: bool = True
    prompt: str | None = None
    outcome: Outcome | None = None


def switch_mode(state: UIState, mode: Mode) -> UIState:
    if state.phase == "in_flight":
        return replace(state, mode=mode)
    return UIState(mode=mode)


def begin_validation(state: UIState) -> UIState:
    return replace(state, phase="validating", prompt=None)


def validation_failed(state: UIState, message: str) -> UIState:
    return replace(state, phase="idle", prompt=message)


def submission_started(state: UIState) -> UIState:
    return replace(
        state,
        phase="in_flight",
        progress_percent=0,
        submit_enabled=False,
        prompt=None,
        outcome=None,
    )


def progress_ticked(state: UIState, percent: int) -> UIState:
    if state.phase != "in_flight":
        return state
    return replace(state, progress_percent=max(0, min(HOLD_PERCENT, percent)))


def submission_succeeded(state: UIState, view: ReportView) -> UIState:
    return replace(state, phase="success", progress_percent=0, submit_enabled=True, outcome=view)


def submission_failed(state: UIState, panel: ErrorPanel) -> UIState:
    return replace(state, phase="error", progress_percent=0, submit_enabled=True, outcome=panel)
