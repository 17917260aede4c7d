from seocheck.client import state as transitions
from seocheck.client.state import UIState
from seocheck.services.report_renderer import ErrorPanel, ReportV1View


def _view() -> ReportV1View:
    return ReportV1View(version="mock-v1", keywords="seo", readability="85%", semantic_score="88.0%")


def test_submission_started_clears_previous_outcome():
    previous = UIState(phase="success", outcome=_view(), progress_percent=0)

    state = transitions.submission_started(previous)

    assert state.phase == "in_flight"
    assert state.outcome is None
    assert state.progress_percent == 0
    assert state.submit_enabled is False


def test_progress_is_capped_and_ignored_outside_flight():
    flying = transitions.submission_started(UIState())

    assert transitions.progress_ticked(flying, 150).progress_percent == 90
    assert transitions.progress_ticked(UIState(), 40) == UIState()


def test_success_and_error_are_mutually_exclusive():
    flying = transitions.submission_started(UIState())

    ok = transitions.submission_succeeded(flying, _view())
    failed = transitions.submission_failed(ok, ErrorPanel(message="boom"))

    assert ok.phase == "success" and ok.submit_enabled
    assert failed.phase == "error"
    assert failed.outcome == ErrorPanel(message="boom")


def test_switch_mode_resets_results():
    done = transitions.submission_succeeded(transitions.submission_started(UIState()), _view())

    state = transitions.switch_mode(done, "url")

    assert state == UIState(mode="url")


def test_switch_mode_during_flight_keeps_request_state():
    flying = transitions.submission_started(UIState())

    state = transitions.switch_mode(flying, "url")

    assert state.mode == "url"
    assert state.phase == "in_flight"


def test_validation_failure_sets_prompt():
    state = transitions.validation_failed(transitions.begin_validation(UIState()), "too short")

    assert state.phase == "idle"
    assert state.prompt == "too short"
