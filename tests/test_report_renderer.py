import pytest

from seocheck.services.report_renderer import (
    ErrorPanel,
    ReportShapeError,
    ReportV1View,
    ReportV2View,
    classify,
    deviation,
    render_error,
    render_report,
    render_text,
)

V1_REPORT = {
    "version": "mock-v1-text-mode",
    "keywords": ["content", "marketing", "strategy"],
    "readability": 85,
    "semantic_score": 0.88,
    "recommendations": ["Add a clear H1 heading", "Use the primary keyword early", "Link cornerstone content"],
}

V2_REPORT = {
    "version": "core-v2",
    "mode": "text",
    "factors_analyzed": 4,
    "readability": 61,
    "semantic_score": 73.5,
    "results": [
        {"factor": "keyword_density", "value": 2.0, "suggestion_value": 2.0, "score": 100, "suggestion": "Keep it"},
        {"factor": "word_count", "value": 115, "suggestion_value": 100, "score": 80, "suggestion": "Trim a little"},
        {"factor": "headings", "value": 1, "suggestion_value": 3, "score": 30, "suggestion": "Add H2s"},
        {"factor": "links", "value": 7},
    ],
}


def test_v1_report_view():
    view = render_report(V1_REPORT)

    assert isinstance(view, ReportV1View)
    assert view.version == "mock-v1-text-mode"
    assert view.keywords == "content, marketing, strategy"
    assert view.readability == "85%"
    assert view.semantic_score == "88.0%"
    assert view.recommendations == tuple(V1_REPORT["recommendations"])


def test_v2_report_view_bands():
    view = render_report(V2_REPORT)

    assert isinstance(view, ReportV2View)
    assert view.mode == "text"
    assert view.factor_count == 4
    assert view.semantic_score == "73.5%"
    assert [row.band for row in view.rows] == ["on-target", "caution", "off-target", "on-target"]


def test_v2_missing_optional_fields_use_defaults():
    view = render_report({"results": [{}]})

    row = view.rows[0]
    assert view.version == "N/A"
    assert view.mode == "N/A"
    assert view.factor_count == 1
    assert view.readability == "N/A"
    assert row.factor == "N/A"
    assert row.value == 0
    assert row.suggestion_value == "N/A"
    assert row.score == 0
    assert row.suggestion == "N/A"
    assert row.deviation == 0


def test_v1_missing_fields_use_defaults():
    view = render_report({"version": "core-v1"})

    assert view.keywords == "N/A"
    assert view.readability == "N/A"
    assert view.semantic_score == "N/A"
    assert view.recommendations == ()


@pytest.mark.parametrize(
    ("value", "suggestion_value", "expected"),
    [
        (5, None, 0.0),
        (5, 0, 0.0),
        (105, 100, 0.05),
        (120, 100, 0.2),
        (1.05, 1.0, 0.05),
        (50, 100, 0.5),
    ],
)
def test_deviation(value, suggestion_value, expected):
    assert deviation(value, suggestion_value) == pytest.approx(expected)


@pytest.mark.parametrize(
    ("dev", "band"),
    [
        (0.0, "on-target"),
        (0.05, "on-target"),
        (0.0500001, "caution"),
        (0.2, "caution"),
        (0.2000001, "off-target"),
        (3.0, "off-target"),
    ],
)
def test_classify_band_limits(dev, band):
    assert classify(dev) == band


def test_boundary_rows_land_in_closed_bands():
    view = render_report(
        {
            "results": [
                {"factor": "a", "value": 105, "suggestion_value": 100},
                {"factor": "b", "value": 1.2, "suggestion_value": 1.0},
            ]
        }
    )

    assert [row.band for row in view.rows] == ["on-target", "caution"]


@pytest.mark.parametrize("payload", [None, [1, 2], "text", {"readability": "very high"}])
def test_malformed_report_raises_shape_error(payload):
    with pytest.raises(ReportShapeError):
        render_report(payload)


def test_render_error_defaults():
    assert render_error(None) == ErrorPanel(message="An unknown error occurred.")
    assert render_error("Core engine failed (Bad Gateway).", "") == ErrorPanel(message="Core engine failed (Bad Gateway).")


def test_render_text_v1_plain():
    text = render_text(render_report(V1_REPORT), color=False)

    assert "Version: mock-v1-text-mode" in text
    assert "Keywords: content, marketing, strategy" in text
    assert "Semantic Score: 88.0%" in text
    assert "  1. Add a clear H1 heading" in text
    assert "\033[" not in text


def test_render_text_v2_colors_rows_by_band():
    text = render_text(render_report(V2_REPORT), color=True)
    lines = text.splitlines()

    density = next(line for line in lines if "keyword_density" in line)
    headings = next(line for line in lines if "headings" in line)
    assert density.startswith("\033[32m")
    assert headings.startswith("\033[31m")


def test_render_text_error_panel():
    text = render_text(ErrorPanel(message="Core engine is offline or unreachable.", details="try later"), color=False)

    assert text == "Analysis Failed: Core engine is offline or unreachable.\nDetails: try later"


def test_negative_target_uses_distance_relative_to_target_size():
    view = render_report({"results": [{"factor": "sentiment", "value": -110, "suggestion_value": -100}]})

    row = view.rows[0]
    assert row.deviation == pytest.approx(0.1)
    assert row.band == "caution"
