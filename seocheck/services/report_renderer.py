from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union

from pydantic import ValidationError

from seocheck.schemas.report import FactorResult, ReportV1, ReportV2

NOT_AVAILABLE = "N/A"
MALFORMED_REPORT_MESSAGE = "Core engine returned a malformed report."

ON_TARGET_LIMIT = 0.05
CAUTION_LIMIT = 0.20

Band = Literal["on-target", "caution", "off-target"]


class ReportShapeError(ValueError):
    """The report body could not be read as either report schema."""

    def __init__(self, details: str | None = None) -> None:
        super().__init__(MALFORMED_REPORT_MESSAGE)
        self.details = details


@dataclass(frozen=True)
class FactorRow:
    factor: str
    value: float
    suggestion_value: str
    score: float
    suggestion: str
    deviation: float
    band: Band


@dataclass(frozen=True)
class ReportV1View:
    version: str
    keywords: str
    readability: str
    semantic_score: str
    recommendations: tuple[str, ...] = ()
    kind: Literal["v1"] = "v1"


@dataclass(frozen=True)
class ReportV2View:
    version: str
    mode: str
    factor_count: int
    readability: str
    semantic_score: str
    rows: tuple[FactorRow, ...] = ()
    kind: Literal["v2"] = "v2"


@dataclass(frozen=True)
class ErrorPanel:
    message: str
    details: str | None = None
    kind: Literal["error"] = "error"


ReportView = Union[ReportV1View, ReportV2View]


def deviation(value: float | None, suggestion_value: float | None) -> float:
    if suggestion_value is None or suggestion_value == 0:
        return 0.0
    # Rounded so that exact band limits (e.g. 1.05 vs 1.0) are not lost to float noise.
    return round(abs((value or 0.0) - suggestion_value) / abs(suggestion_value), 9)


def classify(dev: float) -> Band:
    if dev <= ON_TARGET_LIMIT:
        return "on-target"
    if dev <= CAUTION_LIMIT:
        return "caution"
    return "off-target"


def _number(value: float | None) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{value:g}"


def _percent(value: float | None, scale: float = 1.0) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{value * scale:.1f}%"


def _text(value: str | None) -> str:
    return value if value else NOT_AVAILABLE


def factor_row(result: FactorResult) -> FactorRow:
    dev = deviation(result.value, result.suggestion_value)
    return FactorRow(
        factor=_text(result.factor),
        value=result.value or 0.0,
        suggestion_value=_number(result.suggestion_value),
        score=result.score or 0.0,
        suggestion=_text(result.suggestion),
        deviation=dev,
        band=classify(dev),
    )


def render_report(payload: Any) -> ReportView:
    if not isinstance(payload, dict):
        raise ReportShapeError("Report body is not a JSON object.")

    try:
        if payload.get("results") is not None:
            return _render_v2(ReportV2.model_validate(payload))
        return _render_v1(ReportV1.model_validate(payload))
    except ValidationError as exc:
        raise ReportShapeError(str(exc)) from exc


def _render_v1(report: ReportV1) -> ReportV1View:
    readability = NOT_AVAILABLE if report.readability is None else f"{report.readability:g}%"
    return ReportV1View(
        version=_text(report.version),
        keywords=", ".join(report.keywords or []) or NOT_AVAILABLE,
        readability=readability,
        semantic_score=_percent(report.semantic_score, scale=100.0),
        recommendations=tuple(report.recommendations or ()),
    )


def _render_v2(report: ReportV2) -> ReportV2View:
    rows = tuple(factor_row(result) for result in report.results or ())
    count = report.factors_analyzed if report.factors_analyzed is not None else len(rows)
    return ReportV2View(
        version=_text(report.version),
        mode=_text(report.mode),
        factor_count=count,
        readability=_number(report.readability),
        semantic_score=_percent(report.semantic_score),
        rows=rows,
    )


def render_error(message: str | None, details: str | None = None) -> ErrorPanel:
    return ErrorPanel(message=message or "An unknown error occurred.", details=details or None)


# Terminal presentation

_RESET = "\033[0m"
_BOLD = "\033[1m"
_BAND_COLORS: dict[str, str] = {
    "on-target": "\033[32m",
    "caution": "\033[33m",
    "off-target": "\033[31m",
}
_ERROR_COLOR = "\033[31m"


@dataclass
class _Lines:
    color: bool
    lines: list[str] = field(default_factory=list)

    def paint(self, text: str, code: str) -> str:
        return f"{code}{text}{_RESET}" if self.color else text

    def add(self, text: str = "") -> None:
        self.lines.append(text)

    def label(self, name: str, value: object) -> None:
        self.add(f"{self.paint(name + ':', _BOLD)} {value}")


def render_text(view: ReportView | ErrorPanel, *, color: bool = True) -> str:
    out = _Lines(color=color)

    if isinstance(view, ErrorPanel):
        out.add(out.paint(f"Analysis Failed: {view.message}", _ERROR_COLOR))
        if view.details:
            out.add(f"Details: {view.details}")
        return "\n".join(out.lines)

    out.add(out.paint("Analysis Report", _BOLD))
    out.label("Version", view.version)

    if isinstance(view, ReportV1View):
        out.label("Keywords", view.keywords)
        out.label("Readability", view.readability)
        out.label("Semantic Score", view.semantic_score)
        out.add()
        out.add(out.paint("Recommendations:", _BOLD))
        for idx, item in enumerate(view.recommendations, start=1):
            out.add(f"  {idx}. {item}")
        return "\n".join(out.lines)

    out.label("Mode", view.mode)
    out.label("Factors Analyzed", view.factor_count)
    out.label("Readability", view.readability)
    out.label("Semantic Score", view.semantic_score)
    out.add()

    header = ("Factor", "Value", "Suggested", "Score", "Suggestion")
    cells = [header] + [
        (row.factor, f"{row.value:g}", row.suggestion_value, f"{row.score:g}", row.suggestion) for row in view.rows
    ]
    widths = [max(len(cell[i]) for cell in cells) for i in range(len(header))]
    out.add(out.paint("  ".join(h.ljust(w) for h, w in zip(header, widths)), _BOLD))
    for row, rendered in zip(view.rows, cells[1:]):
        line = "  ".join(c.ljust(w) for c, w in zip(rendered, widths))
        out.add(out.paint(line.rstrip(), _BAND_COLORS[row.band]))
    return "\n".join(out.lines)
