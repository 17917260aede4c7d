from pydantic import BaseModel, ConfigDict


class FactorResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    factor: str | None = None
    value: float | None = None
    suggestion_value: float | None = None
    score: float | None = None
    suggestion: str | None = None


class ReportV1(BaseModel):
    """Keyword/recommendation report; ``semantic_score`` is a 0-1 fraction."""

    model_config = ConfigDict(extra="allow")

    version: str | None = None
    mode: str | None = None
    keywords: list[str] | None = None
    readability: float | None = None
    semantic_score: float | None = None
    recommendations: list[str] | None = None


class ReportV2(BaseModel):
    """Per-factor report; ``semantic_score`` is on a 0-100 scale."""

    model_config = ConfigDict(extra="allow")

    version: str | None = None
    mode: str | None = None
    factors_analyzed: int | None = None
    readability: float | None = None
    semantic_score: float | None = None
    results: list[FactorResult] | None = None
