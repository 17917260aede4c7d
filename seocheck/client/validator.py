from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

from seocheck.utils.url import is_valid_http_url

Mode = Literal["text", "url"]

MIN_CONTENT_LENGTH = 50

CONTENT_TOO_SHORT = "content too short"
MISSING_URL = "missing URL"
INVALID_URL = "invalid URL format"

_PROMPTS = {
    CONTENT_TOO_SHORT: f"Please enter at least {MIN_CONTENT_LENGTH} characters of content for a valid audit.",
    MISSING_URL: "Please enter a URL first!",
    INVALID_URL: "Invalid URL. Please ensure it starts with http:// or https:// and is correctly formatted.",
}


@dataclass(frozen=True)
class TextAnalysisRequest:
    content: str
    mode: Literal["text"] = "text"

    def payload(self) -> dict[str, Any]:
        return {"content": self.content}


@dataclass(frozen=True)
class UrlAnalysisRequest:
    url: str
    mode: Literal["url"] = "url"

    def payload(self) -> dict[str, Any]:
        return {"url": self.url}


AnalysisRequest = Union[TextAnalysisRequest, UrlAnalysisRequest]


@dataclass(frozen=True)
class ValidationFailure:
    reason: str

    @property
    def message(self) -> str:
        return _PROMPTS[self.reason]


def validate_input(mode: Mode, raw_text: str | None, raw_url: str | None) -> AnalysisRequest | ValidationFailure:
    if mode == "text":
        content = (raw_text or "").strip()
        if len(content) < MIN_CONTENT_LENGTH:
            return ValidationFailure(CONTENT_TOO_SHORT)
        return TextAnalysisRequest(content=content)

    url = (raw_url or "").strip()
    if not url:
        return ValidationFailure(MISSING_URL)
    if not is_valid_http_url(url):
        return ValidationFailure(INVALID_URL)
    return UrlAnalysisRequest(url=url)
