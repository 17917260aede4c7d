from __future__ import annotations

import asyncio
from typing import Any

from seocheck.core.logging import get_logger
from seocheck.utils.text import extract_keywords
from seocheck.utils.url import display_hostname

logger = get_logger(__name__)

MOCK_VERSION = "mock-v1"

TEXT_RECOMMENDATIONS = (
    "Add a clear H1 heading",
    "Use the primary keyword in the first 100 words",
    "Add internal links to cornerstone content",
)


def _url_recommendations(url: str) -> list[str]:
    return [
        f"Review the title tag and meta description of {url}",
        "Check that the page has a single H1 and a logical H2/H3 outline",
        "Tip: set CORE_ENGINE_URL to run a live audit instead of this mock report",
    ]


def url_subject(url: str) -> str:
    return f"Placeholder page content fetched from {url} for keyword and readability analysis"


def synthesize_text_report(content: str) -> dict[str, Any]:
    return {
        "version": f"{MOCK_VERSION}-text-mode",
        "mode": "text",
        "keywords": extract_keywords(content),
        "readability": 85,
        "semantic_score": 0.88,
        "recommendations": list(TEXT_RECOMMENDATIONS),
    }


def synthesize_url_report(url: str) -> dict[str, Any]:
    extracted = extract_keywords(url_subject(url))
    keywords = ["url-audit", extracted[0] if extracted else "analysis", display_hostname(url)]
    return {
        "version": f"{MOCK_VERSION}-url-mode",
        "mode": "url",
        "keywords": keywords,
        "readability": 55,
        "semantic_score": 0.52,
        "recommendations": _url_recommendations(url),
    }


class MockEngine:
    """Deterministic stand-in used when no core engine is configured."""

    def __init__(self, delay_ms: int = 4500) -> None:
        self.delay_ms = delay_ms

    def synthesize(self, *, content: str | None, url: str | None) -> dict[str, Any]:
        url = (url or "").strip()
        if url:
            return synthesize_url_report(url)
        return synthesize_text_report(content or "")

    async def analyze(self, *, content: str | None, url: str | None) -> dict[str, Any]:
        report = self.synthesize(content=content, url=url)
        if self.delay_ms:
            # Simulated latency so clients can exercise their progress feedback.
            await asyncio.sleep(self.delay_ms / 1000)
        logger.info("mock_report_synthesized", version=report["version"], keywords=len(report["keywords"]))
        return report
