import re

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
_SPACE_RE = re.compile(r"\s+")

MIN_KEYWORD_LENGTH = 4
MAX_KEYWORDS = 10
MAX_REPORTED_KEYWORDS = 5


def words(text: str) -> list[str]:
    cleaned = _NON_ALNUM_RE.sub("", text.lower())
    return [token for token in _SPACE_RE.split(cleaned) if token]


def extract_keywords(text: str, limit: int = MAX_REPORTED_KEYWORDS) -> list[str]:
    seen: set[str] = set()
    keywords: list[str] = []
    for token in words(text):
        if len(token) < MIN_KEYWORD_LENGTH or token in seen:
            continue
        seen.add(token)
        keywords.append(token)
    return keywords[:MAX_KEYWORDS][:limit]