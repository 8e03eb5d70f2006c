"""Extract a short list of technical keywords from a resume."""
from __future__ import annotations

import re

from resume_insight.llm import Completer
from resume_insight.log import get_logger

log = get_logger(__name__)

KEYWORDS_PROMPT = (
    "Extract main technical keywords (like developer, designer, engineer, AI, data) "
    "from this text. Respond with comma-separated keywords only."
)

_DECORATION_RE = re.compile(r"[*\-•]")


def parse_keywords(raw: str, limit: int = 3) -> list[str]:
    """Split a comma list, dropping bullet decoration and empty entries."""
    cleaned = _DECORATION_RE.sub("", raw or "")
    words = [w.strip() for w in cleaned.split(",")]
    return [w for w in words if w][:limit]


class KeywordExtractor:
    def __init__(self, completer: Completer, limit: int = 3) -> None:
        self.completer = completer
        self.limit = limit

    def extract(self, resume_text: str) -> list[str]:
        raw = self.completer.complete(KEYWORDS_PROMPT, resume_text)
        keywords = parse_keywords(raw, self.limit)
        log.info("Extracted keywords: %s", keywords)
        return keywords
