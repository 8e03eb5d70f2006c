from __future__ import annotations

import json
import os

import pytest

os.environ.setdefault("LOG_TO_FILE", "false")

from resume_insight.analyzer import ANALYSIS_PROMPT  # noqa: E402
from resume_insight.config import Settings  # noqa: E402
from resume_insight.keywords import KEYWORDS_PROMPT  # noqa: E402
from resume_insight.models import JobPosting  # noqa: E402
from resume_insight.scorer import MATCH_SYSTEM_PROMPT  # noqa: E402
from resume_insight.sources.base import JobSearchBase  # noqa: E402


class FakeCompleter:
    """Answers by system prompt; match replies are consumed in order."""

    def __init__(self, analysis: str = "{}", keywords: str = "", matches: list[str] | None = None) -> None:
        self.analysis = analysis
        self.keywords = keywords
        self.matches = list(matches or [])
        self.calls: list[tuple[str, str]] = []

    def complete(self, system: str, user: str) -> str:
        self.calls.append((system, user))
        if system == ANALYSIS_PROMPT:
            return self.analysis
        if system == KEYWORDS_PROMPT:
            return self.keywords
        if system == MATCH_SYSTEM_PROMPT:
            return self.matches.pop(0) if self.matches else ""
        raise AssertionError(f"unexpected prompt: {system[:40]}")


class FakeSource(JobSearchBase):
    def __init__(self, postings: list[JobPosting] | None = None) -> None:
        self.postings = postings or []
        self.queries: list[str | None] = []

    def search(self, query: str | None) -> list[JobPosting]:
        self.queries.append(query)
        return list(self.postings)


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="test-key", rapid_api_key="rapid-key")


@pytest.fixture
def backend_analysis() -> str:
    return json.dumps({
        "summary": "Experienced backend engineer",
        "strengths": ["Go", "distributed systems"],
        "suggestedRoles": ["Backend Engineer"],
    })
