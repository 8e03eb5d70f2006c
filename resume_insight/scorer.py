"""Score job postings against a resume with one completion call each."""
from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from resume_insight.llm import Completer
from resume_insight.log import get_logger
from resume_insight.models import JobPosting, ScoredJob

log = get_logger(__name__)

MATCH_SYSTEM_PROMPT = "You are an HR assistant. Evaluate how well a resume matches a job description."

MATCH_USER_PROMPT = """\
Resume: {resume_text}
Job Description: {job_text}
Rate the match as a percentage (0-100%) based on skills and relevance. Respond with only the number."""

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_match(raw: str | None) -> int:
    """Leading integer of a reply like "87%", clamped to 0..100; 0 if none."""
    m = _LEADING_INT_RE.match(raw or "")
    if not m:
        return 0
    return max(0, min(100, int(m.group(1))))


class MatchScorer:
    def __init__(self, completer: Completer, max_postings: int = 10, workers: int = 1) -> None:
        self.completer = completer
        self.max_postings = max_postings
        self.workers = max(1, workers)

    def score(self, resume_text: str, posting: JobPosting) -> ScoredJob:
        raw = self.completer.complete(
            MATCH_SYSTEM_PROMPT,
            MATCH_USER_PROMPT.format(resume_text=resume_text, job_text=posting.job_text),
        )
        if not _LEADING_INT_RE.match(raw or ""):
            log.debug("Unparseable match score %r for %r, using 0", (raw or "")[:40], posting.title)
        return ScoredJob.from_posting(posting, parse_match(raw))

    def score_all(self, resume_text: str, postings: Sequence[JobPosting]) -> list[ScoredJob]:
        """Score the first max_postings postings, keeping their order."""
        batch = list(postings[: self.max_postings])
        if not batch:
            return []
        if self.workers == 1:
            scored = [self.score(resume_text, p) for p in batch]
        else:
            with ThreadPoolExecutor(max_workers=min(self.workers, len(batch))) as pool:
                scored = list(pool.map(lambda p: self.score(resume_text, p), batch))
        log.info("Scored %d postings", len(scored))
        return scored
