"""JSearch API (RapidAPI) — aggregated job listings."""
from __future__ import annotations

import requests

from resume_insight.config import Settings
from resume_insight.log import get_logger
from resume_insight.models import JobPosting
from resume_insight.sources.base import JobSearchBase

log = get_logger(__name__)


class JSearchSource(JobSearchBase):
    """One page of JSearch results; every failure yields an empty list."""

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self.api_key: str = settings.rapid_api_key
        self.host: str = settings.jsearch_host
        self.timeout: float = settings.request_timeout
        self.session = session or requests.Session()

    def _fetch(self, query: str) -> list[JobPosting]:
        r = self.session.get(
            f"https://{self.host}/search",
            params={"query": query, "page": "1", "num_pages": "1"},
            headers={
                "X-RapidAPI-Key": self.api_key,
                "X-RapidAPI-Host": self.host,
            },
            timeout=self.timeout,
        )
        if r.status_code == 403:
            log.warning("JSearch 403 — check the RapidAPI subscription for %s", self.host)
            return []
        r.raise_for_status()
        data = r.json()

        hits = data.get("data") if isinstance(data, dict) else None
        if not isinstance(hits, list):
            log.warning("JSearch returned an unexpected body for %r", query)
            return []
        return [JobPosting.from_jsearch(hit) for hit in hits if isinstance(hit, dict)]

    def search(self, query: str | None) -> list[JobPosting]:
        if not query:
            log.warning("No keyword to search jobs with — skipping job search")
            return []
        if not self.api_key:
            log.warning("RAPID_API_KEY not set — skipping job search")
            return []
        try:
            postings = self._fetch(query)
        except (requests.RequestException, ValueError) as exc:
            log.warning("JSearch query=%r error: %s", query, exc)
            return []
        log.info("JSearch query=%r returned %d postings", query, len(postings))
        return postings
