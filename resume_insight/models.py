"""Data models for resume analysis and scored job postings."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AnalysisResult:
    summary: str = ""
    strengths: list[str] = field(default_factory=list)
    suggested_roles: list[str] = field(default_factory=list)


def _text(value: object) -> str | None:
    """API fields as text; numbers are stringified, other shapes dropped."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


@dataclass
class JobPosting:
    """One record from the job search API; every field may be missing."""

    title: str | None = None
    employer_name: str | None = None
    city: str | None = None
    country: str | None = None
    apply_link: str | None = None
    description: str | None = None
    raw: dict = field(default_factory=dict)

    @classmethod
    def from_jsearch(cls, hit: dict) -> JobPosting:
        return cls(
            title=_text(hit.get("job_title")),
            employer_name=_text(hit.get("employer_name")),
            city=_text(hit.get("job_city")),
            country=_text(hit.get("job_country")),
            apply_link=_text(hit.get("job_apply_link")),
            description=_text(hit.get("job_description")),
            raw=hit,
        )

    @property
    def job_text(self) -> str:
        return f"{self.title or ''} {self.description or ''}"


@dataclass
class ScoredJob:
    title: str
    company: str
    location: str
    url: str
    match: int

    @classmethod
    def from_posting(cls, posting: JobPosting, match: int) -> ScoredJob:
        city = posting.city or "Unknown City"
        country = posting.country or "Unknown Country"
        return cls(
            title=posting.title or "",
            company=posting.employer_name or "Unknown",
            location=f"{city}, {country}",
            url=posting.apply_link or "",
            match=match,
        )


@dataclass
class Insight:
    """Everything the report shows for one resume."""

    analysis: AnalysisResult
    keywords: list[str]
    jobs: list[ScoredJob]
