from __future__ import annotations

import pytest

from resume_insight.models import JobPosting, ScoredJob
from resume_insight.scorer import MatchScorer, parse_match
from tests.conftest import FakeCompleter


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("87%", 87),
        ("  42", 42),
        ("100", 100),
        ("73.9", 73),
        ("150", 100),
        ("-5", 0),
        ("about 80", 0),
        ("N/A", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_parse_match(raw, expected) -> None:
    assert parse_match(raw) == expected


def test_posting_defaults_fill_missing_fields() -> None:
    posting = JobPosting.from_jsearch({"job_title": "Backend Developer", "job_country": "Canada"})
    scored = ScoredJob.from_posting(posting, 87)
    assert scored == ScoredJob(
        title="Backend Developer",
        company="Unknown",
        location="Unknown City, Canada",
        url="",
        match=87,
    )


def test_job_text_joins_title_and_description() -> None:
    posting = JobPosting(title="SRE", description="Keep things up")
    assert posting.job_text == "SRE Keep things up"
    assert JobPosting().job_text == " "


def test_non_numeric_score_keeps_posting() -> None:
    completer = FakeCompleter(matches=["great fit!", "55"])
    postings = [JobPosting(title="A"), JobPosting(title="B")]
    scored = MatchScorer(completer).score_all("resume", postings)
    assert [(s.title, s.match) for s in scored] == [("A", 0), ("B", 55)]


def test_only_first_max_postings_are_scored() -> None:
    completer = FakeCompleter(matches=[str(i) for i in range(12)])
    postings = [JobPosting(title=f"job {i}") for i in range(12)]
    scored = MatchScorer(completer, max_postings=10).score_all("resume", postings)
    assert len(scored) == 10
    assert len(completer.calls) == 10


def test_prompt_includes_resume_and_job_text() -> None:
    completer = FakeCompleter(matches=["10"])
    MatchScorer(completer).score_all("my resume", [JobPosting(title="Dev", description="Build APIs")])
    user = completer.calls[0][1]
    assert "Resume: my resume" in user
    assert "Job Description: Dev Build APIs" in user


class _TitleEcho:
    """Scores each posting with the number in its title, whatever order calls arrive."""

    def complete(self, system: str, user: str) -> str:
        return user.split("Job Description: job ")[1].split(" ")[0]


def test_parallel_scoring_preserves_order() -> None:
    postings = [JobPosting(title=f"job {i}") for i in range(8)]
    scored = MatchScorer(_TitleEcho(), workers=4).score_all("resume", postings)
    assert [s.match for s in scored] == list(range(8))
    assert [s.title for s in scored] == [f"job {i}" for i in range(8)]


def test_no_postings_makes_no_calls() -> None:
    completer = FakeCompleter()
    assert MatchScorer(completer).score_all("resume", []) == []
    assert completer.calls == []
