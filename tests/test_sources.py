from __future__ import annotations

import requests

from resume_insight.config import Settings
from resume_insight.models import AnalysisResult, Insight, ScoredJob
from resume_insight.report import render_report
from resume_insight.sources import JSearchSource


class _FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, bad_json: bool = False) -> None:
        self._payload = payload
        self.status_code = status_code
        self._bad_json = bad_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value")
        return self._payload


class _FakeSession:
    def __init__(self, response=None, exc: Exception | None = None) -> None:
        self.response = response
        self.exc = exc
        self.calls: list[dict] = []

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response


def _source(session, api_key: str = "rapid-key") -> JSearchSource:
    return JSearchSource(Settings(rapid_api_key=api_key), session=session)


def test_search_maps_postings_and_sends_one_page_query() -> None:
    session = _FakeSession(_FakeResponse({"data": [
        {
            "job_title": "Backend Developer",
            "employer_name": "Acme",
            "job_city": "Toronto",
            "job_country": "CA",
            "job_apply_link": "https://acme.example/apply",
            "job_description": "Go services",
        },
        {"job_title": "SRE"},
    ]}))
    postings = _source(session).search("go")

    assert [p.title for p in postings] == ["Backend Developer", "SRE"]
    assert postings[0].employer_name == "Acme"
    assert postings[0].apply_link == "https://acme.example/apply"
    assert postings[1].city is None

    call = session.calls[0]
    assert call["url"] == "https://jsearch.p.rapidapi.com/search"
    assert call["params"] == {"query": "go", "page": "1", "num_pages": "1"}
    assert call["headers"]["X-RapidAPI-Key"] == "rapid-key"
    assert call["headers"]["X-RapidAPI-Host"] == "jsearch.p.rapidapi.com"


def test_network_error_yields_empty_list() -> None:
    session = _FakeSession(exc=requests.ConnectionError("boom"))
    assert _source(session).search("go") == []


def test_http_error_yields_empty_list() -> None:
    assert _source(_FakeSession(_FakeResponse({}, status_code=500))).search("go") == []
    assert _source(_FakeSession(_FakeResponse({}, status_code=403))).search("go") == []


def test_malformed_body_yields_empty_list() -> None:
    assert _source(_FakeSession(_FakeResponse(bad_json=True))).search("go") == []
    assert _source(_FakeSession(_FakeResponse({"data": "nope"}))).search("go") == []
    assert _source(_FakeSession(_FakeResponse(["not", "a", "dict"]))).search("go") == []
    assert _source(_FakeSession(_FakeResponse({}))).search("go") == []


def test_non_dict_hits_are_skipped() -> None:
    session = _FakeSession(_FakeResponse({"data": ["junk", {"job_title": "QA"}]}))
    assert [p.title for p in _source(session).search("qa")] == ["QA"]


def test_missing_query_or_key_skips_the_call() -> None:
    session = _FakeSession(_FakeResponse({"data": []}))
    assert _source(session).search(None) == []
    assert _source(session).search("") == []
    assert _source(session, api_key="").search("go") == []
    assert session.calls == []


def test_non_string_fields_are_coerced() -> None:
    session = _FakeSession(_FakeResponse({"data": [
        {"job_title": "Dev", "employer_name": 12345, "job_city": ["x"], "job_country": True},
    ]}))
    posting = _source(session).search("dev")[0]
    assert posting.employer_name == "12345"
    assert posting.city is None
    assert posting.country is None

    scored = ScoredJob.from_posting(posting, 40)
    assert scored.company == "12345"
    assert scored.location == "Unknown City, Unknown Country"
    html = render_report(Insight(AnalysisResult(), ["dev"], [scored]))
    assert "<td>12345</td>" in html
