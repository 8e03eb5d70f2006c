"""
Resume insight pipeline.

Runs: structured analysis → keywords → job search → match scoring.
"""
from __future__ import annotations

from resume_insight.analyzer import StructuredAnalyzer
from resume_insight.config import Settings
from resume_insight.keywords import KeywordExtractor
from resume_insight.llm import CompletionClient, Completer
from resume_insight.log import get_logger
from resume_insight.models import Insight
from resume_insight.scorer import MatchScorer
from resume_insight.sources import JobSearchBase, JSearchSource

log = get_logger(__name__)


class ResumeInsightPipeline:
    def __init__(self, settings: Settings, completer: Completer, source: JobSearchBase) -> None:
        self.settings = settings
        self.analyzer = StructuredAnalyzer(completer, settings.fallback_roles)
        self.keywords = KeywordExtractor(completer, settings.max_keywords)
        self.source = source
        self.scorer = MatchScorer(completer, settings.max_postings, settings.score_workers)

    def run(self, resume_text: str) -> Insight:
        # 1. Structured analysis; a malformed reply aborts the request
        analysis = self.analyzer.analyze(resume_text)

        # 2. Keywords
        keywords = self.keywords.extract(resume_text)

        # 3. Job search; failures come back as an empty list
        postings = self.source.search(keywords[0] if keywords else None)

        # 4. Score
        jobs = self.scorer.score_all(resume_text, postings)

        log.info(
            "Run complete — keywords=%d, postings=%d, scored=%d",
            len(keywords), len(postings), len(jobs),
        )
        return Insight(analysis=analysis, keywords=keywords, jobs=jobs)


def build_pipeline(settings: Settings) -> ResumeInsightPipeline:
    return ResumeInsightPipeline(
        settings,
        completer=CompletionClient(settings),
        source=JSearchSource(settings),
    )
