"""Resume analysis and job matching backed by a chat completion service."""

from .config import Settings, load_settings
from .models import AnalysisResult, Insight, JobPosting, ScoredJob
from .pipeline import ResumeInsightPipeline, build_pipeline
from .report import render_report

__all__ = [
    "Settings", "load_settings",
    "AnalysisResult", "Insight", "JobPosting", "ScoredJob",
    "ResumeInsightPipeline", "build_pipeline", "render_report",
]
