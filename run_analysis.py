#!/usr/bin/env python3
"""Analyze a resume from the command line and write the HTML report."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from resume_insight.config import load_settings
from resume_insight.errors import ResumeInsightError
from resume_insight.extractor import resolve_resume_text
from resume_insight.log import get_logger
from resume_insight.pipeline import build_pipeline
from resume_insight.report import render_report, write_report

log = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("resume", nargs="?", type=Path, help="PDF, DOCX or text resume")
    parser.add_argument("--text", help="resume text, used when no file is given")
    parser.add_argument("-o", "--output", type=Path, help="where to write the HTML report")
    args = parser.parse_args(argv)

    if args.resume is not None and not args.resume.is_file():
        parser.error(f"{args.resume} is not a file")

    settings = load_settings()
    try:
        resume_text = resolve_resume_text(args.resume, text=args.text)
        insight = build_pipeline(settings).run(resume_text)
    except ResumeInsightError as exc:
        log.error("Analysis failed: %s", exc)
        return 1

    path = write_report(render_report(insight), args.output)
    log.info("Keywords: %s", ", ".join(insight.keywords) or "none")
    log.info("Jobs scored: %d", len(insight.jobs))
    log.info("Report: %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
