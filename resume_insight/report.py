"""Render the analysis report, the error fragment, and the upload form as HTML."""
from __future__ import annotations

from datetime import datetime, timezone
from html import escape
from pathlib import Path
from urllib.parse import urlparse

from resume_insight.config import REPORTS_DIR
from resume_insight.log import get_logger
from resume_insight.models import Insight, ScoredJob

log = get_logger(__name__)

_STYLE = """\
    body { font-family: 'Segoe UI', sans-serif; background: #f9fafb; padding: 40px; }
    .container { max-width: 950px; margin: auto; background: #fff; padding: 30px; border-radius: 10px; box-shadow: 0 4px 10px rgba(0,0,0,0.1); }
    h1, h2 { text-align: center; color: #1e3a8a; }
    p { color: #1f2937; line-height: 1.6; }
    .insights { display: grid; grid-template-columns: 1fr 1fr; gap: 20px; margin-bottom: 30px; }
    .card { background: #f8fafc; padding: 20px; border-radius: 12px; border: 1px solid #e2e8f0; box-shadow: 0 2px 5px rgba(0,0,0,0.05); }
    .card h3 { color: #1e40af; margin-bottom: 10px; }
    #jobsTable { display: none; width: 100%; border-collapse: collapse; margin-top: 25px; }
    th, td { padding: 12px; border-bottom: 1px solid #ddd; text-align: left; }
    th { background: #2563eb; color: white; }
    tr:hover { background: #eef2ff; }
    a { color: #2563eb; text-decoration: none; }
    a:hover { text-decoration: underline; }
    button { display: block; margin: 20px auto; padding: 10px 20px; background: #2563eb; color: white; border: none; border-radius: 5px; cursor: pointer; }
    textarea { width: 100%; min-height: 220px; }
    .error { color: #b91c1c; }"""


def _page(title: str, body: list[str]) -> str:
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="UTF-8">',
        f"  <title>{escape(title)}</title>",
        "  <style>",
        _STYLE,
        "  </style>",
        "</head>",
        "<body>",
        '  <div class="container">',
        *body,
        "  </div>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines)


def _card(heading: str, content: str) -> list[str]:
    return [
        '      <div class="card">',
        f"        <h3>{heading}</h3>",
        f"        <p>{content}</p>",
        "      </div>",
    ]


def _lines(items: list[str]) -> str:
    return "<br>".join(escape(i) for i in items)


def _apply_link(url: str) -> str:
    if urlparse(url.strip()).scheme.lower() not in ("http", "https"):
        return "—"
    return f'<a href="{escape(url.strip())}" target="_blank">Apply</a>'


def _job_row(job: ScoredJob) -> list[str]:
    link = _apply_link(job.url)
    return [
        "        <tr>",
        f"          <td>{escape(job.title)}</td>",
        f"          <td>{escape(job.company)}</td>",
        f"          <td>{escape(job.location)}</td>",
        f"          <td>{job.match}%</td>",
        f"          <td>{link}</td>",
        "        </tr>",
    ]


def render_report(insight: Insight) -> str:
    analysis = insight.analysis
    body: list[str] = [
        "    <h1>AI Resume Analysis</h1>",
        "    <h2>Insights</h2>",
        '    <div class="insights">',
        *_card("\U0001f4cb Summary", escape(analysis.summary)),
        *_card("\U0001f4aa Key Strengths", _lines(analysis.strengths)),
        *_card("\U0001f9e0 Technical Skills", escape(", ".join(insight.keywords))),
        *_card("\U0001f3af Suggested Roles", _lines(analysis.suggested_roles)),
        "    </div>",
        "    <button onclick=\"document.getElementById('jobsTable').style.display='table'\">"
        "Show Job Matches</button>",
        '    <table id="jobsTable">',
        "        <tr>",
        "          <th>Job Title</th>",
        "          <th>Company</th>",
        "          <th>Location</th>",
        "          <th>Match %</th>",
        "          <th>Apply</th>",
        "        </tr>",
    ]
    for job in insight.jobs:
        body.extend(_job_row(job))
    body.append("    </table>")

    log.debug("Rendered report with %d job rows", len(insight.jobs))
    return _page("CV Analysis & Job Matches", body)


def render_error(message: str) -> str:
    return f'<p class="error">Error: {escape(message)}</p>'


def render_form() -> str:
    body = [
        "    <h1>AI Resume Analysis</h1>",
        '    <form action="/analyze" method="post" enctype="multipart/form-data">',
        "      <p>Upload your resume (PDF, DOCX or plain text):</p>",
        '      <input type="file" name="cvfile" accept=".pdf,.docx,.txt,.md">',
        "      <p>…or paste it here:</p>",
        '      <textarea name="text"></textarea>',
        '      <button type="submit">Analyze</button>',
        "    </form>",
    ]
    return _page("AI Resume Analysis", body)


def write_report(content: str, path: Path | None = None) -> Path:
    if path is None:
        REPORTS_DIR.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
        path = REPORTS_DIR / f"analysis_{stamp}.html"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
