"""Ask the model for a structured resume analysis and decode its JSON reply."""
from __future__ import annotations

import json
from typing import Any, Sequence

from resume_insight.config import DEFAULT_FALLBACK_ROLES
from resume_insight.errors import MalformedResponseError
from resume_insight.llm import Completer
from resume_insight.log import get_logger
from resume_insight.models import AnalysisResult

log = get_logger(__name__)

ANALYSIS_PROMPT = """\
You are an HR assistant. Analyze this resume and respond in JSON format like:
{
  "summary": "short summary here",
  "strengths": ["strength1", "strength2", "strength3"],
  "suggestedRoles": ["role1", "role2"]
}.
Use clear sentences, no bullets, no symbols.
"""


def _string_list(value: Any) -> list[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


def decode_json_object(raw: str) -> dict[str, Any]:
    """Decode the outermost {...} in a model reply, ignoring fences or prose."""
    start = raw.find("{")
    end = raw.rfind("}") + 1
    if start == -1 or end == 0:
        raise MalformedResponseError("Model did not return a JSON object", raw)
    try:
        data = json.loads(raw[start:end])
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"Model returned invalid JSON: {exc}", raw) from exc
    if not isinstance(data, dict):
        raise MalformedResponseError("Model JSON is not an object", raw)
    return data


def parse_analysis(
    raw: str,
    fallback_roles: Sequence[str] = DEFAULT_FALLBACK_ROLES,
) -> AnalysisResult:
    data = decode_json_object(raw)
    summary = data.get("summary")
    roles = _string_list(data.get("suggestedRoles"))
    return AnalysisResult(
        summary=summary.strip() if isinstance(summary, str) else "",
        strengths=_string_list(data.get("strengths")),
        suggested_roles=roles or list(fallback_roles),
    )


class StructuredAnalyzer:
    def __init__(
        self,
        completer: Completer,
        fallback_roles: Sequence[str] = DEFAULT_FALLBACK_ROLES,
    ) -> None:
        self.completer = completer
        self.fallback_roles = tuple(fallback_roles)

    def analyze(self, resume_text: str) -> AnalysisResult:
        raw = self.completer.complete(ANALYSIS_PROMPT, resume_text)
        result = parse_analysis(raw, self.fallback_roles)
        log.info(
            "Analysis complete — strengths=%d, roles=%d",
            len(result.strengths), len(result.suggested_roles),
        )
        return result
