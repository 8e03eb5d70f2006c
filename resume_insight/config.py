"""Load env and YAML configuration into an immutable Settings value."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from resume_insight.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"
UPLOAD_DIR: Path = ROOT_DIR / "uploads"

DEFAULT_FALLBACK_ROLES: tuple[str, ...] = (
    "Software Developer",
    "Data Analyst",
    "Frontend Engineer",
)

# Keys accepted from the YAML file, with the type each one is coerced to.
_TUNABLES: dict[str, type] = {
    "max_keywords": int,
    "max_postings": int,
    "score_workers": int,
    "request_timeout": float,
    "max_upload_bytes": int,
}

# Smallest value each tunable accepts.
_MINIMUMS: dict[str, float] = {"score_workers": 1}


@dataclass(frozen=True)
class Settings:
    # Completion service
    openai_api_key: str = ""
    openai_base_url: str = ""
    openai_model: str = "gpt-4o-mini"
    azure_endpoint: str = ""
    azure_api_key: str = ""
    azure_deployment: str = ""
    azure_api_version: str = "2024-02-15-preview"

    # Job search
    rapid_api_key: str = ""
    jsearch_host: str = "jsearch.p.rapidapi.com"

    # Pipeline
    max_keywords: int = 3
    max_postings: int = 10
    score_workers: int = 1
    request_timeout: float = 15.0
    max_upload_bytes: int = 5 * 1024 * 1024
    fallback_roles: tuple[str, ...] = field(default=DEFAULT_FALLBACK_ROLES)

    # Server
    port: int = 8000

    @property
    def uses_azure(self) -> bool:
        return bool(self.azure_endpoint)

    @property
    def completion_configured(self) -> bool:
        if self.uses_azure:
            return bool(self.azure_api_key and self.azure_deployment)
        return bool(self.openai_api_key)

    @property
    def model(self) -> str:
        """Model name sent with each request; Azure routes by deployment."""
        return self.azure_deployment if self.uses_azure else self.openai_model


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def load_tunables(path: Path | None = None) -> dict[str, Any]:
    """Read pipeline tunables from YAML; a missing file yields no overrides."""
    path = path or Path(get_env("SETTINGS_FILE") or SETTINGS_PATH)
    if not path.exists():
        log.debug("No settings file at %s, using defaults", path)
        return {}

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")

    tunables: dict[str, Any] = {}
    for key, cast in _TUNABLES.items():
        if data.get(key) is not None:
            value = cast(data[key])
            minimum = _MINIMUMS.get(key, 0)
            if value < minimum:
                raise ValueError(f"{key} in {path} must be >= {minimum}, got {value}")
            tunables[key] = value

    roles = data.get("fallback_roles")
    if roles:
        tunables["fallback_roles"] = tuple(str(r) for r in roles)

    log.info("Loaded settings overrides from %s: %s", path, sorted(tunables))
    return tunables


def load_settings(path: Path | None = None) -> Settings:
    """Build Settings once at startup from the environment and the YAML file."""
    tunables = load_tunables(path)
    return Settings(
        openai_api_key=get_env("OPENAI_API_KEY"),
        openai_base_url=get_env("OPENAI_BASE_URL"),
        openai_model=get_env("OPENAI_MODEL", "gpt-4o-mini"),
        azure_endpoint=get_env("AZURE_OPENAI_ENDPOINT").rstrip("/"),
        azure_api_key=get_env("AZURE_OPENAI_KEY"),
        azure_deployment=get_env("AZURE_OPENAI_DEPLOYMENT"),
        azure_api_version=get_env("AZURE_OPENAI_API_VERSION", "2024-02-15-preview"),
        rapid_api_key=get_env("RAPID_API_KEY") or get_env("JSEARCH_API_KEY"),
        port=int(get_env("PORT", "8000") or 8000),
        **tunables,
    )


def ensure_dirs() -> None:
    for d in (REPORTS_DIR, UPLOAD_DIR):
        d.mkdir(parents=True, exist_ok=True)
