"""Chat completion client for Azure OpenAI or any OpenAI-compatible API."""
from __future__ import annotations

from typing import Any, Protocol

from openai import AzureOpenAI, OpenAI, OpenAIError

from resume_insight.config import Settings
from resume_insight.errors import CompletionError
from resume_insight.log import get_logger

log = get_logger(__name__)


class Completer(Protocol):
    def complete(self, system: str, user: str) -> str:
        ...


def build_openai_client(settings: Settings) -> OpenAI:
    if settings.uses_azure:
        return AzureOpenAI(
            api_key=settings.azure_api_key,
            azure_endpoint=settings.azure_endpoint,
            azure_deployment=settings.azure_deployment,
            api_version=settings.azure_api_version,
        )
    return OpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url or None,
    )


class CompletionClient:
    """Sends one system + one user message and returns the reply text.

    The SDK client is built on first use so the app can start without
    credentials. No retries: any SDK failure surfaces as CompletionError.
    """

    def __init__(self, settings: Settings, client: Any | None = None) -> None:
        self.settings = settings
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = build_openai_client(self.settings)
        return self._client

    def complete(self, system: str, user: str) -> str:
        try:
            r = self.client.chat.completions.create(
                model=self.settings.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except OpenAIError as exc:
            log.error("Completion call failed: %s", exc)
            raise CompletionError(f"Completion service error: {exc}") from exc

        if not r.choices:
            raise CompletionError("Completion service returned no choices")
        return (r.choices[0].message.content or "").strip()
