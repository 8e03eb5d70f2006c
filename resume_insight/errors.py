"""Exception hierarchy for the resume insight pipeline."""
from __future__ import annotations


class ResumeInsightError(Exception):
    """Base class for every error the pipeline raises on purpose."""


class InvalidInputError(ResumeInsightError):
    """The submitted form cannot be turned into resume text."""


class InputMissingError(InvalidInputError):
    pass


class UploadTooLargeError(InvalidInputError):
    pass


class UnreadableResumeError(InvalidInputError):
    """The uploaded file is corrupt or not in the format its name claims."""


class UpstreamError(ResumeInsightError):
    """The completion service failed or answered with something unusable."""


class CompletionError(UpstreamError):
    pass


class MalformedResponseError(UpstreamError):
    def __init__(self, message: str, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw
