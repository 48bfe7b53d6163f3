"""Exception hierarchy for rdl-summary."""

from __future__ import annotations

from typing import Any


class RDLSummaryError(Exception):
    """Base exception for all rdl-summary errors."""


class InputValidationError(RDLSummaryError):
    """Input does not satisfy the engine's contract."""


class CandidateValidationError(InputValidationError):
    """Candidate record fails to conform to the expected shape."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class InvalidRatingError(InputValidationError):
    """A percentage handed to the rating combiner is outside [0, 100]."""


class ExtractorResponseError(InputValidationError):
    """Extractor response text holds no parseable JSON object."""

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


class SummaryNotFoundError(RDLSummaryError, KeyError):
    """Raised when a stored summary lookup misses."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
