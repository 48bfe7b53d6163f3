"""Parse the extractor's output into a ``CandidateRecord``.

The extractor is a language model asked to return a bare JSON object; in
practice it sometimes wraps it in a ```json fence, adds a sentence of
prose, or leaves a trailing comma.  Those are repaired here.  Anything
else is reported, never guessed.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping

from pydantic import ValidationError

from rdl_summary.exceptions import CandidateValidationError, ExtractorResponseError
from rdl_summary.models import CandidateRecord

log = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)
_TRAILING_COMMA_RE = re.compile(r",\s*([\]}])")


def _strip_fences(content: str) -> str:
    match = _FENCE_RE.search(content)
    return match.group(1).strip() if match else content.strip()


def _outer_object(content: str) -> str:
    """Slice from the first ``{`` to the last ``}``, dropping surrounding prose."""
    start = content.find("{")
    end = content.rfind("}")
    if start == -1 or end < start:
        return content
    return content[start : end + 1]


def extract_json(content: str) -> dict[str, Any]:
    """Return the JSON object held in an extractor response.

    Raises:
        ExtractorResponseError: If no JSON object can be recovered.
    """
    json_str = _outer_object(_strip_fences(content))
    try:
        parsed = json.loads(json_str)
    except json.JSONDecodeError:
        try:
            parsed = json.loads(_TRAILING_COMMA_RE.sub(r"\1", json_str))
        except json.JSONDecodeError as exc:
            log.error("Failed to parse JSON from extractor response")
            raise ExtractorResponseError(
                f"Extractor response is not valid JSON: {exc.msg}", raw_response=content
            ) from exc

    if not isinstance(parsed, dict):
        raise ExtractorResponseError(
            f"Extractor response must be a JSON object, got {type(parsed).__name__}",
            raw_response=content,
        )
    return parsed


def load_candidate(payload: Mapping[str, Any]) -> CandidateRecord:
    """Validate a decoded payload into a ``CandidateRecord``.

    Raises:
        CandidateValidationError: If the payload does not have the candidate shape.
    """
    try:
        return CandidateRecord.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in errors)
        raise CandidateValidationError(
            f"Candidate record failed validation ({exc.error_count()} error(s): {fields})",
            errors=[dict(err) for err in errors],
        ) from exc


def parse_candidate(content: str) -> CandidateRecord:
    """``extract_json`` followed by ``load_candidate``."""
    return load_candidate(extract_json(content))
