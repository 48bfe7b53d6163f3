"""rdl-summary: evidence checklist and combined rating for VA Rating Decision Letters.

Usage::

    from rdl_summary import assemble_payload

    summary = assemble_payload(candidate_dict)
    summary.confirmed_packet     # all five required evidence categories present
    summary.combined_rating      # VA-math combined rating, rounded to 10
"""

from __future__ import annotations

from rdl_summary.core.config import AppSettings
from rdl_summary.evidence import classify, matches, validate
from rdl_summary.exceptions import (
    CandidateValidationError,
    ExtractorResponseError,
    InputValidationError,
    InvalidRatingError,
    RDLSummaryError,
    SummaryNotFoundError,
)
from rdl_summary.models import (
    Adjudication,
    CandidateRecord,
    ClaimInfo,
    ClientInfo,
    CombinedRatingResult,
    Condition,
    EvidenceMatch,
    NotApplicable,
    PacketValidation,
    RequiredCategory,
    SummaryRecord,
    SummaryResult,
)
from rdl_summary.parsing import extract_json, load_candidate, parse_candidate
from rdl_summary.rating import combine
from rdl_summary.summary import assemble, assemble_payload

__all__ = [
    "AppSettings",
    # Models
    "Adjudication",
    "CandidateRecord",
    "ClaimInfo",
    "ClientInfo",
    "CombinedRatingResult",
    "Condition",
    "EvidenceMatch",
    "NotApplicable",
    "PacketValidation",
    "RequiredCategory",
    "SummaryRecord",
    "SummaryResult",
    # Engine
    "assemble",
    "assemble_payload",
    "classify",
    "combine",
    "matches",
    "validate",
    # Parsing
    "extract_json",
    "load_candidate",
    "parse_candidate",
    # Errors
    "CandidateValidationError",
    "ExtractorResponseError",
    "InputValidationError",
    "InvalidRatingError",
    "RDLSummaryError",
    "SummaryNotFoundError",
]
