"""Summary assembler: compose evidence validation and rating into a summary.

Pure and deterministic; the same candidate always produces the same record,
so callers may fan documents out across threads or processes freely.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from rdl_summary.evidence.validator import validate
from rdl_summary.models import (
    RDL_DOCUMENT_TYPE,
    CandidateRecord,
    NotApplicable,
    SummaryRecord,
    SummaryResult,
)
from rdl_summary.parsing import load_candidate
from rdl_summary.rating.combiner import combine

log = logging.getLogger(__name__)


def assemble(candidate: CandidateRecord) -> SummaryResult:
    """Build the summary for one candidate record.

    Non-RDL documents short-circuit to ``NotApplicable``.  For RDLs the
    record carries every condition even when the packet is incomplete;
    ``confirmed_packet`` is the signal presentation layers gate on.
    """
    if not candidate.is_rdl:
        log.info("Document type %r is not an RDL, skipping", candidate.document_type)
        return NotApplicable(document_type=candidate.document_type)

    packet = validate(candidate.evidence)
    rating = combine(candidate.combined_rating, candidate.granted_percents())

    record = SummaryRecord(
        document_type=candidate.document_type,
        client=candidate.client,
        claim=candidate.claim,
        evidence=candidate.evidence,
        evidence_validation=packet,
        combined_rating=rating.combined_rating,
        combined_from_conditions=rating.combined_from_conditions,
    )
    log.info(
        "Assembled RDL summary: confirmed_packet=%s combined_rating=%d from_conditions=%s",
        record.confirmed_packet,
        record.combined_rating,
        record.combined_from_conditions,
    )
    return record


def _declared_document_type(payload: Any) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    document_type = payload.get("documentType", payload.get("document_type"))
    return document_type if isinstance(document_type, str) else None


def assemble_payload(payload: Mapping[str, Any]) -> SummaryResult:
    """Validate a raw decoded payload, then ``assemble`` it.

    A payload that declares a document type other than RDL is not
    applicable whatever its other fields hold, so it is never validated.

    Raises:
        CandidateValidationError: If an RDL payload, or one without a string
            ``documentType``, is not a candidate record.
    """
    document_type = _declared_document_type(payload)
    if document_type is not None and document_type != RDL_DOCUMENT_TYPE:
        log.info("Document type %r is not an RDL, skipping", document_type)
        return NotApplicable(document_type=document_type)
    return assemble(load_candidate(payload))
