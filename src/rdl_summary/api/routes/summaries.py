"""Summary endpoints: assemble, store and read back decision-letter summaries."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from rdl_summary.exceptions import SummaryNotFoundError
from rdl_summary.formatters.disclosure import render_payload
from rdl_summary.models import NotApplicable
from rdl_summary.parsing import extract_json
from rdl_summary.store.protocols import ISummaryStore, StoredSummary
from rdl_summary.summary.assembler import assemble_payload

log = logging.getLogger(__name__)

router = APIRouter(tags=["summaries"])


class SummarizeRequest(BaseModel):
    """A candidate record, either decoded or as the extractor's raw text."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    doc_id: Optional[str] = None
    file_name: Optional[str] = None
    candidate: Optional[dict[str, Any]] = None
    raw_response: Optional[str] = None

    @model_validator(mode="after")
    def check_exactly_one_source(self) -> SummarizeRequest:
        if (self.candidate is None) == (self.raw_response is None):
            raise ValueError("Provide exactly one of 'candidate' or 'rawResponse'")
        return self


def _store(req: Request) -> ISummaryStore:
    return req.app.state.store


def _render_entry(entry: StoredSummary, req: Request) -> dict[str, Any]:
    suppress = req.app.state.settings.disclosure.suppress_unconfirmed_conditions
    return {
        "docId": entry.doc_id,
        "fileName": entry.file_name,
        "processedAt": entry.processed_at.isoformat(),
        "result": render_payload(entry.result, suppress_unconfirmed_conditions=suppress),
    }


@router.post("/summaries", status_code=201)
async def create_summary(request: SummarizeRequest, req: Request) -> dict[str, Any]:
    """Assemble a summary and keep it under ``docId`` (generated when omitted)."""
    if request.raw_response is not None:
        payload = extract_json(request.raw_response)
    else:
        payload = request.candidate or {}

    result = assemble_payload(payload)
    doc_id = request.doc_id or uuid.uuid4().hex
    entry = _store(req).save(doc_id, result, file_name=request.file_name)
    log.info("Summary stored", extra={"doc_id": doc_id, "document_type": result.document_type})
    return _render_entry(entry, req)


@router.get("/summaries")
async def list_summaries(req: Request) -> list[dict[str, Any]]:
    """Stored summaries, most recent first, without their bodies."""
    return [
        {
            "docId": entry.doc_id,
            "fileName": entry.file_name,
            "processedAt": entry.processed_at.isoformat(),
            "documentType": entry.result.document_type,
            "skip": isinstance(entry.result, NotApplicable),
        }
        for entry in _store(req).list_summaries()
    ]


@router.get("/summaries/{doc_id}")
async def get_summary(doc_id: str, req: Request) -> dict[str, Any]:
    """One stored summary, with the disclosure gate applied."""
    return _render_entry(_store(req).get(doc_id), req)


@router.delete("/summaries/{doc_id}", status_code=204)
async def delete_summary(doc_id: str, req: Request) -> Response:
    """Forget a stored summary; 404 if there is none."""
    if not _store(req).delete(doc_id):
        raise SummaryNotFoundError(f"No summary stored for document {doc_id!r}")
    return Response(status_code=204)
