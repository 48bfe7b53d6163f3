"""Tests for the JSON formatter and the disclosure gate."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from rdl_summary.evidence.categories import CATEGORY_DISPLAY_NAMES
from rdl_summary.formatters import IOutputFormatter, JSONFormatter
from rdl_summary.formatters.disclosure import (
    PACKET_COMPLETE,
    PACKET_INCOMPLETE,
    missing_documents,
    packet_status,
    render_payload,
)
from rdl_summary.models import NotApplicable, PacketValidation, RequiredCategory, SummaryRecord
from rdl_summary.summary.assembler import assemble_payload


@pytest.fixture
def complete_summary(rdl_payload: dict[str, Any]) -> SummaryRecord:
    return assemble_payload(rdl_payload)  # type: ignore[return-value]


@pytest.fixture
def incomplete_summary(incomplete_payload: dict[str, Any]) -> SummaryRecord:
    return assemble_payload(incomplete_payload)  # type: ignore[return-value]


class TestPacketStatus:
    def test_complete(self, complete_summary: SummaryRecord) -> None:
        assert packet_status(complete_summary.evidence_validation) == PACKET_COMPLETE

    def test_incomplete(self, incomplete_summary: SummaryRecord) -> None:
        assert packet_status(incomplete_summary.evidence_validation) == PACKET_INCOMPLETE

    def test_missing_documents_in_checklist_order(self, incomplete_summary: SummaryRecord) -> None:
        assert missing_documents(incomplete_summary.evidence_validation) == [
            CATEGORY_DISPLAY_NAMES[RequiredCategory.CP_EXAMINATION],
            CATEGORY_DISPLAY_NAMES[RequiredCategory.STATEMENT_FORMS],
        ]

    def test_nothing_missing(self, complete_summary: SummaryRecord) -> None:
        assert missing_documents(complete_summary.evidence_validation) == []

    def test_empty_report_misses_everything(self) -> None:
        assert len(missing_documents(PacketValidation())) == 5


class TestRenderPayload:
    def test_confirmed_packet_keeps_conditions(self, complete_summary: SummaryRecord) -> None:
        payload = render_payload(complete_summary)
        assert payload["confirmedPacket"] is True
        assert payload["conditionsSuppressed"] is False
        assert len(payload["claim"]["conditions"]) == 3

    def test_unconfirmed_packet_hides_conditions(self, incomplete_summary: SummaryRecord) -> None:
        payload = render_payload(incomplete_summary)
        assert payload["confirmedPacket"] is False
        assert payload["conditionsSuppressed"] is True
        assert payload["claim"]["conditions"] == []
        # the rest of the summary is still shown
        assert payload["combinedRating"] == 70
        assert payload["claim"]["receivedDate"] == "2024-05-08"
        assert payload["evidenceValidation"]["cpExamination"] == {"found": False, "matchedItem": None}

    def test_suppression_off(self, incomplete_summary: SummaryRecord) -> None:
        payload = render_payload(incomplete_summary, suppress_unconfirmed_conditions=False)
        assert payload["conditionsSuppressed"] is False
        assert len(payload["claim"]["conditions"]) == 3

    def test_summary_is_not_modified(self, incomplete_summary: SummaryRecord) -> None:
        render_payload(incomplete_summary)
        assert incomplete_summary.claim is not None
        assert len(incomplete_summary.claim.conditions) == 3

    def test_without_claim(self) -> None:
        summary = assemble_payload({"documentType": "RDL", "evidence": []})
        payload = render_payload(summary)
        assert payload["claim"] is None
        assert payload["conditionsSuppressed"] is True

    def test_not_applicable_passes_through(self) -> None:
        payload = render_payload(NotApplicable(document_type="Not RDL"))
        assert payload == {"documentType": "Not RDL", "skip": True}


class TestJSONFormatter:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(JSONFormatter(), IOutputFormatter)

    def test_content_type(self) -> None:
        assert JSONFormatter().content_type == "application/json"

    def test_format_is_indented_json(self, complete_summary: SummaryRecord) -> None:
        output = JSONFormatter().format(complete_summary)
        assert isinstance(output, bytes)
        assert b'\n  "documentType": "RDL"' in output
        assert json.loads(output)["combinedRating"] == 70

    def test_format_applies_gate(self, incomplete_summary: SummaryRecord) -> None:
        hidden = json.loads(JSONFormatter().format(incomplete_summary))
        shown = json.loads(
            JSONFormatter(suppress_unconfirmed_conditions=False).format(incomplete_summary)
        )
        assert hidden["claim"]["conditions"] == []
        assert len(shown["claim"]["conditions"]) == 3

    def test_format_to_file(self, complete_summary: SummaryRecord, tmp_path: Path) -> None:
        path = tmp_path / "summary.json"
        result = JSONFormatter().format_to_file(complete_summary, path)
        assert result == path
        assert json.loads(path.read_text())["confirmedPacket"] is True
