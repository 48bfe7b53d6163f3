"""Tests for the rdl-summary data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rdl_summary.models import (
    Adjudication,
    CandidateRecord,
    ClientInfo,
    CombinedRatingResult,
    Condition,
    EvidenceMatch,
    NotApplicable,
    PacketValidation,
    RequiredCategory,
    SummaryRecord,
)


class TestAdjudication:
    @pytest.mark.parametrize("raw", ["Granted", "granted", "GRANTED", " Granted "])
    def test_case_insensitive(self, raw: str) -> None:
        assert Adjudication(raw) is Adjudication.GRANTED

    def test_unknown_value(self) -> None:
        with pytest.raises(ValueError):
            Adjudication("Pending")


class TestCondition:
    def test_defaults(self) -> None:
        condition = Condition(name="Tinnitus", adjudication=Adjudication.DENIED)
        assert condition.evaluation_percent is None
        assert condition.symptoms == ()
        assert condition.cfr_citations == ()
        assert condition.is_granted is False

    def test_camel_case_input(self) -> None:
        condition = Condition.model_validate(
            {
                "name": "PTSD",
                "adjudication": "Granted",
                "effectiveDate": "2024-04-04",
                "evaluationPercent": 50,
                "cfrCitations": ["38 CFR 3.303"],
            }
        )
        assert condition.effective_date == "2024-04-04"
        assert condition.evaluation_percent == 50
        assert condition.cfr_citations == ("38 CFR 3.303",)

    def test_null_lists_read_as_empty(self) -> None:
        condition = Condition.model_validate(
            {"name": "PTSD", "adjudication": "Granted", "symptoms": None, "cfrCitations": None}
        )
        assert condition.symptoms == ()
        assert condition.cfr_citations == ()

    def test_granted_without_percent_is_allowed(self) -> None:
        condition = Condition(name="Scar", adjudication=Adjudication.GRANTED)
        assert condition.is_granted is True
        assert condition.evaluation_percent is None

    @pytest.mark.parametrize(
        "adjudication", [Adjudication.DENIED, Adjudication.DEFERRED, Adjudication.CONTINUED]
    )
    def test_percent_only_on_granted(self, adjudication: Adjudication) -> None:
        with pytest.raises(ValidationError, match="only allowed on granted"):
            Condition(name="Knee", adjudication=adjudication, evaluation_percent=10)

    @pytest.mark.parametrize("percent", [-10, 101])
    def test_percent_range(self, percent: int) -> None:
        with pytest.raises(ValidationError):
            Condition(name="Knee", adjudication=Adjudication.GRANTED, evaluation_percent=percent)

    def test_frozen(self) -> None:
        condition = Condition(name="Knee", adjudication=Adjudication.GRANTED)
        with pytest.raises(ValidationError):
            condition.name = "Back"  # type: ignore[misc]


class TestClientInfo:
    def test_era_as_string(self) -> None:
        assert ClientInfo(era="Gulf War Era").era == "Gulf War Era"

    def test_era_as_list(self) -> None:
        client = ClientInfo.model_validate({"era": ["Gulf War Era", "Post-9/11 Era"]})
        assert client.era == ("Gulf War Era", "Post-9/11 Era")


class TestCandidateRecord:
    def test_document_type_required(self) -> None:
        with pytest.raises(ValidationError):
            CandidateRecord.model_validate({"evidence": []})

    def test_is_rdl(self) -> None:
        assert CandidateRecord(document_type="RDL").is_rdl is True
        assert CandidateRecord(document_type="Not RDL").is_rdl is False

    def test_granted_percents_in_document_order(self) -> None:
        candidate = CandidateRecord.model_validate(
            {
                "documentType": "RDL",
                "claim": {
                    "conditions": [
                        {"name": "A", "adjudication": "Granted", "evaluationPercent": 10},
                        {"name": "B", "adjudication": "Denied"},
                        {"name": "C", "adjudication": "Granted"},
                        {"name": "D", "adjudication": "Granted", "evaluationPercent": 40},
                    ]
                },
            }
        )
        assert candidate.granted_percents() == [10, 40]

    def test_granted_percents_without_claim(self) -> None:
        assert CandidateRecord(document_type="RDL").granted_percents() == []


class TestEvidenceMatch:
    def test_found_requires_item(self) -> None:
        with pytest.raises(ValidationError):
            EvidenceMatch(found=True)

    def test_item_requires_found(self) -> None:
        with pytest.raises(ValidationError):
            EvidenceMatch(found=False, matched_item="DD Form 214")

    def test_valid_pairs(self) -> None:
        assert EvidenceMatch().found is False
        assert EvidenceMatch(found=True, matched_item="DD Form 214").matched_item == "DD Form 214"


class TestPacketValidation:
    def _all_found(self) -> PacketValidation:
        return PacketValidation.from_matches(
            {cat: EvidenceMatch(found=True, matched_item=cat.value) for cat in RequiredCategory}
        )

    def test_all_required_found_is_derived(self) -> None:
        assert self._all_found().all_required_found is True
        assert PacketValidation().all_required_found is False

    def test_from_matches_defaults_missing_categories(self) -> None:
        report = PacketValidation.from_matches(
            {RequiredCategory.DD214: EvidenceMatch(found=True, matched_item="DD214")}
        )
        assert report.found_categories() == [RequiredCategory.DD214]
        assert len(report.missing_categories()) == 4

    def test_flag_cannot_be_supplied(self) -> None:
        report = PacketValidation.model_validate({"allRequiredFound": True})
        assert report.all_required_found is False

    def test_serialized_keys(self) -> None:
        dumped = self._all_found().model_dump(by_alias=True)
        assert list(dumped) == [
            "ddForm214",
            "vaForm21526EZ",
            "cpExamination",
            "serviceTreatmentRecords",
            "statementForms",
            "allRequiredFound",
        ]
        assert dumped["ddForm214"] == {"found": True, "matchedItem": "ddForm214"}

    def test_round_trips_through_aliases(self) -> None:
        original = self._all_found()
        assert PacketValidation.model_validate(original.model_dump(by_alias=True)) == original


class TestSummaryRecord:
    def test_serialized_field_names(self) -> None:
        record = SummaryRecord(
            document_type="RDL",
            evidence_validation=PacketValidation(),
            combined_rating=0,
            combined_from_conditions=True,
        )
        assert set(record.model_dump(by_alias=True)) == {
            "documentType",
            "client",
            "claim",
            "evidence",
            "evidenceValidation",
            "confirmedPacket",
            "combinedRating",
            "combinedFromConditions",
        }

    def test_confirmed_packet_follows_validation(self) -> None:
        record = SummaryRecord(
            document_type="RDL",
            evidence_validation=PacketValidation(),
            combined_rating=0,
            combined_from_conditions=True,
        )
        assert record.confirmed_packet is False
        assert record.model_dump(by_alias=True)["confirmedPacket"] is False


class TestSmallModels:
    def test_combined_rating_bounds(self) -> None:
        with pytest.raises(ValidationError):
            CombinedRatingResult(combined_rating=110, combined_from_conditions=True)

    def test_not_applicable_marker(self) -> None:
        marker = NotApplicable(document_type="Not RDL")
        assert marker.model_dump(by_alias=True) == {"documentType": "Not RDL", "skip": True}
