"""Pydantic data models for rdl-summary.

Every model is frozen and serialises with the camelCase keys of the
extractor's JSON contract (``model_dump(by_alias=True)``).  Input models
accept either the camelCase alias or the snake_case field name, and ignore
keys the engine recomputes itself (``evidenceValidation``,
``confirmedPacket``, ``combinedFromConditions``).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

RDL_DOCUMENT_TYPE = "RDL"


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ── Enums ────────────────────────────────────────────────────────────


class RequiredCategory(str, Enum):
    """The closed, ordered set of evidence categories a complete packet carries.

    Values are the ``evidenceValidation`` keys on the wire.  Adding,
    removing or reordering members is a breaking change for consumers.
    """

    DD214 = "ddForm214"
    CLAIM_FORM_21_526EZ = "vaForm21526EZ"
    CP_EXAMINATION = "cpExamination"
    SERVICE_TREATMENT_RECORDS = "serviceTreatmentRecords"
    STATEMENT_FORMS = "statementForms"


class Adjudication(str, Enum):
    """Decision status of a single claimed condition."""

    GRANTED = "Granted"
    DENIED = "Denied"
    DEFERRED = "Deferred"
    CONTINUED = "Continued"

    @classmethod
    def _missing_(cls, value: object) -> Adjudication | None:
        """Accept any casing, e.g. ``"granted"`` or ``"DENIED"``."""
        if isinstance(value, str):
            folded = value.strip().casefold()
            for member in cls:
                if member.value.casefold() == folded:
                    return member
        return None


# ── Candidate record (extractor output) ──────────────────────────────


class ClientInfo(_RecordModel):
    """Veteran identification and service period."""

    name: Optional[str] = None
    branch: Optional[str] = None
    service_start: Optional[str] = None
    service_end: Optional[str] = None
    era: Union[str, tuple[str, ...], None] = None


class Condition(_RecordModel):
    """A claimed condition and its adjudication.

    ``evaluation_percent`` is only meaningful for granted conditions; a
    missing percent on a granted condition means "not stated", not zero.
    """

    name: str
    adjudication: Adjudication
    effective_date: Optional[str] = None
    evaluation_percent: Optional[int] = Field(default=None, ge=0, le=100)
    symptoms: tuple[str, ...] = ()
    reasoning: Optional[str] = None
    cfr_citations: tuple[str, ...] = ()

    @field_validator("symptoms", "cfr_citations", mode="before")
    @classmethod
    def coerce_null_lists(cls, value: Any) -> Any:
        """Extractors emit ``null`` for missing sections; read those as empty."""
        return () if value is None else value

    @model_validator(mode="after")
    def check_percent_only_when_granted(self) -> Condition:
        if self.evaluation_percent is not None and self.adjudication != Adjudication.GRANTED:
            raise ValueError(
                f"evaluationPercent is only allowed on granted conditions, "
                f"got {self.evaluation_percent} on a {self.adjudication.value} condition"
            )
        return self

    @property
    def is_granted(self) -> bool:
        return self.adjudication == Adjudication.GRANTED


class ClaimInfo(_RecordModel):
    """Claim-level data: receipt date and the adjudicated conditions."""

    received_date: Optional[str] = None
    conditions: tuple[Condition, ...] = ()

    @field_validator("conditions", mode="before")
    @classmethod
    def coerce_null_conditions(cls, value: Any) -> Any:
        return () if value is None else value

    def granted_conditions(self) -> list[Condition]:
        """Granted conditions in document order."""
        return [c for c in self.conditions if c.is_granted]


class CandidateRecord(_RecordModel):
    """Structured record produced upstream from the letter text.

    Treated as untrusted and possibly incomplete.  Only ``document_type``
    is mandatory.
    """

    document_type: str
    client: Optional[ClientInfo] = None
    claim: Optional[ClaimInfo] = None
    evidence: tuple[str, ...] = ()
    combined_rating: Optional[int] = Field(default=None, ge=0, le=100)

    @field_validator("evidence", mode="before")
    @classmethod
    def coerce_null_evidence(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def is_rdl(self) -> bool:
        return self.document_type == RDL_DOCUMENT_TYPE

    def granted_percents(self) -> list[int]:
        """Evaluation percentages of granted conditions that state one."""
        if self.claim is None:
            return []
        return [
            c.evaluation_percent
            for c in self.claim.granted_conditions()
            if c.evaluation_percent is not None
        ]


# ── Evidence validation ──────────────────────────────────────────────


class EvidenceMatch(_RecordModel):
    """Outcome of matching one category against the evidence list."""

    found: bool = False
    matched_item: Optional[str] = None

    @model_validator(mode="after")
    def check_matched_item_iff_found(self) -> EvidenceMatch:
        if self.found != (self.matched_item is not None):
            raise ValueError("matchedItem must be set if and only if found is true")
        return self


_FIELD_BY_CATEGORY: dict[RequiredCategory, str] = {
    RequiredCategory.DD214: "dd_form_214",
    RequiredCategory.CLAIM_FORM_21_526EZ: "va_form_21526ez",
    RequiredCategory.CP_EXAMINATION: "cp_examination",
    RequiredCategory.SERVICE_TREATMENT_RECORDS: "service_treatment_records",
    RequiredCategory.STATEMENT_FORMS: "statement_forms",
}


class PacketValidation(_RecordModel):
    """Per-category match report plus the derived completeness flag."""

    dd_form_214: EvidenceMatch = Field(default_factory=EvidenceMatch, alias="ddForm214")
    va_form_21526ez: EvidenceMatch = Field(default_factory=EvidenceMatch, alias="vaForm21526EZ")
    cp_examination: EvidenceMatch = Field(default_factory=EvidenceMatch, alias="cpExamination")
    service_treatment_records: EvidenceMatch = Field(
        default_factory=EvidenceMatch, alias="serviceTreatmentRecords"
    )
    statement_forms: EvidenceMatch = Field(default_factory=EvidenceMatch, alias="statementForms")

    @classmethod
    def from_matches(cls, matches: Mapping[RequiredCategory, EvidenceMatch]) -> PacketValidation:
        """Build from a category-keyed mapping; absent categories are unfound."""
        return cls(**{_FIELD_BY_CATEGORY[cat]: match for cat, match in matches.items()})

    def match_for(self, category: RequiredCategory) -> EvidenceMatch:
        return getattr(self, _FIELD_BY_CATEGORY[category])

    def found_categories(self) -> list[RequiredCategory]:
        return [cat for cat in RequiredCategory if self.match_for(cat).found]

    def missing_categories(self) -> list[RequiredCategory]:
        return [cat for cat in RequiredCategory if not self.match_for(cat).found]

    @computed_field(alias="allRequiredFound")  # type: ignore[prop-decorator]
    @property
    def all_required_found(self) -> bool:
        return all(self.match_for(cat).found for cat in RequiredCategory)


# ── Rating ───────────────────────────────────────────────────────────


class CombinedRatingResult(_RecordModel):
    """Combined rating and whether the engine computed it from conditions."""

    combined_rating: int = Field(ge=0, le=100)
    combined_from_conditions: bool


# ── Output ───────────────────────────────────────────────────────────


class SummaryRecord(_RecordModel):
    """Final structured summary of a Rating Decision Letter.

    Carries full condition data regardless of packet completeness;
    ``confirmed_packet`` tells presentation layers whether to show it.
    """

    document_type: str
    client: Optional[ClientInfo] = None
    claim: Optional[ClaimInfo] = None
    evidence: tuple[str, ...] = ()
    evidence_validation: PacketValidation
    combined_rating: int = Field(ge=0, le=100)
    combined_from_conditions: bool

    @computed_field(alias="confirmedPacket")  # type: ignore[prop-decorator]
    @property
    def confirmed_packet(self) -> bool:
        return self.evidence_validation.all_required_found


class NotApplicable(_RecordModel):
    """Terminal marker for documents that are not Rating Decision Letters."""

    document_type: str
    skip: Literal[True] = True


SummaryResult = Union[SummaryRecord, NotApplicable]

__all__ = [
    "RDL_DOCUMENT_TYPE",
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
]
