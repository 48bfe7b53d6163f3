"""Required evidence categories and their keyword predicates.

Predicates are literal substring checks over a case-folded evidence string,
combined with AND / OR.  They are permissive, since decision letters
describe the same document in many ways ("DD-214", "DD Form 214", "Member 4
copy of DD214").

The set of categories and their predicates is versioned together; bump
``CATEGORY_SET_VERSION`` on any change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from rdl_summary.models import RequiredCategory

CATEGORY_SET_VERSION = 1


@runtime_checkable
class KeywordPredicate(Protocol):
    """A boolean test over an already case-folded evidence string."""

    def __call__(self, folded: str) -> bool: ...

    def describe(self) -> str: ...


@dataclass(frozen=True)
class Contains:
    """True when ``term`` occurs anywhere in the text."""

    term: str

    def __call__(self, folded: str) -> bool:
        return self.term in folded

    def describe(self) -> str:
        return repr(self.term)


@dataclass(frozen=True)
class AllOf:
    """True when every operand holds."""

    operands: tuple[KeywordPredicate, ...]

    def __call__(self, folded: str) -> bool:
        return all(op(folded) for op in self.operands)

    def describe(self) -> str:
        return "(" + " and ".join(op.describe() for op in self.operands) + ")"


@dataclass(frozen=True)
class AnyOf:
    """True when at least one operand holds."""

    operands: tuple[KeywordPredicate, ...]

    def __call__(self, folded: str) -> bool:
        return any(op(folded) for op in self.operands)

    def describe(self) -> str:
        return "(" + " or ".join(op.describe() for op in self.operands) + ")"


def _all(*terms: str | KeywordPredicate) -> AllOf:
    return AllOf(tuple(Contains(t) if isinstance(t, str) else t for t in terms))


def _any(*terms: str | KeywordPredicate) -> AnyOf:
    return AnyOf(tuple(Contains(t) if isinstance(t, str) else t for t in terms))


# ── Predicates ───────────────────────────────────────────────────────

DD214_PREDICATE = _all("dd", "214")

CLAIM_FORM_21_526EZ_PREDICATE = _all("21", "526", "ez")

CP_EXAMINATION_PREDICATE = _any(
    "c&p",
    "c p",
    "compensation and pension",
    "dbq",
    "disability benefits questionnaire",
    "disability benefit questionnaire",
)

SERVICE_TREATMENT_RECORDS_PREDICATE = _any(
    "str",
    _all("service", _any("treatment", "medical"), "record"),
)

STATEMENT_FORMS_PREDICATE = _all(
    "statement",
    _any("support", "form", "21-0781", "21-4138", "personal", "stressor"),
)

CATEGORY_PREDICATES: dict[RequiredCategory, KeywordPredicate] = {
    RequiredCategory.DD214: DD214_PREDICATE,
    RequiredCategory.CLAIM_FORM_21_526EZ: CLAIM_FORM_21_526EZ_PREDICATE,
    RequiredCategory.CP_EXAMINATION: CP_EXAMINATION_PREDICATE,
    RequiredCategory.SERVICE_TREATMENT_RECORDS: SERVICE_TREATMENT_RECORDS_PREDICATE,
    RequiredCategory.STATEMENT_FORMS: STATEMENT_FORMS_PREDICATE,
}

CATEGORY_DISPLAY_NAMES: dict[RequiredCategory, str] = {
    RequiredCategory.DD214: (
        "DD Form 214 (Certificate of Release or Discharge from Active Duty)"
    ),
    RequiredCategory.CLAIM_FORM_21_526EZ: (
        "VA Form 21-526EZ (Application for Disability Compensation and Related Benefits)"
    ),
    RequiredCategory.CP_EXAMINATION: "C&P Exam/DBQ (Disability Benefits Questionnaire)",
    RequiredCategory.SERVICE_TREATMENT_RECORDS: (
        "Service Treatment Records (STR/Service Medical Records)"
    ),
    RequiredCategory.STATEMENT_FORMS: (
        "VA Form 21-0781/21-4138 (Statement in Support of Claim)"
    ),
}
