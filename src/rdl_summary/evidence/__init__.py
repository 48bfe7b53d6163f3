"""Evidence checklist: category predicates, matcher and packet validator.

Usage::

    from rdl_summary.evidence import validate

    report = validate(["DD Form 214", "Service Treatment Records"])
    report.all_required_found          # False
    report.missing_categories()        # [CLAIM_FORM_21_526EZ, CP_EXAMINATION, STATEMENT_FORMS]
"""

from __future__ import annotations

from rdl_summary.evidence.categories import (
    CATEGORY_DISPLAY_NAMES,
    CATEGORY_PREDICATES,
    CATEGORY_SET_VERSION,
    AllOf,
    AnyOf,
    Contains,
    KeywordPredicate,
)
from rdl_summary.evidence.matcher import classify, matches
from rdl_summary.evidence.validator import validate

__all__ = [
    "AllOf",
    "AnyOf",
    "CATEGORY_DISPLAY_NAMES",
    "CATEGORY_PREDICATES",
    "CATEGORY_SET_VERSION",
    "Contains",
    "KeywordPredicate",
    "classify",
    "matches",
    "validate",
]
