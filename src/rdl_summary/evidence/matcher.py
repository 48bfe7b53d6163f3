"""Category matcher: classify a single evidence string."""

from __future__ import annotations

from rdl_summary.evidence.categories import CATEGORY_PREDICATES
from rdl_summary.models import RequiredCategory


def matches(category: RequiredCategory, item: str) -> bool:
    """Return True if *item* satisfies the keyword predicate of *category*.

    Case-insensitive; the caller's string is not modified.
    """
    return CATEGORY_PREDICATES[category](item.casefold())


def classify(item: str) -> list[RequiredCategory]:
    """Every category *item* satisfies, in checklist order.

    Categories are not mutually exclusive, so one item may land in several.
    """
    folded = item.casefold()
    return [cat for cat in RequiredCategory if CATEGORY_PREDICATES[cat](folded)]
