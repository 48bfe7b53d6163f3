"""Rating combiner: combine per-condition percentages the VA way.

Ratings are not added.  Each rating, most severe first, applies to the
portion of the whole person still left "efficient" after the previous ones:

    50% and 30%  ->  50 + 30% of 50 = 65  ->  rounds to 70

Arithmetic is exact (``Fraction``); rounding happens once, at the end,
half-up to the nearest 10.
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import Iterable, Optional

from rdl_summary.exceptions import InvalidRatingError
from rdl_summary.models import CombinedRatingResult

log = logging.getLogger(__name__)

_WHOLE = Fraction(100)


def _check_percent(value: object, label: str) -> int:
    # bool is an int subclass; True is not a rating
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRatingError(f"{label} must be an integer percentage, got {value!r}")
    if not 0 <= value <= 100:
        raise InvalidRatingError(f"{label} must be within [0, 100], got {value}")
    return value


def round_half_up_to_ten(value: Fraction | int) -> int:
    """Round to the nearest multiple of 10, halves going up (65 -> 70, 82.5 -> 80)."""
    return math.floor(Fraction(value) / 10 + Fraction(1, 2)) * 10


def combine_exact(percents: Iterable[int]) -> Fraction:
    """Unrounded combined value of *percents*, applied in descending order."""
    remaining = _WHOLE
    total = Fraction(0)
    for percent in sorted(percents, reverse=True):
        contribution = percent * remaining / 100
        total += contribution
        remaining -= contribution
    return total


def combine(
    stated_rating: Optional[int],
    granted_percents: Iterable[int],
) -> CombinedRatingResult:
    """Combined rating for a decision letter.

    A rating the letter states explicitly is returned as-is and is not
    checked against the condition percentages.  Otherwise the percentages
    are combined step-wise and rounded; no percentages combine to 0.

    Raises:
        InvalidRatingError: If the stated rating, or (when none is stated)
            any percentage, is not an integer in [0, 100].
    """
    if stated_rating is not None:
        stated = _check_percent(stated_rating, "stated combined rating")
        return CombinedRatingResult(combined_rating=stated, combined_from_conditions=False)

    percents = [_check_percent(p, "evaluation percent") for p in granted_percents]
    exact = combine_exact(percents)
    rounded = min(100, max(0, round_half_up_to_ten(exact)))
    log.debug("Combined %s -> %s (exact %s)", percents, rounded, float(exact))
    return CombinedRatingResult(combined_rating=rounded, combined_from_conditions=True)
