"""Evidence validator: build the packet checklist from an evidence list."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from rdl_summary.evidence.matcher import matches
from rdl_summary.models import EvidenceMatch, PacketValidation, RequiredCategory

log = logging.getLogger(__name__)


def validate(items: Optional[Iterable[str]]) -> PacketValidation:
    """Match every required category against *items*.

    For each category the earliest matching item in input order is kept
    verbatim as ``matched_item``.  Categories are evaluated independently.
    ``None`` or an empty sequence yields a report with nothing found.
    """
    evidence = list(items or ())
    found: dict[RequiredCategory, EvidenceMatch] = {}

    for category in RequiredCategory:
        match = next((item for item in evidence if matches(category, item)), None)
        if match is None:
            found[category] = EvidenceMatch(found=False)
        else:
            found[category] = EvidenceMatch(found=True, matched_item=match)
        log.debug("Evidence category %s: %s", category.value, "found" if match is not None else "missing")

    return PacketValidation.from_matches(found)
