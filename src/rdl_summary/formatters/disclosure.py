"""Presentation-side disclosure policy.

The engine returns full condition data and the ``confirmedPacket`` flag;
this module is where condition detail is withheld for incomplete packets.
"""

from __future__ import annotations

from typing import Any

from rdl_summary.evidence.categories import CATEGORY_DISPLAY_NAMES
from rdl_summary.models import NotApplicable, PacketValidation, SummaryResult

PACKET_COMPLETE = "Complete"
PACKET_INCOMPLETE = "Incomplete"


def packet_status(validation: PacketValidation) -> str:
    """``"Complete"`` or ``"Incomplete"``."""
    return PACKET_COMPLETE if validation.all_required_found else PACKET_INCOMPLETE


def missing_documents(validation: PacketValidation) -> list[str]:
    """Display names of the categories with no matching evidence, in checklist order."""
    return [CATEGORY_DISPLAY_NAMES[cat] for cat in validation.missing_categories()]


def render_payload(
    summary: SummaryResult,
    *,
    suppress_unconfirmed_conditions: bool = True,
) -> dict[str, Any]:
    """camelCase dict for *summary* with the disclosure gate applied.

    When the packet is unconfirmed and suppression is on, the claim's
    conditions are replaced by an empty list and ``conditionsSuppressed``
    is set.  The summary itself is not modified.
    """
    payload = summary.model_dump(mode="json", by_alias=True)
    if isinstance(summary, NotApplicable):
        return payload

    suppressed = suppress_unconfirmed_conditions and not summary.confirmed_packet
    if suppressed and payload.get("claim") is not None:
        payload["claim"]["conditions"] = []
    payload["conditionsSuppressed"] = suppressed
    return payload
