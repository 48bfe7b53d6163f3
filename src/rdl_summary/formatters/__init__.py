"""Output formatters and the disclosure gate.

Usage::

    from rdl_summary.formatters import JSONFormatter

    json_bytes = JSONFormatter().format(summary)
"""

from __future__ import annotations

from rdl_summary.formatters.disclosure import (
    PACKET_COMPLETE,
    PACKET_INCOMPLETE,
    missing_documents,
    packet_status,
    render_payload,
)
from rdl_summary.formatters.json_formatter import JSONFormatter
from rdl_summary.formatters.protocols import IOutputFormatter

__all__ = [
    "IOutputFormatter",
    "JSONFormatter",
    "PACKET_COMPLETE",
    "PACKET_INCOMPLETE",
    "missing_documents",
    "packet_status",
    "render_payload",
]
