"""JSON output formatter for summaries and API responses."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rdl_summary.formatters.disclosure import render_payload
from rdl_summary.models import SummaryResult


class JSONFormatter:
    """Renders a summary as indented camelCase JSON bytes."""

    def __init__(self, *, suppress_unconfirmed_conditions: bool = True) -> None:
        self._suppress = suppress_unconfirmed_conditions

    def format(self, summary: SummaryResult, **kwargs: Any) -> bytes:
        """Serialize *summary* to pretty-printed JSON bytes."""
        payload = render_payload(summary, suppress_unconfirmed_conditions=self._suppress)
        return json.dumps(payload, indent=2).encode()

    def format_to_file(self, summary: SummaryResult, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(summary, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
