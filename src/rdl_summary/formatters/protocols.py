"""Formatter protocol shared by every summary renderer."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from rdl_summary.models import SummaryResult


@runtime_checkable
class IOutputFormatter(Protocol):
    """Renders a ``SummaryRecord`` or ``NotApplicable`` marker to bytes.

    Implementations own the disclosure decision: whether condition detail
    of an unconfirmed packet reaches the output.
    """

    def format(self, summary: SummaryResult, **kwargs: Any) -> bytes: ...

    def format_to_file(self, summary: SummaryResult, path: Path, **kwargs: Any) -> Path:
        """Write the rendered bytes to *path* and return it."""
        ...

    @property
    def content_type(self) -> str: ...


__all__ = ["IOutputFormatter"]
