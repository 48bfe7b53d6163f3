"""Summary store protocol and the stored-entry model."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from rdl_summary.models import SummaryResult


class StoredSummary(BaseModel):
    """One processed document as kept by a store."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    doc_id: str
    file_name: Optional[str] = None
    processed_at: datetime
    result: SummaryResult


@runtime_checkable
class ISummaryStore(Protocol):
    """Protocol for summary stores."""

    def save(self, doc_id: str, result: SummaryResult, *, file_name: str | None = None) -> StoredSummary:
        """Store *result* under *doc_id*, replacing any previous entry."""
        ...

    def get(self, doc_id: str) -> StoredSummary:
        """Return the entry for *doc_id*. Raises SummaryNotFoundError if absent."""
        ...

    def list_summaries(self) -> list[StoredSummary]:
        """All entries, most recently saved first."""
        ...

    def delete(self, doc_id: str) -> bool:
        """Remove *doc_id*; return whether it was present."""
        ...
