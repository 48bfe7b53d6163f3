"""In-process store of assembled summaries, keyed by document id."""

from __future__ import annotations

from rdl_summary.store.memory_store import MemorySummaryStore
from rdl_summary.store.protocols import ISummaryStore, StoredSummary

__all__ = ["ISummaryStore", "MemorySummaryStore", "StoredSummary"]
