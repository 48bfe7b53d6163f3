"""In-memory summary store backed by a bounded, lock-guarded OrderedDict."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from datetime import datetime, timezone

from rdl_summary.exceptions import SummaryNotFoundError
from rdl_summary.models import SummaryResult
from rdl_summary.store.protocols import StoredSummary

log = logging.getLogger(__name__)


class MemorySummaryStore:
    """Keeps the most recent ``max_entries`` summaries; nothing touches disk."""

    def __init__(self, max_entries: int = 500) -> None:
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._max_entries = max_entries
        self._entries: OrderedDict[str, StoredSummary] = OrderedDict()
        self._lock = threading.Lock()

    def save(self, doc_id: str, result: SummaryResult, *, file_name: str | None = None) -> StoredSummary:
        entry = StoredSummary(
            doc_id=doc_id,
            file_name=file_name,
            processed_at=datetime.now(timezone.utc),
            result=result,
        )
        with self._lock:
            self._entries.pop(doc_id, None)
            self._entries[doc_id] = entry
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                log.debug("Evicted %s from summary store", evicted)
        log.debug("Saved %s to summary store", doc_id)
        return entry

    def get(self, doc_id: str) -> StoredSummary:
        with self._lock:
            if doc_id not in self._entries:
                raise SummaryNotFoundError(f"No summary stored for document {doc_id!r}")
            return self._entries[doc_id]

    def list_summaries(self) -> list[StoredSummary]:
        with self._lock:
            return list(reversed(self._entries.values()))

    def delete(self, doc_id: str) -> bool:
        with self._lock:
            return self._entries.pop(doc_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
