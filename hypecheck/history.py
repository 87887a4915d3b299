import logging
import time
import uuid
from dataclasses import dataclass
from typing import Optional

from hypecheck.constants import DEFAULT_HISTORY_MAX_ENTRIES
from hypecheck.models import AnalysisResult, MediaType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    created_at: float
    media_type: MediaType
    caption: str
    result: AnalysisResult
    title: Optional[str] = None


class SessionHistory:
    """In-memory list of past analyses, newest first. Nothing is written to disk."""

    def __init__(self, max_entries: int = DEFAULT_HISTORY_MAX_ENTRIES) -> None:
        self._max = max_entries
        self._entries: list[HistoryEntry] = []

    @property
    def max_entries(self) -> int:
        return self._max

    def add(
        self,
        media_type: MediaType,
        caption: str,
        result: AnalysisResult,
        entry_id: Optional[str] = None,
        title: Optional[str] = None,
    ) -> HistoryEntry:
        match self.get(entry_id) if entry_id else None:
            case HistoryEntry() as existing:
                return existing
            case None:
                pass
        entry = HistoryEntry(
            id=entry_id or uuid.uuid4().hex,
            created_at=time.time(),
            media_type=media_type,
            caption=caption,
            result=result,
            title=title,
        )
        self._entries = [entry, *self._entries][: self._max]
        logger.debug("History: stored %s (%d kept)", entry.id, len(self._entries))
        return entry

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        return next((e for e in self._entries if e.id == entry_id), None)

    def at(self, position: int) -> Optional[HistoryEntry]:
        """1-based position as listed by /history."""
        match position:
            case n if 1 <= n <= len(self._entries):
                return self._entries[n - 1]
            case _:
                return None

    def latest(self) -> Optional[HistoryEntry]:
        return self.at(1)

    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)
