"""
In-memory snapshot of all question/answer entries.

The snapshot is rebuilt wholesale from the durable store and published with a
single reference assignment, so readers always see one complete load generation.
"""
import logging
import threading
from datetime import datetime, timezone
from typing import Optional, Tuple

from ..exceptions import StoreUnavailable
from ..models import Entry
from ..store import EntryStore

logger = logging.getLogger(__name__)


class EntryCache:
    """
    Read-through snapshot of the entry store.

    Key traits:
    - Replace-not-mutate: load() builds a new tuple, then swaps it in
    - Lock-free reads; reloads are serialized with a lock
    - A failed load leaves the previous snapshot untouched
    """

    def __init__(self, store: EntryStore):
        """
        :param store: EntryStore to load entries from
        """
        self._store = store
        self._entries: Optional[Tuple[Entry, ...]] = None
        self._loaded_at: Optional[datetime] = None
        self._reload_lock = threading.Lock()

    def load(self) -> int:
        """
        Fetch every entry from the store and atomically replace the snapshot.

        :return: Number of entries in the new snapshot
        :raises StoreUnavailable: If the store cannot be read
        """
        with self._reload_lock:
            logger.info("Loading Q&A pairs from store...")
            try:
                fetched = self._store.fetch_all()
            except StoreUnavailable:
                logger.error("Error loading Q&A cache", exc_info=True)
                raise
            except Exception as e:
                logger.error("Error loading Q&A cache", exc_info=True)
                raise StoreUnavailable(str(e)) from e

            entries = self._admit(fetched)

            self._entries = entries
            self._loaded_at = datetime.now(timezone.utc)
            logger.info(f"Loaded {len(entries)} Q&A pairs into cache")
            return len(entries)

    def snapshot(self) -> Tuple[Entry, ...]:
        """Return the current snapshot (empty before the first load)."""
        return self._entries or ()

    def is_loaded(self) -> bool:
        return self._entries is not None

    def size(self) -> int:
        return len(self.snapshot())

    @property
    def loaded_at(self) -> Optional[datetime]:
        return self._loaded_at

    def find_by_intent(self, intent: str) -> Optional[Entry]:
        """First entry whose intent matches ``intent`` case-insensitively."""
        target = intent.lower()
        for entry in self.snapshot():
            if entry.intent and entry.intent.lower() == target:
                return entry
        return None

    def _admit(self, fetched) -> Tuple[Entry, ...]:
        admitted = []
        seen_ids = set()
        skipped = 0

        for entry in fetched:
            if not entry.is_valid() or entry.id in seen_ids:
                skipped += 1
                continue
            seen_ids.add(entry.id)
            admitted.append(entry)

        if skipped:
            logger.warning(f"Skipped {skipped} entries with missing fields or duplicate ids")

        return tuple(admitted)
