"""
Turns an intent label produced by the classifier into an entry lookup.
"""
import logging
from typing import Optional

from ..exceptions import StoreUnavailable
from ..schemas import IntentMatch
from ..store import EntryStore
from .entry_cache import EntryCache

logger = logging.getLogger(__name__)

SOURCE_STORE = "store"
SOURCE_CACHE = "cache"


class IntentResolver:
    """
    Looks up the entry tagged with an intent label.

    Store first (exact, case-sensitive), then the cache snapshot
    (case-insensitive). Never classifies anything itself.
    """

    def __init__(self, store: EntryStore, cache: EntryCache):
        self._store = store
        self._cache = cache

    def resolve_by_intent(self, intent_label: str) -> Optional[IntentMatch]:
        """
        :param intent_label: Label returned by the intent classifier
        :return: IntentMatch with answer, question and source, or None
        """
        if not intent_label:
            return None

        try:
            entry = self._store.find_by_intent(intent_label)
        except StoreUnavailable:
            logger.warning(f"Store intent lookup failed for '{intent_label}', checking cache", exc_info=True)
            entry = None

        if entry is not None and entry.is_valid():
            return IntentMatch(answer=entry.answer, question=entry.question, source=SOURCE_STORE)

        entry = self._cache.find_by_intent(intent_label)
        if entry is not None:
            return IntentMatch(answer=entry.answer, question=entry.question, source=SOURCE_CACHE)

        return None
