"""
Tests for the entry cache snapshot.
"""
import threading
import time
import pytest
from unittest.mock import Mock

from qa_chatbot.exceptions import StoreUnavailable
from qa_chatbot.models import Entry
from qa_chatbot.resolution import EntryCache
from qa_chatbot.store import InMemoryEntryStore


def _generation(tag: str, size: int = 3):
    return [Entry(id=f"{tag}-{i}", question=f"{tag} question {i}", answer=f"{tag} answer {i}") for i in range(size)]


class GatedStore:
    """Store whose fetch_all can be held open to observe a reload in progress."""

    def __init__(self, generations):
        self._generations = list(generations)
        self.gated = False
        self.fetch_started = threading.Event()
        self.release = threading.Event()

    def fetch_all(self):
        entries = self._generations.pop(0)
        if self.gated:
            self.fetch_started.set()
            assert self.release.wait(timeout=5)
        return entries


class TestEntryCacheLoad:
    """Tests for EntryCache.load()."""

    def test_empty_before_first_load(self):
        cache = EntryCache(InMemoryEntryStore())

        assert not cache.is_loaded()
        assert cache.snapshot() == ()
        assert cache.size() == 0
        assert cache.loaded_at is None

    def test_load_returns_count_and_preserves_order(self):
        store = InMemoryEntryStore([
            {"question": "First?", "answer": "1"},
            {"question": "Second?", "answer": "2"},
            {"question": "Third?", "answer": "3"},
        ])
        cache = EntryCache(store)

        assert cache.load() == 3
        assert cache.is_loaded()
        assert [e.question for e in cache.snapshot()] == ["First?", "Second?", "Third?"]
        assert cache.loaded_at is not None

    def test_empty_store_still_counts_as_loaded(self):
        cache = EntryCache(InMemoryEntryStore())

        assert cache.load() == 0
        assert cache.is_loaded()

    def test_snapshot_is_immutable(self):
        cache = EntryCache(InMemoryEntryStore([{"question": "Q?", "answer": "A"}]))
        cache.load()

        assert isinstance(cache.snapshot(), tuple)

    def test_load_is_idempotent(self):
        cache = EntryCache(InMemoryEntryStore([{"question": "Q?", "answer": "A"}]))

        cache.load()
        first = cache.snapshot()
        cache.load()

        assert cache.snapshot() == first

    def test_invalid_and_duplicate_entries_are_skipped(self):
        store = Mock()
        store.fetch_all.return_value = [
            Entry(id="1", question="Valid?", answer="Yes"),
            Entry(id="2", question="", answer="No question"),
            Entry(id="3", question="No answer?", answer=""),
            Entry(id="1", question="Duplicate id?", answer="Dropped"),
        ]
        cache = EntryCache(store)

        assert cache.load() == 1
        assert cache.snapshot()[0].question == "Valid?"


class TestEntryCacheFailure:
    """A failed load must never leave a partial snapshot."""

    def test_failure_keeps_previous_snapshot(self):
        store = Mock()
        store.fetch_all.side_effect = [_generation("old"), StoreUnavailable("connection refused")]
        cache = EntryCache(store)
        cache.load()
        before = cache.snapshot()

        with pytest.raises(StoreUnavailable):
            cache.load()

        assert cache.snapshot() is before
        assert cache.is_loaded()

    def test_failure_on_first_load_stays_unloaded(self):
        store = Mock()
        store.fetch_all.side_effect = StoreUnavailable("connection refused")
        cache = EntryCache(store)

        with pytest.raises(StoreUnavailable):
            cache.load()

        assert not cache.is_loaded()

    def test_unexpected_error_is_wrapped(self):
        store = Mock()
        store.fetch_all.side_effect = RuntimeError("socket closed")
        cache = EntryCache(store)

        with pytest.raises(StoreUnavailable, match="socket closed"):
            cache.load()


class TestEntryCacheAtomicity:
    """Readers see either the old or the new snapshot, never a mix."""

    def test_reader_during_reload_sees_old_snapshot(self):
        old, new = _generation("old"), _generation("new", size=5)
        store = GatedStore([old, new])
        cache = EntryCache(store)
        cache.load()
        held_by_reader = cache.snapshot()

        store.gated = True
        loader = threading.Thread(target=cache.load)
        loader.start()
        assert store.fetch_started.wait(timeout=5)

        assert cache.snapshot() == tuple(old)

        store.release.set()
        loader.join(timeout=5)

        assert held_by_reader == tuple(old)
        assert cache.snapshot() == tuple(new)

    def test_concurrent_readers_only_observe_complete_generations(self):
        generations = [_generation(f"gen{i}", size=4 + i % 3) for i in range(30)]
        cache = EntryCache(Mock(fetch_all=Mock(side_effect=generations)))
        cache.load()
        observed = []
        stop = threading.Event()

        def reader():
            while not stop.is_set():
                observed.append(cache.snapshot())
                time.sleep(0.0005)

        readers = [threading.Thread(target=reader) for _ in range(4)]
        for thread in readers:
            thread.start()
        while len(observed) < len(readers):
            time.sleep(0.001)
        for _ in range(len(generations) - 1):
            cache.load()
        stop.set()
        for thread in readers:
            thread.join(timeout=5)

        complete = {tuple(g) for g in generations}
        assert observed
        assert all(snapshot in complete for snapshot in observed)


class TestEntryCacheIntentLookup:
    """Tests for case-insensitive intent lookup on the snapshot."""

    def test_find_by_intent_is_case_insensitive(self):
        store = InMemoryEntryStore([
            {"intent": "Capital_France", "question": "Capital of France?", "answer": "Paris"},
        ])
        cache = EntryCache(store)
        cache.load()

        assert cache.find_by_intent("capital_france").answer == "Paris"
        assert cache.find_by_intent("capital_spain") is None

    def test_first_match_wins(self):
        store = InMemoryEntryStore([
            {"intent": "greeting", "question": "Hello?", "answer": "first"},
            {"intent": "GREETING", "question": "Hi?", "answer": "second"},
        ])
        cache = EntryCache(store)
        cache.load()

        assert cache.find_by_intent("greeting").answer == "first"
