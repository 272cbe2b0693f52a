"""
In-process entry store.

Used for tests and for running the service without a Firestore emulator.
"""
import threading
import uuid
from typing import Dict, Iterable, List, Mapping, Optional
from ..models import Entry


class InMemoryEntryStore:
    """
    Dict-backed implementation of the EntryStore protocol.

    Preserves insertion order, assigns opaque hex ids like a document store would.
    """

    def __init__(self, documents: Optional[Iterable[Mapping]] = None):
        self._documents: Dict[str, dict] = {}
        self._lock = threading.Lock()

        for document in documents or []:
            self.add(document)

    def fetch_all(self) -> List[Entry]:
        with self._lock:
            items = list(self._documents.items())
        return [Entry.from_document(doc_id, data) for doc_id, data in items]

    def find_by_intent(self, intent: str) -> Optional[Entry]:
        with self._lock:
            for doc_id, data in self._documents.items():
                if data.get("intent") == intent:
                    return Entry.from_document(doc_id, data)
        return None

    def add(self, document: Mapping) -> str:
        doc_id = uuid.uuid4().hex
        with self._lock:
            self._documents[doc_id] = dict(document)
        return doc_id

    def replace_all(self, documents: Iterable[Mapping], batch_size: int = 500) -> int:
        fresh = {uuid.uuid4().hex: dict(document) for document in documents}
        with self._lock:
            self._documents = fresh
        return len(fresh)

    def __len__(self) -> int:
        return len(self._documents)
