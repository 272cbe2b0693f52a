from typing import Iterable, List, Mapping, Optional, Protocol
from ..models import Entry


class EntryStore(Protocol):
    """Protocol for the durable store holding question/answer entries."""

    def fetch_all(self) -> List[Entry]:
        """Return every stored entry in store order."""
        ...

    def find_by_intent(self, intent: str) -> Optional[Entry]:
        """Return the first entry whose intent equals ``intent`` (case-sensitive)."""
        ...

    def add(self, document: Mapping) -> str:
        """Persist a new document and return its store-assigned id."""
        ...

    def replace_all(self, documents: Iterable[Mapping], batch_size: int = 500) -> int:
        """Delete every stored document, then write ``documents``. Returns the count written."""
        ...
