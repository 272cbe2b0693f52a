"""
Firestore-backed entry store.

Talks to the local Firestore emulator or to Cloud Firestore depending on the
configured environment.
"""
import logging
import os
from typing import Iterable, List, Mapping, Optional

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from ..config import ChatbotConfig
from ..exceptions import StoreUnavailable
from ..models import Entry

logger = logging.getLogger(__name__)


def create_firestore_client(config: ChatbotConfig) -> firestore.Client:
    """
    Create a Firestore client for the configured environment.

    Local mode points the client at the emulator; the client library picks up
    FIRESTORE_EMULATOR_HOST and uses anonymous credentials.
    """
    if config.is_local:
        os.environ.setdefault("FIRESTORE_EMULATOR_HOST", config.firestore_emulator_host)
        logger.info(f"Connecting to Firestore emulator at {os.environ['FIRESTORE_EMULATOR_HOST']}")
    else:
        logger.info("Connecting to Cloud Firestore")

    return firestore.Client(
        project=config.project_id,
        database=config.firestore_database_id,
    )


class FirestoreEntryStore:
    """EntryStore implementation over a single Firestore collection."""

    def __init__(self, client: firestore.Client, collection: str = "qa_pairs"):
        self._client = client
        self._collection_name = collection

    @property
    def _collection(self):
        return self._client.collection(self._collection_name)

    def fetch_all(self) -> List[Entry]:
        try:
            return [
                Entry.from_document(doc.id, doc.to_dict() or {})
                for doc in self._collection.stream()
            ]
        except google_exceptions.GoogleAPIError as e:
            raise StoreUnavailable(f"Failed to read '{self._collection_name}': {e}") from e

    def find_by_intent(self, intent: str) -> Optional[Entry]:
        try:
            query = self._collection.where(filter=FieldFilter("intent", "==", intent)).limit(1)
            for doc in query.stream():
                return Entry.from_document(doc.id, doc.to_dict() or {})
        except google_exceptions.GoogleAPIError as e:
            raise StoreUnavailable(f"Intent lookup failed for '{intent}': {e}") from e
        return None

    def add(self, document: Mapping) -> str:
        try:
            _, doc_ref = self._collection.add(dict(document))
        except google_exceptions.GoogleAPIError as e:
            raise StoreUnavailable(f"Failed to add document: {e}") from e
        return doc_ref.id

    def replace_all(self, documents: Iterable[Mapping], batch_size: int = 500) -> int:
        try:
            deleted = self._clear(batch_size)
            logger.info(f"Deleted {deleted} documents from '{self._collection_name}'")

            written = 0
            batch = self._client.batch()
            pending = 0
            for document in documents:
                batch.set(self._collection.document(), dict(document))
                pending += 1
                if pending == batch_size:
                    batch.commit()
                    written += pending
                    logger.info(f"Progress: {written} documents written")
                    batch = self._client.batch()
                    pending = 0

            if pending:
                batch.commit()
                written += pending
        except google_exceptions.GoogleAPIError as e:
            raise StoreUnavailable(f"Bulk write to '{self._collection_name}' failed: {e}") from e

        return written

    def _clear(self, batch_size: int) -> int:
        deleted = 0
        while True:
            docs = list(self._collection.limit(batch_size).stream())
            if not docs:
                return deleted

            batch = self._client.batch()
            for doc in docs:
                batch.delete(doc.reference)
            batch.commit()
            deleted += len(docs)

            if len(docs) < batch_size:
                return deleted
