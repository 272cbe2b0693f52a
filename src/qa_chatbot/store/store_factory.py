from ..config import ChatbotConfig
from .base import EntryStore
from .memory_store import InMemoryEntryStore


def create_entry_store(config: ChatbotConfig) -> EntryStore:
    """
    Factory returning the entry store selected by ``config.store_backend``.

    :param config: ChatbotConfig instance
    :return: EntryStore implementation
    """
    backend = config.store_backend.lower()

    if backend == "memory":
        return InMemoryEntryStore()

    elif backend == "firestore":
        from .firestore_store import FirestoreEntryStore, create_firestore_client
        client = create_firestore_client(config)
        return FirestoreEntryStore(client, collection=config.qa_collection)

    else:
        raise ValueError(f"Unknown store backend: {backend}")
