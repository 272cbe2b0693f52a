"""
Durable entry store adapters.

The resolution engine depends only on the EntryStore protocol; Firestore and
in-memory implementations are provided.
"""
from .base import EntryStore
from .memory_store import InMemoryEntryStore
from .store_factory import create_entry_store

__all__ = ["EntryStore", "InMemoryEntryStore", "create_entry_store"]
