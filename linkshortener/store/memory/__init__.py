from linkshortener.store.memory.entry_memory_store import EntryMemoryStore
from linkshortener.store.memory.owner_memory_registry import OwnerMemoryRegistry


__all__ = [
    'EntryMemoryStore',
    'OwnerMemoryRegistry',
]
