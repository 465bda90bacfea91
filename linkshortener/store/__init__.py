from linkshortener.store.base import EntryBaseStore, OwnerBaseRegistry
from linkshortener.store.memory import EntryMemoryStore, OwnerMemoryRegistry


__all__ = [
    'EntryBaseStore',
    'OwnerBaseRegistry',
    'EntryMemoryStore',
    'OwnerMemoryRegistry',
]
