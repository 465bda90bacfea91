from linkshortener.store.base.entry_base_store import EntryBaseStore
from linkshortener.store.base.owner_base_registry import OwnerBaseRegistry


__all__ = [
    'EntryBaseStore',
    'OwnerBaseRegistry',
]
