"""Persistence store interface.

The engine only ever reads a whole collection and writes a whole collection
back. Stores offer no indexing, querying or cross-collection transactions.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Union

from keranjang.domain.types import Collection

Record = Dict[str, Any]
CollectionKey = Union[Collection, str]


def collection_key(collection: CollectionKey) -> str:
    """Plain string key for a collection."""
    return collection.value if isinstance(collection, Collection) else str(collection)


class PersistenceStore(ABC):
    """Whole-collection key-value store."""

    @abstractmethod
    def read(self, collection: CollectionKey) -> List[Record]:
        """
        Read a whole collection.

        Returns:
            The stored records in order; an empty list when the collection
            is missing or unreadable.
        """

    @abstractmethod
    def write(self, collection: CollectionKey, records: List[Record]) -> None:
        """
        Atomically replace a whole collection.

        Raises:
            StoreError: If the collection could not be written
        """
