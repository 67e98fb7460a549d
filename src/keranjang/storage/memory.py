"""In-memory store, used for guest sessions and tests."""
import copy
from typing import Dict, List

from keranjang.utils.logger import get_logger
from .base import PersistenceStore, CollectionKey, Record, collection_key

logger = get_logger(__name__)


class MemoryStore(PersistenceStore):
    """Keeps deep copies so callers can never mutate stored state in place."""

    def __init__(self, initial: Dict[str, List[Record]] = None):
        self._data: Dict[str, List[Record]] = {}
        for key, records in (initial or {}).items():
            self._data[collection_key(key)] = copy.deepcopy(list(records))

    def read(self, collection: CollectionKey) -> List[Record]:
        return copy.deepcopy(self._data.get(collection_key(collection), []))

    def write(self, collection: CollectionKey, records: List[Record]) -> None:
        key = collection_key(collection)
        self._data[key] = copy.deepcopy(list(records))
        logger.trace("Collection written", collection=key, size=len(records))
