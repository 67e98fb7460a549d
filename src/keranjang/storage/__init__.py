"""Persistence stores for the data engine."""
from typing import Optional

from keranjang.config.settings import KeranjangSettings, get_settings
from keranjang.db.session import make_engine
from .base import PersistenceStore, Record, collection_key
from .memory import MemoryStore
from .json_store import JsonFileStore
from .sql_store import SqlStore


def create_store(settings: Optional[KeranjangSettings] = None) -> PersistenceStore:
    """Build the store selected by ``STORE_BACKEND``."""
    settings = settings or get_settings()
    if settings.STORE_BACKEND == "json":
        return JsonFileStore(settings.JSON_STORE_DIR)
    if settings.STORE_BACKEND == "sql":
        return SqlStore(make_engine(settings.DB_URL, settings.DB_ECHO))
    return MemoryStore()


__all__ = [
    'PersistenceStore', 'Record', 'collection_key',
    'MemoryStore', 'JsonFileStore', 'SqlStore', 'create_store'
]
