"""The local data engine: all services over one persistence store."""
from typing import Optional

from keranjang.config.settings import KeranjangSettings
from keranjang.storage import PersistenceStore, create_store
from keranjang.utils.logger import get_logger
from .history_service import HistoryService
from .item_service import ItemService
from .list_service import ListService
from .store_service import StoreService

logger = get_logger(__name__)


class DataEngine:
    """Lists, items, history and shops sharing one store."""

    def __init__(self, store: PersistenceStore):
        self.store = store
        self.lists = ListService(store)
        self.items = ItemService(store)
        self.history = HistoryService(store)
        self.stores = StoreService(store)

    @classmethod
    def from_settings(cls, settings: Optional[KeranjangSettings] = None) -> 'DataEngine':
        """Build an engine on the backend chosen by STORE_BACKEND."""
        store = create_store(settings)
        logger.info("Data engine ready", backend=type(store).__name__)
        return cls(store)
