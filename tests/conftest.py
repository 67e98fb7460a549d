"""Test configuration and fixtures for Keranjang."""
import pytest
from typing import List, Set

from keranjang.domain.types import NewItem
from keranjang.errors import StoreError
from keranjang.storage import MemoryStore, collection_key
from keranjang.services import (
    DataEngine,
    ListService,
    ItemService,
    HistoryService,
    StoreService,
)


class FailingStore(MemoryStore):
    """Memory store whose writes can be made to fail per collection."""

    def __init__(self):
        super().__init__()
        self.failing: Set[str] = set()
        self.writes: List[str] = []

    def fail(self, *collections) -> None:
        self.failing.update(collection_key(c) for c in collections)

    def heal(self) -> None:
        self.failing.clear()

    def write(self, collection, records) -> None:
        key = collection_key(collection)
        if key in self.failing:
            raise StoreError(f"Failed to write collection '{key}'")
        self.writes.append(key)
        super().write(collection, records)


@pytest.fixture
def store() -> FailingStore:
    """Create a fresh store for a test."""
    return FailingStore()


@pytest.fixture
def engine(store) -> DataEngine:
    """Create a data engine over the test store."""
    return DataEngine(store)


@pytest.fixture
def list_service(engine) -> ListService:
    return engine.lists


@pytest.fixture
def item_service(engine) -> ItemService:
    return engine.items


@pytest.fixture
def history_service(engine) -> HistoryService:
    return engine.history


@pytest.fixture
def store_service(engine) -> StoreService:
    return engine.stores


@pytest.fixture
def household() -> str:
    """Owner group used by most tests."""
    return "household-1"


@pytest.fixture
def neighbour() -> str:
    """A second owner group whose records must never leak."""
    return "household-2"


@pytest.fixture
def shopping_list(list_service, household):
    """Create a test shopping list."""
    result = list_service.create_list(household, "Belanja Mingguan")
    assert result.success
    return result.data


@pytest.fixture
def add_item(item_service, household, shopping_list):
    """Factory adding an item to the test list."""
    def _add(name: str = "Telur", quantity: float = 1, unit: str = "pcs", **kwargs):
        result = item_service.add_item(NewItem(
            owner_group_id=household,
            list_id=shopping_list.id,
            name=name,
            quantity=quantity,
            unit=unit,
            **kwargs
        ))
        assert result.success
        return result.data
    return _add
