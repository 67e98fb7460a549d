"""Local data engine services."""
from .base_service import BaseService, Result
from .list_service import ListService
from .item_service import ItemService
from .history_service import HistoryService
from .store_service import StoreService
from .statistics import (
    CategoryStat,
    PriceComparison,
    calculate_total_spending,
    compare_unit_prices,
    group_spending_by_category,
)
from .engine import DataEngine
from .optimistic import ShoppingListView, optimistic

__all__ = [
    'BaseService', 'Result', 'ListService', 'ItemService', 'HistoryService',
    'StoreService', 'DataEngine', 'ShoppingListView', 'optimistic',
    'CategoryStat', 'PriceComparison', 'calculate_total_spending',
    'compare_unit_prices', 'group_spending_by_category'
]
