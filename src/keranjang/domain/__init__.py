"""Domain records for Keranjang."""
from .types import (
    Collection,
    ListRecord,
    NewItem,
    ItemRecord,
    HistoryRecord,
    StoreRecord,
    ParsedItem,
    CheckoutReceipt,
)

__all__ = [
    'Collection', 'ListRecord', 'NewItem', 'ItemRecord', 'HistoryRecord',
    'StoreRecord', 'ParsedItem', 'CheckoutReceipt'
]
