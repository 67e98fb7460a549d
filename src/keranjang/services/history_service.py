"""Purchase history queries."""
from typing import Iterable, List, Literal, Optional

from keranjang.domain.types import Collection, HistoryRecord
from keranjang.parser.categories import resolve_category
from .base_service import BaseService

PriceVerdict = Literal["cheaper", "expensive", "same"]


class HistoryService(BaseService):
    """Read-only access to purchase history. Records are never modified."""

    def _owned(self, owner_group_id: str) -> List[HistoryRecord]:
        records = [
            record for record in self._load(Collection.HISTORY, HistoryRecord)
            if record.owner_group_id == owner_group_id
        ]
        return self._newest_first(records, "purchased_at", appended=True)

    def get_history(
        self,
        owner_group_id: str,
        page: int = 0,
        page_size: Optional[int] = None,
        search_term: Optional[str] = None,
        categories: Optional[Iterable[str]] = None
    ) -> List[HistoryRecord]:
        """
        Get one page of purchase history, newest first.

        Both filters must hold for a record to be included. The search term
        is a case-insensitive substring of the item name. Categories are
        compared with exact string equality after a missing category has been
        resolved to OTHER_CATEGORY; an empty category set matches everything.

        Args:
            owner_group_id: Group whose history to read
            page: Zero-based page number
            page_size: Page size (default: DEFAULT_PAGE_SIZE)
            search_term: Optional item name filter
            categories: Optional set of category labels
        """
        term = (search_term or "").lower()
        wanted = set(categories or [])
        other = self.settings.OTHER_CATEGORY

        matches = [
            record for record in self._owned(owner_group_id)
            if term in record.item_name.lower()
            and (not wanted or resolve_category(record.category, other) in wanted)
        ]
        return self._paginate(matches, page, page_size)

    def get_history_categories(self, owner_group_id: str) -> List[str]:
        """Distinct resolved categories of a group's purchases, sorted."""
        other = self.settings.OTHER_CATEGORY
        return sorted({
            resolve_category(record.category, other)
            for record in self._owned(owner_group_id)
        })

    def get_item_history(self, owner_group_id: str, item_name: str) -> List[HistoryRecord]:
        """All purchases of one item name, newest first."""
        return [
            record for record in self._owned(owner_group_id)
            if record.item_name == item_name
        ]

    def last_unit_price(
        self,
        owner_group_id: str,
        item_name: str,
        base_unit: str
    ) -> Optional[float]:
        """Unit price of the latest purchase of this item in this unit."""
        for record in self._owned(owner_group_id):
            if record.item_name == item_name and record.base_unit == base_unit:
                return record.unit_price
        return None

    def price_verdict(
        self,
        owner_group_id: str,
        item_name: str,
        base_unit: str,
        price: float,
        size: float
    ) -> Optional[PriceVerdict]:
        """
        Compare a price being entered at checkout with the last one paid.

        Returns:
            'cheaper', 'expensive' or 'same' per unit, or None when there is
            nothing to compare against
        """
        if size <= 0:
            return None
        last = self.last_unit_price(owner_group_id, item_name, base_unit)
        if not last:
            return None

        current = price / size
        if current < last:
            return "cheaper"
        if current > last:
            return "expensive"
        return "same"
