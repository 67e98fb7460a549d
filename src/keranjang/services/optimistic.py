"""Caller-side optimistic state for a shopping list.

The engine is stateless and slow persistence should not block the view, so
callers apply a change to their local copy first, then persist it, and put
the previous copy back if persisting fails.
"""
import uuid
from typing import Callable, List, Optional, Set, TypeVar

from keranjang.domain.types import ItemRecord, ParsedItem
from keranjang.utils.logger import get_logger
from .base_service import Result
from .item_service import ItemService

T = TypeVar('T')

logger = get_logger(__name__)


def optimistic(
    state: List[T],
    mutate: Callable[[List[T]], None],
    persist: Callable[[], Result]
) -> Result:
    """
    Apply ``mutate`` to ``state`` in place, then run ``persist``.

    The list is restored to its snapshot when ``persist`` returns a failed
    result or raises; exceptions are re-raised after the restore.
    """
    snapshot = list(state)
    mutate(state)
    try:
        result = persist()
    except Exception:
        state[:] = snapshot
        raise
    if not result.success:
        logger.debug("Reverting optimistic update", error=result.error)
        state[:] = snapshot
    return result


class ShoppingListView:
    """Items of one list as a caller sees them, with paging state."""

    def __init__(
        self,
        service: ItemService,
        owner_group_id: str,
        list_id: str,
        page_size: Optional[int] = None
    ):
        self.service = service
        self.owner_group_id = owner_group_id
        self.list_id = list_id
        self.page_size = page_size or service.settings.DEFAULT_PAGE_SIZE
        self.items: List[ItemRecord] = []
        self.page = 0
        self.has_more = True
        # Purchases recorded whose item has not been marked purchased yet
        self.pending_sync: Set[str] = set()

    def _fetch(self, page: int) -> List[ItemRecord]:
        data = self.service.list_items(self.owner_group_id, self.list_id, page, self.page_size)
        self.has_more = len(data) == self.page_size
        return data

    def refresh(self) -> List[ItemRecord]:
        """Reload from page 0, e.g. after an external change notification."""
        self.page = 0
        self.items = self._fetch(0)
        return self.items

    def load_more(self) -> List[ItemRecord]:
        """Append the next page. Does nothing once the last page was seen."""
        if not self.has_more:
            return []
        data = self._fetch(self.page + 1)
        self.page += 1
        self.items.extend(data)
        return data

    def _find(self, item_id: str) -> Optional[ItemRecord]:
        return next((item for item in self.items if item.id == item_id), None)

    def _replace(self, item_id: str, new: ItemRecord) -> Callable[[List[ItemRecord]], None]:
        def mutate(state: List[ItemRecord]) -> None:
            state[:] = [new if item.id == item_id else item for item in state]
        return mutate

    def add(self, parsed: ParsedItem) -> Result[ItemRecord]:
        """Show the item at once under a temporary id, then swap in the stored record."""
        placeholder = ItemRecord(
            id=f"tmp-{uuid.uuid4().hex}",
            list_id=self.list_id,
            name=parsed.name,
            quantity=parsed.quantity,
            unit=parsed.unit,
            owner_group_id=self.owner_group_id,
            created_at=self.service._get_now()
        )
        result = optimistic(
            self.items,
            lambda state: state.insert(0, placeholder),
            lambda: self.service.add_parsed(self.owner_group_id, self.list_id, parsed)
        )
        if result.success:
            self._replace(placeholder.id, result.data)(self.items)
        return result

    def toggle(self, item_id: str, purchased: bool) -> Result[ItemRecord]:
        item = self._find(item_id)
        if item is None:
            return Result.fail("Item not found")
        result = optimistic(
            self.items,
            self._replace(item_id, item.model_copy(update={"is_purchased": purchased})),
            lambda: self.service.toggle_item(self.owner_group_id, item_id, purchased)
        )
        if result.success:
            self.pending_sync.discard(item_id)
        return result

    def delete(self, item_id: str) -> Result[None]:
        def mutate(state: List[ItemRecord]) -> None:
            state[:] = [item for item in state if item.id != item_id]

        return optimistic(
            self.items,
            mutate,
            lambda: self.service.delete_item(self.owner_group_id, item_id)
        )

    def checkout(
        self,
        item_id: str,
        final_price: float,
        total_size: float,
        base_unit: str,
        item_name: str,
        category: Optional[str] = None,
        list_name: Optional[str] = None,
        store_name: Optional[str] = None,
        notes: Optional[str] = None
    ) -> Result:
        """
        Show the item as purchased with its checkout details, then record it.

        When the purchase was recorded but marking the item failed, the row
        stays purchased and the item waits in ``pending_sync``. Checking it
        out again only finishes the marking, so no second purchase is recorded.
        """
        item = self._find(item_id)
        if item is None:
            return Result.fail("Item not found")
        if item_id in self.pending_sync:
            return self.finish_checkout(item_id)

        speculative = item.model_copy(update={
            "is_purchased": True,
            "name": item_name.strip() or item.name,
            "quantity": total_size,
            "unit": base_unit,
            "price": final_price,
            "category": category if category is not None else item.category,
            "store_name": store_name,
            "notes": notes if notes is not None else item.notes,
        })
        result = optimistic(
            self.items,
            self._replace(item_id, speculative),
            lambda: self.service.move_to_history(
                item, final_price, total_size, base_unit, item_name,
                category=category, list_name=list_name,
                store_name=store_name, notes=notes
            )
        )
        if result.success:
            if result.data.item is not None:
                self._replace(item_id, result.data.item)(self.items)
        elif result.metadata.get("stage") == "mark_purchased":
            self._replace(item_id, speculative)(self.items)
            self.pending_sync.add(item_id)
        return result

    def finish_checkout(self, item_id: str) -> Result[ItemRecord]:
        """Mark an item whose purchase is already recorded as purchased."""
        if item_id not in self.pending_sync:
            return Result.fail("Item has no unfinished checkout")
        result = self.service.toggle_item(self.owner_group_id, item_id, True)
        if result.success:
            self.pending_sync.discard(item_id)
            item = self._find(item_id)
            if item is not None and not item.is_purchased:
                # Row was reloaded from storage after the failed checkout
                self._replace(item_id, item.model_copy(update={"is_purchased": True}))(self.items)
        else:
            logger.debug("Item still waiting to be marked purchased", item_id=item_id)
        return result
