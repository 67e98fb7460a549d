"""Item management service."""
from typing import Optional, List

from pydantic import ValidationError

from keranjang.domain.types import (
    CheckoutReceipt,
    Collection,
    HistoryRecord,
    ItemRecord,
    NewItem,
    ParsedItem,
)
from keranjang.errors import StoreError
from keranjang.parser.categories import classify
from .base_service import BaseService, Result


def _first_error(e: ValidationError) -> str:
    error = e.errors()[0]
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {error['msg']}" if field else error["msg"]


class ItemService(BaseService):
    """Service for managing shopping items and checking them out."""

    def list_items(
        self,
        owner_group_id: str,
        list_id: str,
        page: int = 0,
        page_size: Optional[int] = None,
        include_purchased: bool = True
    ) -> List[ItemRecord]:
        """
        Get one page of a list's items, newest first.

        Args:
            owner_group_id: Group that owns the items
            list_id: List to read
            page: Zero-based page number
            page_size: Page size (default: DEFAULT_PAGE_SIZE)
            include_purchased: When False only pending items are returned
        """
        items = [
            item for item in self._load(Collection.ITEMS, ItemRecord)
            if item.list_id == list_id
            and item.owner_group_id == owner_group_id
            and (include_purchased or not item.is_purchased)
        ]
        return self._paginate(self._newest_first(items, "created_at"), page, page_size)

    def get_item(self, owner_group_id: str, item_id: str) -> Optional[ItemRecord]:
        """Get a single item, or None if it is missing or owned by another group."""
        for item in self._load(Collection.ITEMS, ItemRecord):
            if item.id == item_id and item.owner_group_id == owner_group_id:
                return item
        return None

    def add_item(self, data: NewItem) -> Result[ItemRecord]:
        """
        Add an item to a list.

        Args:
            data: Item payload including the owner group and list

        Returns:
            Result containing the stored item; its ``id`` is durable and is
            what callers use to replace an optimistic placeholder
        """
        item = ItemRecord(
            id=self._new_id(),
            list_id=data.list_id,
            name=data.name,
            quantity=data.quantity,
            unit=data.unit,
            is_purchased=False,
            owner_group_id=data.owner_group_id,
            created_at=self._get_now(),
            notes=data.notes,
            category=data.category
        )
        items = self._load(Collection.ITEMS, ItemRecord)
        items.insert(0, item)

        try:
            self._save(Collection.ITEMS, items)
        except StoreError as e:
            return self._write_failed("add_item", e, list_id=data.list_id)

        self._log_action(
            "add_item",
            item_id=item.id,
            list_id=item.list_id,
            owner_group_id=item.owner_group_id
        )
        return Result.ok(item)

    def add_parsed(
        self,
        owner_group_id: str,
        list_id: str,
        parsed: ParsedItem,
        auto_categorize: bool = True
    ) -> Result[ItemRecord]:
        """Add an item straight from parser output."""
        try:
            data = NewItem(
                owner_group_id=owner_group_id,
                list_id=list_id,
                name=parsed.name,
                quantity=parsed.quantity,
                unit=parsed.unit,
                category=classify(parsed.name) if auto_categorize else None
            )
        except ValidationError as e:
            return Result.fail(_first_error(e))
        return self.add_item(data)

    def toggle_item(
        self,
        owner_group_id: str,
        item_id: str,
        purchased: bool
    ) -> Result[ItemRecord]:
        """
        Set an item's purchased flag. No history record is written.

        Returns:
            Result containing the updated item, or failure when not found
        """
        items = self._load(Collection.ITEMS, ItemRecord)
        for index, item in enumerate(items):
            if item.id == item_id and item.owner_group_id == owner_group_id:
                break
        else:
            return Result.fail("Item not found")

        updated = item.model_copy(update={"is_purchased": purchased})
        items[index] = updated
        try:
            self._save(Collection.ITEMS, items)
        except StoreError as e:
            return self._write_failed("toggle_item", e, item_id=item_id)

        self._log_action("toggle_item", item_id=item_id, is_purchased=purchased)
        return Result.ok(updated)

    def delete_item(self, owner_group_id: str, item_id: str) -> Result[None]:
        """Remove an item for good. Removing a missing item is not an error."""
        items = self._load(Collection.ITEMS, ItemRecord)
        remaining = [
            item for item in items
            if not (item.id == item_id and item.owner_group_id == owner_group_id)
        ]
        if len(remaining) == len(items):
            return Result.ok(None, deleted=False)

        try:
            self._save(Collection.ITEMS, remaining)
        except StoreError as e:
            return self._write_failed("delete_item", e, item_id=item_id)

        self._log_action("delete_item", item_id=item_id, owner_group_id=owner_group_id)
        return Result.ok(None, deleted=True)

    def move_to_history(
        self,
        item: ItemRecord,
        final_price: float,
        total_size: float,
        base_unit: str,
        item_name: str,
        category: Optional[str] = None,
        list_name: Optional[str] = None,
        store_name: Optional[str] = None,
        notes: Optional[str] = None
    ) -> Result[CheckoutReceipt]:
        """
        Check an item out: record the purchase, then mark the item purchased.

        The store has no cross-collection transaction, so this is two writes.
        If the history write fails nothing has changed. If the history write
        succeeds but marking the item fails, the purchase is recorded while
        the item still looks pending; the failure result carries
        ``stage="mark_purchased"`` and ``history_id`` and the caller converges
        by calling ``toggle_item(owner_group_id, item.id, True)``. No retry
        happens here.

        Args:
            item: The item being checked out
            final_price: Total price paid (>= 0)
            total_size: Pack size bought (> 0)
            base_unit: Unit of ``total_size``
            item_name: Name to record, possibly edited at checkout
            category: Optional category; the item's own category when omitted
            list_name: Optional name of the source list
            store_name: Optional shop name
            notes: Optional free-text notes

        Returns:
            Result containing the receipt (history record and updated item)
        """
        store_name = store_name.strip() if store_name and store_name.strip() else None
        try:
            record = HistoryRecord(
                id=self._new_id(),
                owner_group_id=item.owner_group_id,
                item_name=item_name.strip() or item.name,
                final_price=final_price,
                total_size=total_size,
                base_unit=base_unit,
                category=category,
                list_name=list_name,
                store_name=store_name,
                notes=notes,
                purchased_at=self._get_now()
            )
        except ValidationError as e:
            return Result.fail(_first_error(e))

        current = self.get_item(item.owner_group_id, item.id)
        if current is None:
            return Result.fail("Item not found")
        if current.is_purchased:
            return Result.fail("Item has already been checked out")
        if record.category is None and current.category:
            record = record.model_copy(update={"category": current.category})

        # Step 1: record the purchase
        history = self._load(Collection.HISTORY, HistoryRecord)
        history.append(record)
        try:
            self._save(Collection.HISTORY, history)
        except StoreError as e:
            return self._write_failed("move_to_history", e, item_id=item.id, stage="history")

        # Step 2: take the item out of the pending set
        items = self._load(Collection.ITEMS, ItemRecord)
        updated: Optional[ItemRecord] = None
        for index, stored in enumerate(items):
            if stored.id == item.id and stored.owner_group_id == item.owner_group_id:
                updated = stored.model_copy(update={
                    "is_purchased": True,
                    "name": record.item_name,
                    "quantity": record.total_size,
                    "unit": record.base_unit,
                    "price": record.final_price,
                    "category": record.category,
                    "store_name": record.store_name,
                    "notes": record.notes if record.notes is not None else stored.notes,
                })
                items[index] = updated
                break

        if updated is None:
            # Deleted between the two writes; the purchase is still recorded.
            self.logger.warning("Checked-out item vanished before it was marked",
                                item_id=item.id, history_id=record.id)
            return Result.ok(CheckoutReceipt(history=record), item_marked=False)

        try:
            self._save(Collection.ITEMS, items)
        except StoreError as e:
            self.logger.warning(
                "Purchase recorded but item not marked purchased",
                item_id=item.id,
                history_id=record.id
            )
            return Result.fail(
                e.message,
                suggestions=["Mark the item as purchased again"],
                stage="mark_purchased",
                history_id=record.id,
                item_id=item.id
            )

        self._log_action(
            "move_to_history",
            item_id=item.id,
            history_id=record.id,
            owner_group_id=item.owner_group_id
        )
        return Result.ok(CheckoutReceipt(history=record, item=updated), item_marked=True)
