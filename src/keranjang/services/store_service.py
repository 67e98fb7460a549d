"""Shop names for checkout autocomplete."""
from datetime import datetime
from typing import Dict, List

from keranjang.domain.types import Collection, HistoryRecord, StoreRecord
from keranjang.errors import StoreError
from .base_service import BaseService, Result


class StoreService(BaseService):
    """Keeps the set of known shop names, unique regardless of case."""

    def list_stores(self) -> List[str]:
        """Saved shop names in insertion order."""
        return [store.name for store in self._load(Collection.STORES, StoreRecord)]

    def add_store(self, name: str) -> Result[StoreRecord]:
        """
        Save a shop name.

        A name that matches an existing one ignoring case is not added again;
        the first spelling seen is kept.
        """
        if not name or not name.strip():
            return Result.fail("Store name cannot be empty")
        name = name.strip()

        stores = self._load(Collection.STORES, StoreRecord)
        for store in stores:
            if store.name.lower() == name.lower():
                return Result.ok(store, created=False)

        store = StoreRecord(name=name)
        stores.append(store)
        try:
            self._save(Collection.STORES, stores)
        except StoreError as e:
            return self._write_failed("add_store", e)

        self._log_action("add_store", store_count=len(stores))
        return Result.ok(store, created=True)

    def suggest_stores(self, owner_group_id: str) -> List[str]:
        """
        Shop names for autocomplete, most recently used first.

        Saved names and every shop name seen in the group's history are
        merged without case-insensitive duplicates, keeping the first
        spelling seen (saved names first, then history newest first). Shops
        never used in a purchase come after all used ones, in that order.
        """
        history = self._newest_first(
            [
                record for record in self._load(Collection.HISTORY, HistoryRecord)
                if record.owner_group_id == owner_group_id
            ],
            "purchased_at",
            appended=True
        )

        last_used: Dict[str, datetime] = {}
        for record in history:
            if record.store_name and record.store_name.strip():
                key = record.store_name.strip().lower()
                if key not in last_used or record.purchased_at > last_used[key]:
                    last_used[key] = record.purchased_at

        names: Dict[str, str] = {}
        candidates = self.list_stores() + [
            record.store_name.strip() for record in history
            if record.store_name and record.store_name.strip()
        ]
        for candidate in candidates:
            names.setdefault(candidate.lower(), candidate)

        used = sorted(
            (key for key in names if key in last_used),
            key=lambda key: last_used[key],
            reverse=True
        )
        unused = [key for key in names if key not in last_used]
        return [names[key] for key in used + unused]
