"""List management service."""
from typing import Optional, List

from keranjang.domain.types import Collection, ListRecord
from keranjang.errors import StoreError
from .base_service import BaseService, Result


class ListService(BaseService):
    """Service for managing shopping lists."""

    def list_lists(
        self,
        owner_group_id: str,
        page: int = 0,
        page_size: Optional[int] = None
    ) -> List[ListRecord]:
        """
        Get one page of a group's lists, newest first.

        Args:
            owner_group_id: Group whose lists to return
            page: Zero-based page number
            page_size: Page size (default: DEFAULT_PAGE_SIZE)

        Returns:
            The page; callers derive ``has_more`` as ``len(page) == page_size``
        """
        lists = [
            list_ for list_ in self._load(Collection.LISTS, ListRecord)
            if list_.owner_group_id == owner_group_id
        ]
        return self._paginate(self._newest_first(lists, "created_at"), page, page_size)

    def get_list(self, owner_group_id: str, list_id: str) -> Optional[ListRecord]:
        """Get a single list, or None if it is missing or owned by another group."""
        for list_ in self._load(Collection.LISTS, ListRecord):
            if list_.id == list_id and list_.owner_group_id == owner_group_id:
                return list_
        return None

    def create_list(
        self,
        owner_group_id: str,
        name: str,
        created_by: str = "guest"
    ) -> Result[ListRecord]:
        """
        Create a new shopping list.

        Args:
            owner_group_id: Group that owns the list
            name: Name of the list
            created_by: User who created it

        Returns:
            Result containing the created list or error
        """
        if not name or not name.strip():
            return Result.fail("List name cannot be empty")

        new_list = ListRecord(
            id=self._new_id(),
            name=name.strip(),
            owner_group_id=owner_group_id,
            created_by=created_by,
            created_at=self._get_now()
        )
        lists = self._load(Collection.LISTS, ListRecord)
        lists.insert(0, new_list)

        try:
            self._save(Collection.LISTS, lists)
        except StoreError as e:
            return self._write_failed("create_list", e, owner_group_id=owner_group_id)

        self._log_action("create_list", list_id=new_list.id, owner_group_id=owner_group_id)
        return Result.ok(new_list)

    def update_list(
        self,
        owner_group_id: str,
        list_id: str,
        name: str
    ) -> Result[ListRecord]:
        """
        Rename a list in place.

        Args:
            owner_group_id: Group that owns the list
            list_id: ID of the list to rename
            name: New name

        Returns:
            Result containing the updated list, or failure when not found
        """
        if not name or not name.strip():
            return Result.fail("List name cannot be empty")

        lists = self._load(Collection.LISTS, ListRecord)
        for index, list_ in enumerate(lists):
            if list_.id == list_id and list_.owner_group_id == owner_group_id:
                break
        else:
            return Result.fail("List not found")

        updated = list_.model_copy(update={"name": name.strip()})
        lists[index] = updated
        try:
            self._save(Collection.LISTS, lists)
        except StoreError as e:
            return self._write_failed("update_list", e, list_id=list_id)

        self._log_action("update_list", list_id=list_id, owner_group_id=owner_group_id)
        return Result.ok(updated)

    def delete_list(self, owner_group_id: str, list_id: str) -> Result[None]:
        """
        Delete a list. Deleting a list that does not exist is not an error.

        Items of the list are left untouched.
        """
        lists = self._load(Collection.LISTS, ListRecord)
        remaining = [
            list_ for list_ in lists
            if not (list_.id == list_id and list_.owner_group_id == owner_group_id)
        ]
        if len(remaining) == len(lists):
            return Result.ok(None, deleted=False)

        try:
            self._save(Collection.LISTS, remaining)
        except StoreError as e:
            return self._write_failed("delete_list", e, list_id=list_id)

        self._log_action("delete_list", list_id=list_id, owner_group_id=owner_group_id)
        return Result.ok(None, deleted=True)
