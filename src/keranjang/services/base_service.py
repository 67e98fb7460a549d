"""Base service class with common functionality."""
import uuid
from typing import TypeVar, Generic, Optional, List, Type
from datetime import datetime, UTC
from pydantic import BaseModel, ConfigDict, ValidationError

from keranjang.config.settings import get_settings
from keranjang.domain.types import Collection
from keranjang.errors import StoreError
from keranjang.storage.base import PersistenceStore
from keranjang.utils.logger import get_logger

# Generic type for service results
T = TypeVar('T')
M = TypeVar('M', bound=BaseModel)


class Result(BaseModel, Generic[T]):
    """Generic result type for service operations."""
    success: bool
    data: Optional[T] = None
    error: str = ""
    suggestions: List[str] = []
    metadata: dict = {}

    # Allow arbitrary types
    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def ok(cls, data: T = None, **metadata) -> 'Result[T]':
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def fail(cls, error: str, suggestions: Optional[List[str]] = None, **metadata) -> 'Result[T]':
        """Create a failed result."""
        return cls(
            success=False,
            error=error or "Unknown error",
            suggestions=suggestions or [],
            metadata=metadata
        )

    def __bool__(self) -> bool:
        return self.success


class BaseService:
    """Base class for all engine services.

    Services hold no state besides the store: every read goes back to the
    store and every mutation writes the whole collection.
    """

    def __init__(self, store: PersistenceStore):
        """
        Initialize the service.

        Args:
            store: Persistence store shared by all services
        """
        self.store = store
        self.settings = get_settings()
        self.logger = get_logger(self.__class__.__name__)

    def _log_action(
        self,
        action: str,
        status: str = "success",
        **kwargs
    ) -> None:
        """
        Log a service action.

        Args:
            action: Name of the action
            status: Status of the action
            **kwargs: Additional log data
        """
        self.logger.info(
            f"{action}: {status}",
            **kwargs
        )

    def _get_now(self) -> datetime:
        """Get current UTC datetime."""
        return datetime.now(UTC)

    def _new_id(self) -> str:
        """Generate a durable record identifier."""
        return uuid.uuid4().hex

    def _page_size(self, page_size: Optional[int]) -> int:
        return page_size if page_size is not None else self.settings.DEFAULT_PAGE_SIZE

    def _paginate(self, records: List[M], page: int, page_size: Optional[int]) -> List[M]:
        """Slice ``[page * size, page * size + size)``; bad arguments give an empty page."""
        size = self._page_size(page_size)
        if page < 0 or size <= 0:
            return []
        start = page * size
        return records[start:start + size]

    def _load(self, collection: Collection, model: Type[M]) -> List[M]:
        """
        Read and validate a whole collection.

        Records that fail validation are skipped; an unreadable collection
        reads as empty.
        """
        records: List[M] = []
        for raw in self.store.read(collection):
            try:
                records.append(model.model_validate(raw))
            except ValidationError as e:
                self.logger.warning(
                    "Skipping invalid record",
                    collection=collection.value,
                    errors=e.error_count()
                )
        return records

    def _save(self, collection: Collection, records: List[BaseModel]) -> None:
        """
        Replace a whole collection.

        Raises:
            StoreError: If the store rejects the write
        """
        self.store.write(collection, [record.model_dump(mode="json") for record in records])

    def _write_failed(self, action: str, error: StoreError, **kwargs) -> Result:
        """Log a failed write and turn it into a failed result."""
        self.logger.error(f"{action}: failed", error=error.message, **kwargs)
        return Result.fail(
            error.message,
            suggestions=["Try again", "Check storage availability"],
            **error.metadata
        )

    @staticmethod
    def _newest_first(records: List[M], attr: str, appended: bool = False) -> List[M]:
        """
        Sort by timestamp, newest first.

        Equal timestamps keep insertion recency: collections that prepend
        already hold the newest record first, appended ones hold it last.
        """
        ordered = list(reversed(records)) if appended else list(records)
        return sorted(ordered, key=lambda record: getattr(record, attr), reverse=True)
