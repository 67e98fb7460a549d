"""Relational store backend: one row per collection, replaced whole."""
import json
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from keranjang.db.session import TransactionManager, make_engine, make_session_factory
from keranjang.errors import StoreError
from keranjang.models import CollectionBlob
from keranjang.utils.logger import get_logger
from .base import PersistenceStore, CollectionKey, Record, collection_key

logger = get_logger(__name__)


class SqlStore(PersistenceStore):
    """Keeps each collection as a JSON array in the ``collections`` table."""

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine if engine is not None else make_engine()
        self.transaction = TransactionManager(make_session_factory(self.engine))

    def read(self, collection: CollectionKey) -> List[Record]:
        key = collection_key(collection)
        try:
            with self.transaction.transaction(auto_commit=False) as session:
                row = session.get(CollectionBlob, key)
                payload = row.payload if row else None
        except SQLAlchemyError as e:
            logger.warning("Collection read failed, treating as empty",
                           collection=key, error=str(e))
            return []

        if payload is None:
            return []
        try:
            data = json.loads(payload)
        except json.JSONDecodeError:
            logger.warning("Corrupt collection payload, treating as empty", collection=key)
            return []
        if not isinstance(data, list):
            return []
        return [record for record in data if isinstance(record, dict)]

    def write(self, collection: CollectionKey, records: List[Record]) -> None:
        key = collection_key(collection)
        try:
            payload = json.dumps(records, ensure_ascii=False)
            with self.transaction.transaction() as session:
                row = session.get(CollectionBlob, key)
                if row is None:
                    session.add(CollectionBlob(key=key, payload=payload))
                else:
                    row.payload = payload
        except (SQLAlchemyError, TypeError, ValueError) as e:
            raise StoreError(
                f"Failed to write collection '{key}'",
                metadata={"error": str(e)}
            ) from e
