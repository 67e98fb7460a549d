"""JSON file store: one blob per collection, like a browser's local storage."""
import json
import os
import tempfile
from pathlib import Path
from typing import List, Union

from keranjang.errors import StoreError
from keranjang.utils.logger import get_logger
from .base import PersistenceStore, CollectionKey, Record, collection_key

logger = get_logger(__name__)


class JsonFileStore(PersistenceStore):
    """Stores each collection as ``<directory>/<collection>.json``."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, collection: CollectionKey) -> Path:
        return self.directory / f"{collection_key(collection)}.json"

    def read(self, collection: CollectionKey) -> List[Record]:
        path = self._path(collection)
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError:
            return []
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Unreadable collection, treating as empty",
                           path=str(path), error=str(e))
            return []

        if not isinstance(data, list):
            logger.warning("Collection is not a list, treating as empty", path=str(path))
            return []
        return [record for record in data if isinstance(record, dict)]

    def write(self, collection: CollectionKey, records: List[Record]) -> None:
        path = self._path(collection)
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{path.stem}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(records, handle, ensure_ascii=False)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise StoreError(
                f"Failed to write collection '{collection_key(collection)}'",
                metadata={"path": str(path), "error": str(e)}
            ) from e
