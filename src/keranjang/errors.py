"""Error types for Keranjang."""
from typing import Optional, List, Dict, Any


class KeranjangError(Exception):
    """Base class for Keranjang errors."""
    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.metadata = metadata or {}
        super().__init__(message)


class StoreError(KeranjangError):
    """A persistence write failed; the collection was not replaced."""
    pass
