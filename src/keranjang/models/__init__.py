"""Models package for Keranjang."""
from .base import Base
from .collection import CollectionBlob

__all__ = ['Base', 'CollectionBlob']
