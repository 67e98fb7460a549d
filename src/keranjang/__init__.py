"""Keranjang: local-first shopping lists with a bilingual command parser."""

__version__ = "0.1.0"
