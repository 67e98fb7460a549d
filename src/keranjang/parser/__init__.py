"""Command parser and category classifier."""
from .text_parser import parse, normalize_locale
from .categories import classify, resolve_category, CATEGORY_KEYWORDS
from .tables import LOCALE_TABLES, LocaleTables

__all__ = [
    'parse', 'normalize_locale', 'classify', 'resolve_category',
    'CATEGORY_KEYWORDS', 'LOCALE_TABLES', 'LocaleTables'
]
