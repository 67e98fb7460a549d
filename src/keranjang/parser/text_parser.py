"""Turn a typed or spoken shopping command into a structured item.

Utterances are nearly always ``[item words] [quantity] [unit]`` or
``[item words] [quantity]``. Quantity and unit phrases are short, come from a
fixed vocabulary and sit at the end, while the item name is open vocabulary,
so the parser strips tokens from the right and whatever is left is the name:

    >>> parse("telur 2 kilo", "id")
    ParsedItem(raw='telur 2 kilo', name='telur', quantity=2.0, unit='kg')

The parser never raises. Missing signal degrades to ``quantity=1`` and
``unit="pcs"``.
"""
import math
import re
from typing import List, Optional, Tuple

from keranjang.config.settings import get_settings
from keranjang.domain.types import ParsedItem
from keranjang.utils.logger import get_logger
from .tables import COMMAND_PREFIXES, LOCALE_TABLES, LocaleTables

logger = get_logger(__name__)

DEFAULT_QUANTITY = 1.0
DEFAULT_UNIT = "pcs"
FALLBACK_NAME = "Item"

_DECIMAL = re.compile(r"^(\d+(\.\d+)?|\.\d+)$")
_PREFIX = re.compile(r"^(" + "|".join(COMMAND_PREFIXES) + r")\s+", re.IGNORECASE)


def normalize_locale(locale: Optional[str]) -> str:
    """Map 'id', 'en', 'id-ID', 'en_US' and friends to a known locale key."""
    if locale:
        primary = re.split(r"[-_]", locale.strip().lower(), maxsplit=1)[0]
        if primary in LOCALE_TABLES:
            return primary
    return get_settings().DEFAULT_LOCALE


def _clean(token: str) -> str:
    """Lower-case and drop one trailing '.' or ','."""
    token = token.lower()
    if token and token[-1] in ".,":
        token = token[:-1]
    return token


def _parse_decimal(text: str, tables: LocaleTables) -> Optional[float]:
    for separator in tables.decimal_separators:
        text = text.replace(separator, ".")
    if not _DECIMAL.match(text):
        return None
    value = float(text)
    return value if math.isfinite(value) and value > 0 else None


def parse_quantity(token: str, tables: LocaleTables) -> Optional[float]:
    """Literal decimal first, then the locale's number words."""
    cleaned = _clean(token)
    value = _parse_decimal(cleaned, tables)
    if value is not None:
        return value
    return tables.number_words.get(cleaned)


def split_fused(token: str, tables: LocaleTables) -> Optional[Tuple[float, str]]:
    """Split a token such as '1kilo' or '2,5kg' into (quantity, canonical unit)."""
    cleaned = _clean(token)
    for alias in tables.suffixes_longest_first():
        if len(cleaned) > len(alias) and cleaned.endswith(alias):
            quantity = _parse_decimal(cleaned[:-len(alias)], tables)
            if quantity is not None:
                return quantity, tables.aliases[alias]
    return None


def lookup_unit(token: str, tables: LocaleTables) -> Optional[str]:
    return tables.aliases.get(_clean(token))


def strip_command_prefix(name: str) -> str:
    """Remove one leading command verb such as 'beli' or 'add'."""
    return _PREFIX.sub("", name, count=1)


def parse(
    utterance: str,
    locale: Optional[str] = None,
    tables: Optional[LocaleTables] = None
) -> ParsedItem:
    """
    Parse a single-item utterance.

    Args:
        utterance: Raw text, typed or transcribed
        locale: 'id' or 'en' (BCP-47 tags like 'id-ID' are accepted)
        tables: Vocabulary override; defaults to the locale's tables

    Returns:
        ParsedItem with name, quantity and unit
    """
    if tables is None:
        tables = LOCALE_TABLES[normalize_locale(locale)]

    words: List[str] = utterance.split()
    if not words:
        return ParsedItem(raw=utterance, name="", quantity=DEFAULT_QUANTITY, unit=DEFAULT_UNIT)

    quantity = DEFAULT_QUANTITY
    unit = DEFAULT_UNIT

    fused = split_fused(words[-1], tables)
    detected_unit = None if fused else lookup_unit(words[-1], tables)

    if fused:
        quantity, unit = fused
        words.pop()
    elif detected_unit:
        unit = detected_unit
        words.pop()
        if words:
            detected_quantity = parse_quantity(words[-1], tables)
            if detected_quantity is not None:
                quantity = detected_quantity
                words.pop()
    else:
        detected_quantity = parse_quantity(words[-1], tables)
        if detected_quantity is not None:
            quantity = detected_quantity
            words.pop()

    name = strip_command_prefix(" ".join(words))
    result = ParsedItem(
        raw=utterance,
        name=name or FALLBACK_NAME,
        quantity=quantity,
        unit=unit
    )
    logger.debug("Parsed utterance", raw=utterance, name=result.name,
                 quantity=result.quantity, unit=result.unit)
    return result
