"""Static vocabulary for the command parser.

Each locale maps canonical units to the spellings people actually say or type,
and number words to their values. Adding a locale means adding a table here;
the parsing rules in ``text_parser`` do not change.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple


UNITS_ID: Dict[str, List[str]] = {
    'kg': ['kg', 'kilo', 'kilogram'],
    'liter': ['liter', 'ltr', 'l'],
    'ml': ['ml', 'mili', 'mililiter'],
    'pcs': ['buah', 'biji', 'pcs', 'bungkus', 'pack', 'kaleng', 'botol', 'ikat', 'sisir', 'papan', 'kotak', 'sachet'],
    'ons': ['ons'],
    'gram': ['gram', 'gr', 'g'],
    'oz': ['oz'],
}

UNITS_EN: Dict[str, List[str]] = {
    'kg': ['kg', 'kilo', 'kilogram', 'kgs', 'kilos', 'kilograms'],
    'liter': ['liter', 'ltr', 'l', 'liters', 'litre', 'litres'],
    'ml': ['ml', 'milliliter', 'milliliters'],
    'pcs': ['piece', 'pcs', 'pack', 'bag', 'can', 'bottle', 'bunch', 'box', 'sachet',
            'pieces', 'packs', 'bags', 'cans', 'bottles', 'bunches', 'boxes'],
    'lb': ['lb', 'pound', 'lbs', 'pounds'],
    'oz': ['oz', 'ounce', 'ounces'],
    'gram': ['g', 'gram', 'gms', 'grams'],
}

NUMBER_WORDS_ID: Dict[str, float] = {
    'satu': 1, 'dua': 2, 'tiga': 3, 'empat': 4, 'lima': 5,
    'enam': 6, 'tujuh': 7, 'delapan': 8, 'sembilan': 9, 'sepuluh': 10,
    'sebelas': 11, 'seratus': 100,
    'setengah': 0.5, 'seperempat': 0.25,
}

NUMBER_WORDS_EN: Dict[str, float] = {
    'one': 1, 'two': 2, 'three': 3, 'four': 4, 'five': 5,
    'six': 6, 'seven': 7, 'eight': 8, 'nine': 9, 'ten': 10,
    'eleven': 11, 'twelve': 12,
    'half': 0.5, 'quarter': 0.25, 'a': 1, 'an': 1,
}

COMMAND_PREFIXES: Tuple[str, ...] = ('beli', 'buy', 'tambahkan', 'add', 'catat', 'note')


@dataclass(frozen=True)
class LocaleTables:
    """Vocabulary for one locale."""
    units: Dict[str, List[str]]
    number_words: Dict[str, float]
    decimal_separators: Tuple[str, ...] = ('.',)
    aliases: Dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # First canonical unit listing a spelling wins
        aliases: Dict[str, str] = {}
        for canonical, variants in self.units.items():
            for variant in variants:
                aliases.setdefault(variant, canonical)
        object.__setattr__(self, 'aliases', aliases)

    def suffixes_longest_first(self) -> List[str]:
        """Unit spellings ordered so '500ml' matches 'ml' before 'l'."""
        return sorted(self.aliases, key=len, reverse=True)


LOCALE_TABLES: Dict[str, LocaleTables] = {
    'id': LocaleTables(UNITS_ID, NUMBER_WORDS_ID, decimal_separators=(',', '.')),
    'en': LocaleTables(UNITS_EN, NUMBER_WORDS_EN),
}
