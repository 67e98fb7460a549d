"""Tests for the command parser."""
import pytest

from keranjang.parser import parse, normalize_locale
from keranjang.parser.tables import NUMBER_WORDS_EN, NUMBER_WORDS_ID, UNITS_EN, UNITS_ID


def triple(parsed):
    return parsed.name, parsed.quantity, parsed.unit


def test_quantity_and_unit():
    """Test the common '[name] [quantity] [unit]' shape."""
    assert triple(parse("telur 2 kilo", "id")) == ("telur", 2, "kg")
    assert triple(parse("add milk 2 liters", "en")) == ("milk", 2, "liter")
    assert triple(parse("milk 2 liter", "en")) == ("milk", 2, "liter")


def test_bare_quantity_defaults_to_pcs():
    """Test a trailing number with no unit."""
    assert triple(parse("roti tawar 3", "id")) == ("roti tawar", 3, "pcs")
    assert triple(parse("Roti tawar satu", "id")) == ("Roti tawar", 1, "pcs")


def test_no_quantity_no_unit():
    """Test that plain names keep every word."""
    assert triple(parse("bananas", "en")) == ("bananas", 1, "pcs")
    assert triple(parse("add bananas", "en")) == ("bananas", 1, "pcs")


def test_unit_without_quantity():
    """Test a unit with nothing numeric before it."""
    assert triple(parse("susu kotak", "id")) == ("susu", 1, "pcs")
    assert triple(parse("beras kg", "id")) == ("beras", 1, "kg")


def test_command_prefix_stripped_only_at_start():
    """Test command verbs are removed from the start of the name only."""
    assert triple(parse("beli susu 2 liter", "id")) == ("susu", 2, "liter")
    assert triple(parse("Tambahkan gula 1 kg", "id")) == ("gula", 1, "kg")
    assert triple(parse("catat beli susu", "id")) == ("beli susu", 1, "pcs")
    assert triple(parse("kopi beli 2", "id")) == ("kopi beli", 2, "pcs")


def test_prefix_needs_following_word():
    """Test a lone command verb is kept as the name."""
    assert triple(parse("beli 2 kg", "id")) == ("beli", 2, "kg")


def test_number_words():
    """Test number words in both locales."""
    assert triple(parse("telur setengah kilo", "id")) == ("telur", 0.5, "kg")
    assert triple(parse("daging seperempat kg", "id")) == ("daging", 0.25, "kg")
    assert triple(parse("eggs a dozen", "en")) == ("eggs a dozen", 1, "pcs")
    assert triple(parse("cheese half pound", "en")) == ("cheese", 0.5, "lb")
    assert triple(parse("buy apples an bag", "en")) == ("apples", 1, "pcs")


@pytest.mark.parametrize("word,value", sorted(NUMBER_WORDS_ID.items()))
def test_every_indonesian_number_word(word, value):
    assert triple(parse(f"telur {word} kilo", "id")) == ("telur", value, "kg")


@pytest.mark.parametrize("word,value", sorted(NUMBER_WORDS_EN.items()))
def test_every_english_number_word(word, value):
    assert triple(parse(f"flour {word} kg", "en")) == ("flour", value, "kg")


@pytest.mark.parametrize("locale,table", [("id", UNITS_ID), ("en", UNITS_EN)])
def test_every_unit_alias_is_recognized(locale, table):
    """Test each spelling maps to a canonical unit."""
    for canonical, variants in table.items():
        for variant in variants:
            parsed = parse(f"barang 3 {variant}", locale)
            assert parsed.quantity == 3
            assert parsed.name == "barang"
            # 'ons' style overlaps resolve to the first canonical unit listing it
            assert parsed.unit in table


def test_decimal_separators():
    """Test comma decimals are Indonesian only."""
    assert triple(parse("daging 1,5 kg", "id")) == ("daging", 1.5, "kg")
    assert triple(parse("daging 1.5 kg", "id")) == ("daging", 1.5, "kg")
    assert triple(parse("beef 1.5 kg", "en")) == ("beef", 1.5, "kg")
    assert triple(parse("beef 1,5 kg", "en")) == ("beef 1,5", 1, "kg")


def test_trailing_punctuation():
    """Test one trailing period or comma is ignored."""
    assert triple(parse("gula 2 kg.", "id")) == ("gula", 2, "kg")
    assert triple(parse("gula 2,", "id")) == ("gula", 2, "pcs")


def test_fused_quantity_and_unit():
    """Test tokens like '1kilo' split into quantity and unit."""
    assert triple(parse("telur 1kilo", "id")) == ("telur", 1, "kg")
    assert triple(parse("telur 1kilo", "en")) == ("telur", 1, "kg")
    assert triple(parse("susu 500ml", "id")) == ("susu", 500, "ml")
    assert triple(parse("daging 2,5kg", "id")) == ("daging", 2.5, "kg")
    assert triple(parse("tepung 100gr", "id")) == ("tepung", 100, "gram")


def test_fused_token_needs_numeric_prefix():
    """Test that words ending in a unit spelling are not split."""
    assert triple(parse("sabun mandi", "id")) == ("sabun mandi", 1, "pcs")
    assert triple(parse("apel 2xkg", "id")) == ("apel 2xkg", 1, "pcs")


def test_non_quantities_stay_in_name():
    """Test strict numbers: nan, negative and zero are not quantities."""
    assert triple(parse("roti nan", "id")) == ("roti nan", 1, "pcs")
    assert triple(parse("roti -2", "id")) == ("roti -2", 1, "pcs")
    assert triple(parse("roti 0", "id")) == ("roti 0", 1, "pcs")
    assert triple(parse("roti 3x", "id")) == ("roti 3x", 1, "pcs")


def test_empty_input():
    """Test empty and blank input."""
    assert triple(parse("", "id")) == ("", 1, "pcs")
    assert triple(parse("   ", "en")) == ("", 1, "pcs")


def test_fallback_name_when_everything_consumed():
    """Test 'Item' is used when only quantity/unit tokens were given."""
    assert triple(parse("2 kg", "id")) == ("Item", 2, "kg")
    assert triple(parse("3", "en")) == ("Item", 3, "pcs")
    assert triple(parse("kilo", "id")) == ("Item", 1, "kg")


def test_internal_whitespace_collapses():
    """Test names are rejoined with single spaces."""
    assert triple(parse("  roti   tawar   3 ", "id")) == ("roti tawar", 3, "pcs")


def test_raw_text_is_kept():
    assert parse(" telur 2 kilo", "id").raw == " telur 2 kilo"


def test_locale_tags():
    """Test BCP-47 tags and unknown locales."""
    assert normalize_locale("id-ID") == "id"
    assert normalize_locale("en_US") == "en"
    assert normalize_locale("EN") == "en"
    assert normalize_locale("fr-FR") == "id"
    assert normalize_locale(None) == "id"
    assert triple(parse("cheese half pound", "en-US")) == ("cheese", 0.5, "lb")


def test_locale_specific_vocabulary():
    """Test words only known in one locale."""
    assert triple(parse("telur dua", "en")) == ("telur dua", 1, "pcs")
    assert triple(parse("eggs two", "id")) == ("eggs two", 1, "pcs")
    assert triple(parse("susu 2 botol", "id")) == ("susu", 2, "pcs")
    assert triple(parse("milk 2 bottle", "en")) == ("milk", 2, "pcs")


def test_overflowing_numbers_stay_in_name():
    """Test digit strings too large for a finite float are not quantities."""
    huge = "9" * 400
    assert triple(parse(f"telur {huge}", "id")) == (f"telur {huge}", 1, "pcs")
    assert triple(parse(f"telur {huge} kg", "id")) == (f"telur {huge}", 1, "kg")
    assert triple(parse(f"telur {huge}kg", "id")) == (f"telur {huge}kg", 1, "pcs")
