"""Tests for spending summaries and price comparison."""
from datetime import datetime, UTC

import pytest

from keranjang.domain.types import HistoryRecord
from keranjang.services import (
    calculate_total_spending,
    compare_unit_prices,
    group_spending_by_category,
)


def receipt(name, price, category=None):
    return HistoryRecord(
        id=name,
        owner_group_id="household-1",
        item_name=name,
        final_price=price,
        total_size=1,
        base_unit="pcs",
        category=category,
        purchased_at=datetime(2026, 1, 1, tzinfo=UTC)
    )


def test_total_spending():
    assert calculate_total_spending([]) == 0
    assert calculate_total_spending([receipt("a", 1000), receipt("b", 2500)]) == 3500


def test_group_by_category():
    """Test totals, counts and shares, largest first."""
    stats = group_spending_by_category([
        receipt("Kopi", 10000, "Minuman"),
        receipt("Teh", 5000, "Minuman"),
        receipt("Roti", 15000, "Makanan"),
        receipt("Paku", 10000),
    ])
    assert [s.category for s in stats] == ["Minuman", "Makanan", "Lainnya"]
    assert stats[0].total == 15000
    assert stats[0].count == 2
    assert stats[0].percentage == pytest.approx(37.5)
    assert sum(s.percentage for s in stats) == pytest.approx(100)


def test_group_by_category_custom_other_label():
    stats = group_spending_by_category([receipt("Paku", 10000)], other="Other")
    assert [s.category for s in stats] == ["Other"]


def test_group_by_category_zero_spending():
    stats = group_spending_by_category([receipt("Sampel", 0, "Makanan")])
    assert stats[0].percentage == 0
    assert group_spending_by_category([]) == []


def test_compare_unit_prices():
    """Test winner and rounded savings."""
    result = compare_unit_prices(10000, 1, 18000, 2)
    assert result.winner == "B"
    assert result.savings_percent == 10

    result = compare_unit_prices(5000, 1, 12000, 2)
    assert result.winner == "A"
    assert result.savings_percent == 17


def test_compare_tie_and_invalid_quantities():
    assert compare_unit_prices(10000, 2, 5000, 1).winner == "Tie"
    assert compare_unit_prices(10000, 0, 5000, 1).winner is None
    assert compare_unit_prices(10000, 1, 5000, -1).winner is None
