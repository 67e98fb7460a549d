"""Tests for checking items out into purchase history."""
import pytest
from pydantic import ValidationError

from keranjang.domain.types import Collection


def test_move_to_history(item_service, history_service, household, shopping_list, add_item):
    """Test a checkout records one purchase and clears the pending item."""
    item = add_item("Telur", quantity=1, unit="kg")
    result = item_service.move_to_history(item, 15000, 2, "pcs", "Eggs")
    assert result.success
    assert result.metadata["item_marked"]

    history = history_service.get_history(household)
    assert len(history) == 1
    assert history[0].final_price == 15000
    assert history[0].total_size == 2
    assert history[0].base_unit == "pcs"
    assert history[0].item_name == "Eggs"
    assert history[0].owner_group_id == household

    pending = item_service.list_items(household, shopping_list.id, include_purchased=False)
    assert item.id not in [i.id for i in pending]


def test_checked_out_item_is_kept_and_updated(item_service, household, add_item):
    """Test the item is marked purchased, not deleted, with checkout details."""
    item = add_item("Telur")
    receipt = item_service.move_to_history(
        item, 28000, 1, "kg", "Telur Ayam",
        category="Produk Susu & Telur", list_name="Belanja Mingguan",
        store_name=" Indomaret ", notes="promo"
    ).data

    stored = item_service.get_item(household, item.id)
    assert stored.is_purchased
    assert stored.name == "Telur Ayam"
    assert stored.quantity == 1
    assert stored.unit == "kg"
    assert stored.price == 28000
    assert stored.store_name == "Indomaret"
    assert stored.notes == "promo"
    assert receipt.item == stored
    assert receipt.history.list_name == "Belanja Mingguan"
    assert receipt.history.store_name == "Indomaret"


def test_invalid_checkout_details_write_nothing(item_service, history_service, household, add_item, store):
    """Test negative prices and empty sizes are refused up front."""
    item = add_item("Telur")
    writes_before = list(store.writes)

    assert not item_service.move_to_history(item, -1, 1, "pcs", "Telur").success
    assert not item_service.move_to_history(item, 1000, 0, "pcs", "Telur").success
    assert store.writes == writes_before
    assert history_service.get_history(household) == []


def test_free_items_can_be_recorded(item_service, household, add_item):
    item = add_item("Sampel")
    assert item_service.move_to_history(item, 0, 1, "pcs", "Sampel").success


def test_checkout_twice_is_refused(item_service, history_service, household, add_item):
    """Test the purchased flag flips once per checkout."""
    item = add_item("Telur")
    assert item_service.move_to_history(item, 15000, 1, "kg", "Telur").success
    again = item_service.move_to_history(item, 15000, 1, "kg", "Telur")
    assert not again.success
    assert "already" in again.error
    assert len(history_service.get_history(household)) == 1


def test_checkout_missing_item(item_service, history_service, household, add_item):
    item = add_item("Telur")
    item_service.delete_item(household, item.id)
    result = item_service.move_to_history(item, 15000, 1, "kg", "Telur")
    assert not result.success
    assert history_service.get_history(household) == []


def test_history_write_failure_changes_nothing(item_service, history_service, household, add_item, store):
    """Test a failure in the first step leaves both collections as they were."""
    item = add_item("Telur")
    store.fail(Collection.HISTORY)

    result = item_service.move_to_history(item, 15000, 1, "kg", "Telur")
    assert not result.success
    store.heal()
    assert history_service.get_history(household) == []
    assert not item_service.get_item(household, item.id).is_purchased


def test_mark_failure_is_reported_and_convergent(item_service, history_service, household, add_item, store):
    """Test a failure in the second step is surfaced so the caller can finish it."""
    item = add_item("Telur")
    store.fail(Collection.ITEMS)

    result = item_service.move_to_history(item, 15000, 1, "kg", "Telur")
    assert not result.success
    assert result.metadata["stage"] == "mark_purchased"
    history = history_service.get_history(household)
    assert [record.id for record in history] == [result.metadata["history_id"]]
    assert not item_service.get_item(household, item.id).is_purchased

    # The caller finishes the transition on its own
    store.heal()
    assert item_service.toggle_item(household, item.id, True).success
    assert item_service.get_item(household, item.id).is_purchased
    assert len(history_service.get_history(household)) == 1


def test_history_record_is_immutable(item_service, add_item):
    item = add_item("Telur")
    record = item_service.move_to_history(item, 15000, 1, "kg", "Telur").data.history
    with pytest.raises(ValidationError):
        record.final_price = 1
    assert record.final_price == 15000


def test_item_category_kept_when_checkout_omits_it(item_service, history_service, household, add_item):
    """Test the category set when adding survives a checkout without one."""
    item = add_item("Telur", category="Produk Susu & Telur")
    receipt = item_service.move_to_history(item, 15000, 1, "kg", "Telur").data
    assert receipt.history.category == "Produk Susu & Telur"
    assert receipt.item.category == "Produk Susu & Telur"
    assert history_service.get_history_categories(household) == ["Produk Susu & Telur"]

    other = add_item("Kopi", category="Minuman")
    receipt = item_service.move_to_history(other, 10000, 1, "pcs", "Kopi", category="Bahan Masakan").data
    assert receipt.history.category == "Bahan Masakan"


def test_infinite_amounts_are_refused(item_service, history_service, household, add_item):
    item = add_item("Telur")
    assert not item_service.move_to_history(item, float("inf"), 1, "pcs", "Telur").success
    assert not item_service.move_to_history(item, 1000, float("inf"), "pcs", "Telur").success
    assert history_service.get_history(household) == []
