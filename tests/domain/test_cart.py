"""Unit tests for the Cart aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money
from tests.fakes import burger


class TestAdd:

    def test_new_item_creates_line(self):
        cart = Cart()
        line = cart.add(burger(), 2)
        assert len(cart.lines) == 1
        assert line.quantity.value == 2

    def test_same_item_merges_into_one_line(self):
        cart = Cart()
        cart.add(burger(1), 2)
        cart.add(burger(1), 3)
        assert len(cart.lines) == 1
        assert cart.lines[0].quantity.value == 5

    def test_merge_keeps_first_snapshot(self):
        cart = Cart()
        cart.add(burger(1, price="1000"))
        cart.add(burger(1, price="2000"))
        assert cart.lines[0].item.price == Money.of("1000")

    def test_distinct_items_keep_insertion_order(self):
        cart = Cart()
        cart.add(burger(2, "Fries"))
        cart.add(burger(1))
        cart.add(burger(2, "Fries"))
        assert [line.item_id for line in cart.lines] == [2, 1]

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_quantity_rejected(self, quantity):
        cart = Cart()
        with pytest.raises(ValidationError, match="must be positive"):
            cart.add(burger(), quantity)
        assert cart.is_empty


class TestUpdateAndRemove:

    def test_update_sets_absolute_quantity(self):
        cart = Cart()
        cart.add(burger(), 2)
        cart.update_quantity(1, 7)
        assert cart.lines[0].quantity.value == 7

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_update_to_non_positive_removes_line(self, quantity):
        cart = Cart()
        cart.add(burger(), 2)
        cart.update_quantity(1, quantity)
        assert cart.is_empty

    def test_update_unknown_item_is_noop(self):
        cart = Cart()
        cart.add(burger(), 2)
        cart.update_quantity(99, 5)
        assert cart.count == 2

    def test_remove(self):
        cart = Cart()
        cart.add(burger(1))
        cart.add(burger(2, "Fries"))
        cart.remove(1)
        assert [line.item_id for line in cart.lines] == [2]

    def test_remove_unknown_item_is_noop(self):
        cart = Cart()
        cart.add(burger())
        cart.remove(42)
        assert len(cart.lines) == 1

    def test_clear(self):
        cart = Cart()
        cart.add(burger(), 3)
        cart.clear()
        assert cart.is_empty
        assert cart.count == 0


class TestTotals:

    def test_subtotal_and_count(self):
        cart = Cart()
        cart.add(burger(1, price="1250.00"), 2)
        cart.add(burger(2, "Fries", "450.50"), 1)
        assert cart.subtotal == Money.of("2950.50")
        assert cart.count == 3

    def test_empty_cart_totals(self):
        cart = Cart()
        assert cart.subtotal == Money.zero()
        assert cart.count == 0
        assert cart.is_empty

    def test_line_total(self):
        cart = Cart()
        line = cart.add(burger(price="300"), 4)
        assert line.line_total == Money.of("1200")
