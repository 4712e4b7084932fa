"""Unit tests for building an OrderDraft from the cart."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import OrderDraft, OrderStatus, OrderType
from tests.fakes import burger


def _cart() -> Cart:
    cart = Cart()
    cart.add(burger(1), 2)
    cart.add(burger(5, "Fries", "400"), 1)
    return cart


class TestFromCart:

    def test_delivery_draft(self):
        draft = OrderDraft.from_cart(
            _cart(), OrderType.DELIVERY, " 0771234567 ", delivery_address=" 12 Galle Rd ",
        )
        assert draft.contact_phone == "0771234567"
        assert draft.delivery_address == "12 Galle Rd"
        assert [(l.menu_item_id, l.quantity) for l in draft.line_items] == [(1, 2), (5, 1)]

    def test_empty_cart_rejected_first(self):
        with pytest.raises(ValidationError, match="cart is empty"):
            OrderDraft.from_cart(Cart(), OrderType.DELIVERY, "", delivery_address="")

    @pytest.mark.parametrize("address", [None, "", "   "])
    def test_delivery_needs_address(self, address):
        with pytest.raises(ValidationError, match="delivery address"):
            OrderDraft.from_cart(_cart(), OrderType.DELIVERY, "0771234567", delivery_address=address)

    def test_address_checked_before_phone(self):
        with pytest.raises(ValidationError, match="delivery address"):
            OrderDraft.from_cart(_cart(), OrderType.DELIVERY, "")

    @pytest.mark.parametrize("order_type", [OrderType.PICKUP, OrderType.DINE_IN])
    def test_non_delivery_drops_address(self, order_type):
        draft = OrderDraft.from_cart(
            _cart(), order_type, "0771234567", delivery_address="somewhere",
        )
        assert draft.delivery_address is None

    @pytest.mark.parametrize("phone", ["", "  "])
    def test_phone_required(self, phone):
        with pytest.raises(ValidationError, match="contact number"):
            OrderDraft.from_cart(_cart(), OrderType.PICKUP, phone)

    def test_blank_notes_dropped(self):
        draft = OrderDraft.from_cart(_cart(), OrderType.PICKUP, "077", notes="  ")
        assert draft.notes is None

    def test_draft_is_a_snapshot(self):
        cart = _cart()
        draft = OrderDraft.from_cart(cart, OrderType.PICKUP, "077")
        cart.clear()
        assert len(draft.line_items) == 2


class TestPayload:

    def test_delivery_payload(self):
        draft = OrderDraft.from_cart(
            _cart(), OrderType.DELIVERY, "0771234567",
            delivery_address="12 Galle Rd", notes="No onions",
        )
        assert draft.to_payload() == {
            "items": [
                {"menuItemId": 1, "quantity": 2},
                {"menuItemId": 5, "quantity": 1},
            ],
            "orderType": "DELIVERY",
            "phoneNumber": "0771234567",
            "deliveryAddress": "12 Galle Rd",
            "notes": "No onions",
        }

    def test_payload_carries_no_prices(self):
        draft = OrderDraft.from_cart(_cart(), OrderType.DINE_IN, "077")
        payload = draft.to_payload()
        assert "deliveryAddress" not in payload
        assert "notes" not in payload
        assert all(set(item) == {"menuItemId", "quantity"} for item in payload["items"])


class TestOrderStatus:

    @pytest.mark.parametrize("raw", ["CONFIRMED", "OUT_FOR_DELIVERY", "READY_FOR_PICKUP", "DELIVERED"])
    def test_backend_statuses(self, raw):
        assert OrderStatus.parse(raw).value == raw

    def test_missing_status_is_pending(self):
        assert OrderStatus.parse(None) == OrderStatus.PENDING

    def test_unrecognised_status(self):
        assert OrderStatus.parse("REFUNDED") == OrderStatus.UNKNOWN
