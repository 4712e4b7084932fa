"""Integration tests for the PlaceOrder use case.

Uses in-memory fakes; no file I/O, no network.
"""

import pytest

from storefront.application.cart_service import CartService
from storefront.application.dto import NETWORK_MESSAGE, FailureReason
from storefront.application.place_order import GENERIC_FAILURE, PlaceOrderHandler
from storefront.application.session_manager import SessionManager
from storefront.domain.exceptions import (
    MalformedResponseError,
    NetworkUnreachableError,
    RemoteRejectedError,
    SessionExpiredError,
)
from storefront.domain.model.order import OrderType
from tests.fakes import (
    FakeAccountGateway,
    FakeCartRepository,
    FakeOrderGateway,
    FakeTokenRepository,
    burger,
)


def _setup(
    signed_in: bool = True,
) -> tuple[PlaceOrderHandler, CartService, FakeOrderGateway, FakeCartRepository]:
    session = SessionManager(FakeAccountGateway(), FakeTokenRepository())
    session.bootstrap()
    if signed_in:
        session.sign_in("0771234567", "secret1")
    cart_repo = FakeCartRepository()
    cart = CartService(cart_repo)
    cart.add_to_cart(burger(1), 2)
    cart.add_to_cart(burger(2, "Fries", "400"), 1)
    orders = FakeOrderGateway()
    return PlaceOrderHandler(session, cart, orders), cart, orders, cart_repo


class TestPlaceOrderHappyPath:

    def test_places_order_and_clears_cart(self):
        handler, cart, orders, cart_repo = _setup()
        result = handler.handle(OrderType.DELIVERY, delivery_address="12 Galle Rd")
        assert result.success
        assert result.message == "Order placed successfully!"
        assert result.data.id == 101
        assert cart.is_empty
        assert cart_repo.stored is None
        assert len(orders.placed) == 1

    def test_draft_mirrors_cart(self):
        handler, _, orders, _ = _setup()
        handler.handle(OrderType.PICKUP)
        draft = orders.placed[0]
        assert [(l.menu_item_id, l.quantity) for l in draft.line_items] == [(1, 2), (2, 1)]
        assert draft.delivery_address is None

    def test_phone_defaults_to_account_number(self):
        handler, _, orders, _ = _setup()
        handler.handle(OrderType.PICKUP)
        assert orders.placed[0].contact_phone == "0771234567"

    def test_explicit_phone_wins(self):
        handler, _, orders, _ = _setup()
        handler.handle(OrderType.DINE_IN, contact_phone="0719999999")
        assert orders.placed[0].contact_phone == "0719999999"


class TestPlaceOrderRejectedLocally:

    def test_guest_cannot_order(self):
        handler, cart, orders, _ = _setup(signed_in=False)
        result = handler.handle(OrderType.PICKUP)
        assert result.reason == FailureReason.LOGIN_REQUIRED
        assert orders.placed == []
        assert cart.count == 3

    def test_empty_cart(self):
        handler, cart, orders, _ = _setup()
        cart.clear_cart()
        result = handler.handle(OrderType.PICKUP)
        assert result.reason == FailureReason.VALIDATION
        assert result.message == "Your cart is empty"
        assert orders.placed == []

    def test_delivery_without_address(self):
        handler, cart, orders, _ = _setup()
        result = handler.handle(OrderType.DELIVERY, delivery_address="  ")
        assert result.reason == FailureReason.VALIDATION
        assert result.message == "Please enter a delivery address"
        assert orders.placed == []
        assert cart.count == 3

    def test_blank_phone(self):
        handler, _, orders, _ = _setup()
        result = handler.handle(OrderType.PICKUP, contact_phone=" ")
        assert result.message == "Please enter a contact number"
        assert orders.placed == []


class TestPlaceOrderRemoteFailure:

    @pytest.mark.parametrize("error, reason, message", [
        (NetworkUnreachableError("timeout"), FailureReason.NETWORK_UNREACHABLE, NETWORK_MESSAGE),
        (RemoteRejectedError("Item 2 not found", 400), FailureReason.REJECTED, GENERIC_FAILURE),
        (RemoteRejectedError("boom", 500), FailureReason.SERVER_ERROR, GENERIC_FAILURE),
        (MalformedResponseError("junk"), FailureReason.SERVER_ERROR, GENERIC_FAILURE),
        (SessionExpiredError(), FailureReason.LOGIN_REQUIRED, "Session expired. Please login again."),
    ])
    def test_failure_keeps_cart_and_is_not_retried(self, error, reason, message):
        handler, cart, orders, cart_repo = _setup()
        orders.error = error
        snapshot_before, saves_before = cart_repo.stored, cart_repo.saves
        result = handler.handle(OrderType.PICKUP)
        assert not result.success
        assert result.reason == reason
        assert result.message == message
        assert len(orders.placed) == 1
        assert cart.count == 3
        assert cart_repo.stored is snapshot_before
        assert cart_repo.saves == saves_before
        assert cart_repo.stored.count == 3

    def test_can_resubmit_after_failure(self):
        handler, cart, orders, _ = _setup()
        orders.error = NetworkUnreachableError("timeout")
        handler.handle(OrderType.PICKUP)
        orders.error = None
        assert handler.handle(OrderType.PICKUP).success
        assert cart.is_empty

    def test_accepted_order_with_unreadable_record_still_clears_cart(self):
        handler, cart, orders, cart_repo = _setup()
        orders.unreadable_record = True
        result = handler.handle(OrderType.PICKUP)
        assert result.success
        assert result.message == "Order placed successfully!"
        assert result.data is None
        assert cart.is_empty
        assert cart_repo.stored is None
