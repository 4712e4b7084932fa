"""Application service: Place Order use case.

Turns the current cart plus the checkout form into exactly one
``POST /orders/add``.  Every check that can fail without the server
runs first, so invalid input never costs a round-trip.  The cart is
cleared only after the backend accepted the order; on any failure it
stays as it was and nothing is retried.  An accepted order whose
record cannot be read back still counts as placed; ``data`` is then
None.
"""

from __future__ import annotations

import logging

from storefront.application.cart_service import CartService
from storefront.application.dto import FailureReason, OperationResult, failure_from
from storefront.application.session_manager import SessionManager
from storefront.domain.exceptions import GatewayError, ValidationError
from storefront.domain.gateway.order_gateway import OrderGateway
from storefront.domain.model.order import OrderDraft, OrderType

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to place order. Please try again."


class PlaceOrderHandler:

    def __init__(
        self,
        session_manager: SessionManager,
        cart_service: CartService,
        order_gateway: OrderGateway,
    ) -> None:
        self._session_manager = session_manager
        self._cart_service = cart_service
        self._order_gateway = order_gateway

    def handle(
        self,
        order_type: OrderType,
        contact_phone: str | None = None,
        delivery_address: str | None = None,
        notes: str | None = None,
    ) -> OperationResult:
        """Submit the cart as an order.

        ``contact_phone`` defaults to the signed-in user's number, as the
        checkout form is pre-filled with it.
        """
        session = self._session_manager.session
        if not session.is_authenticated:
            return OperationResult.fail(
                FailureReason.LOGIN_REQUIRED, "Please log in to place an order."
            )

        if contact_phone is None and session.user is not None:
            contact_phone = session.user.phone_number

        try:
            draft = OrderDraft.from_cart(
                self._cart_service.snapshot(),
                order_type=order_type,
                contact_phone=contact_phone or "",
                delivery_address=delivery_address,
                notes=notes,
            )
        except ValidationError as exc:
            return OperationResult.fail(FailureReason.VALIDATION, str(exc))

        try:
            order = self._order_gateway.place_order(draft)
        except GatewayError as exc:
            logger.warning("Order submission failed: %s", exc)
            return failure_from(exc, GENERIC_FAILURE, pass_through=False)

        self._cart_service.clear_cart()
        logger.info(
            "Order #%s placed (%s, %d line(s))",
            order.id if order is not None else "?",
            draft.order_type.value, len(draft.line_items),
        )
        return OperationResult.ok("Order placed successfully!", data=order)
