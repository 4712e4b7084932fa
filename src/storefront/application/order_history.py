"""Application service: Order History use case (query)."""

from __future__ import annotations

from storefront.application.dto import FailureReason, OperationResult, failure_from
from storefront.application.session_manager import SessionManager
from storefront.domain.exceptions import GatewayError
from storefront.domain.gateway.order_gateway import OrderGateway


class OrderHistoryHandler:

    def __init__(self, session_manager: SessionManager, order_gateway: OrderGateway) -> None:
        self._session_manager = session_manager
        self._order_gateway = order_gateway

    def handle(self) -> OperationResult:
        if not self._session_manager.is_authenticated:
            return OperationResult.fail(
                FailureReason.LOGIN_REQUIRED, "Please log in to see your orders."
            )
        try:
            orders = self._order_gateway.list_my_orders()
        except GatewayError as exc:
            return failure_from(exc, "Failed to load your orders.")
        return OperationResult.ok(f"{len(orders)} orders", data=orders)
