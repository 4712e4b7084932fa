"""REST implementation of OrderGateway (``/orders/*``)."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import MalformedResponseError
from storefront.domain.gateway.order_gateway import OrderGateway
from storefront.domain.model.order import Order, OrderDraft, OrderLine, OrderStatus
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.infrastructure.api.client import ApiClient
from storefront.infrastructure.api.parsing import parse_list, parse_one

logger = logging.getLogger(__name__)


class RestOrderGateway(OrderGateway):

    def __init__(self, client: ApiClient, currency: str = DEFAULT_CURRENCY) -> None:
        self._client = client
        self._currency = currency

    def place_order(self, draft: OrderDraft) -> Order | None:
        data = self._client.post("/orders/add", json=draft.to_payload())
        # The envelope said success: the order exists whatever its body looks like
        try:
            return parse_one(data, self._to_order)
        except MalformedResponseError as exc:
            logger.warning("Order accepted but its record is unreadable: %s", exc)
            return None

    def list_my_orders(self) -> list[Order]:
        return parse_list(self._client.get("/orders/my"), self._to_order)

    # --- Serialization --------------------------------------------------------

    def _to_order(self, raw: dict) -> Order:
        return Order(
            id=int(raw["id"]),
            status=OrderStatus.parse(raw.get("status")),
            total_price=Money.of(raw.get("totalPrice") or 0, self._currency),
            items=tuple(self._to_line(i) for i in raw.get("items") or []),
            customer_name=raw.get("customerName"),
            phone_number=raw.get("phoneNumber"),
            created_at=raw.get("createdAt"),
        )

    def _to_line(self, raw: dict) -> OrderLine:
        menu_item = raw.get("menuItem") or {}
        return OrderLine(
            title=menu_item.get("title") or f"Item #{menu_item.get('id', '?')}",
            quantity=int(raw["quantity"]),
            price=Money.of(raw.get("price") or 0, self._currency),
        )
