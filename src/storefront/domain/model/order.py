"""Orders: the checkout draft the client builds and the record the server returns.

The client never prices an order.  ``OrderDraft`` carries item ids and
quantities only; the backend computes the price of record from its own
menu and sends it back on the ``Order``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money


class OrderType(Enum):
    DELIVERY = "DELIVERY"
    PICKUP = "PICKUP"
    DINE_IN = "DINE_IN"


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PREPARING = "PREPARING"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    READY = "READY"
    READY_FOR_PICKUP = "READY_FOR_PICKUP"
    DELIVERED = "DELIVERED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, raw: str | None) -> OrderStatus:
        """Map a backend status string; anything unrecognised is UNKNOWN."""
        if not raw:
            return cls.PENDING
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class OrderDraftLine:
    menu_item_id: int
    quantity: int


@dataclass(frozen=True)
class OrderDraft:
    """Value snapshot of a cart plus the checkout form.

    Build drafts with ``OrderDraft.from_cart()``; it enforces the checkout rules.
    """

    line_items: tuple[OrderDraftLine, ...]
    order_type: OrderType
    contact_phone: str
    delivery_address: str | None = None
    notes: str | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_cart(
        cart: Cart,
        order_type: OrderType,
        contact_phone: str,
        delivery_address: str | None = None,
        notes: str | None = None,
    ) -> OrderDraft:
        if cart.is_empty:
            raise ValidationError("Your cart is empty")

        if order_type == OrderType.DELIVERY:
            if not delivery_address or not delivery_address.strip():
                raise ValidationError("Please enter a delivery address")
            address = delivery_address.strip()
        else:
            # Only deliveries carry an address
            address = None

        if not contact_phone or not contact_phone.strip():
            raise ValidationError("Please enter a contact number")

        lines = tuple(
            OrderDraftLine(menu_item_id=line.item_id, quantity=line.quantity.value)
            for line in cart.lines
        )
        return OrderDraft(
            line_items=lines,
            order_type=order_type,
            contact_phone=contact_phone.strip(),
            delivery_address=address,
            notes=notes.strip() if notes and notes.strip() else None,
        )

    # --- Wire payload ---------------------------------------------------------

    def to_payload(self) -> dict:
        payload: dict = {
            "items": [
                {"menuItemId": line.menu_item_id, "quantity": line.quantity}
                for line in self.line_items
            ],
            "orderType": self.order_type.value,
            "phoneNumber": self.contact_phone,
        }
        if self.delivery_address is not None:
            payload["deliveryAddress"] = self.delivery_address
        if self.notes is not None:
            payload["notes"] = self.notes
        return payload


@dataclass(frozen=True)
class OrderLine:
    title: str
    quantity: int
    price: Money


@dataclass(frozen=True)
class Order:
    """An order as recorded by the backend."""

    id: int
    status: OrderStatus
    total_price: Money
    items: tuple[OrderLine, ...] = ()
    customer_name: str | None = None
    phone_number: str | None = None
    created_at: str | None = None
