"""Abstract gateway for order submission and history."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderDraft


class OrderGateway(ABC):

    @abstractmethod
    def place_order(self, draft: OrderDraft) -> Order | None:
        """Submit a draft once and return the order the backend recorded.

        Returns None when the backend accepted the order but its record
        could not be read back.
        """

    @abstractmethod
    def list_my_orders(self) -> list[Order]:
        """Return the signed-in user's orders."""
