"""Application service: the cart of the current device.

Wraps the Cart aggregate with write-through persistence.  The in-memory
cart is the source of truth for the lifetime of the process; storage is
best effort.  A failed write is logged and otherwise ignored, and a
missing or unreadable snapshot at start-up simply means an empty cart.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.menu import MenuItem
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class CartService:

    def __init__(self, cart_repo: CartRepository, currency: str = DEFAULT_CURRENCY) -> None:
        self._cart_repo = cart_repo
        self._cart = self._restore(currency)

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> list[CartLine]:
        return list(self._cart.lines)

    @property
    def subtotal(self) -> Money:
        return self._cart.subtotal

    @property
    def count(self) -> int:
        return self._cart.count

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    def snapshot(self) -> Cart:
        """The live aggregate, for read-only use by other handlers."""
        return self._cart

    # --- Commands -------------------------------------------------------------

    def add_to_cart(self, item: MenuItem, quantity: int = 1) -> None:
        self._cart.add(item, quantity)
        self._persist()

    def update_quantity(self, item_id: int, quantity: int) -> None:
        self._cart.update_quantity(item_id, quantity)
        self._persist()

    def remove_from_cart(self, item_id: int) -> None:
        self._cart.remove(item_id)
        self._persist()

    def clear_cart(self) -> None:
        self._cart.clear()
        try:
            self._cart_repo.delete()
        except PersistenceError as exc:
            logger.warning("Failed to delete cart snapshot: %s", exc)

    # --- Persistence ----------------------------------------------------------

    def _persist(self) -> None:
        try:
            self._cart_repo.save(self._cart)
        except PersistenceError as exc:
            logger.warning("Failed to save cart: %s", exc)

    def _restore(self, currency: str) -> Cart:
        try:
            cart = self._cart_repo.load()
        except PersistenceError as exc:
            logger.warning("Failed to load cart, starting empty: %s", exc)
            return Cart(currency=currency)
        if cart is None:
            return Cart(currency=currency)
        logger.debug("Restored cart with %d line(s)", len(cart.lines))
        return cart
