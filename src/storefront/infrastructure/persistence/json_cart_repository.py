"""JsonStorage-backed implementation of CartRepository.

Snapshot layout under the cart key::

    {"version": 7,
     "lines": [{"menuItem": {"id": 3, "title": "...", "price": "1250.00",
                             "imageUrl": null},
                "quantity": 2}]}

``version`` goes up by one on every save.  A save carrying a version
older than the stored one is dropped, so a late write can never put
back an older cart.  A bare list of lines (the older layout) is still
readable.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import PersistenceError, ValidationError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.menu import MenuItem
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_storage import JsonStorage

logger = logging.getLogger(__name__)


class JsonCartRepository(CartRepository):

    def __init__(
        self,
        storage: JsonStorage,
        key: str = "@cart",
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._storage = storage
        self._key = key
        self._currency = currency
        self._version = 0

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> Cart | None:
        raw = self._storage.get(self._key)
        if raw is None:
            return None
        # Taken before parsing so an unreadable snapshot can still be overwritten
        self._version = max(self._version, _stored_version(raw))
        try:
            cart = Cart(
                lines=[self._to_line(line) for line in self._lines_of(raw)],
                currency=self._currency,
            )
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as exc:
            raise PersistenceError(f"Unreadable cart snapshot: {exc}") from exc
        return cart

    def save(self, cart: Cart) -> None:
        self._version += 1
        snapshot = {
            "version": self._version,
            "lines": [self._to_raw(line) for line in cart.lines],
        }

        def _newer_wins(current):
            stored = _stored_version(current)
            if stored > snapshot["version"]:
                logger.warning(
                    "Dropping stale cart write v%d (stored v%d)",
                    snapshot["version"], stored,
                )
                return current
            return snapshot

        self._storage.update(self._key, _newer_wins)

    def delete(self) -> None:
        self._storage.delete(self._key)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLine) -> dict:
        item = line.item
        return {
            "menuItem": {
                "id": item.id,
                "title": item.title,
                "price": str(item.price.amount),
                "imageUrl": item.image_url,
                "description": item.description,
            },
            "quantity": line.quantity.value,
        }

    def _to_line(self, raw: dict) -> CartLine:
        item = raw["menuItem"]
        return CartLine(
            item=MenuItem(
                id=int(item["id"]),
                title=item["title"],
                price=Money.of(item["price"], self._currency),
                image_url=item.get("imageUrl"),
                description=item.get("description"),
            ),
            quantity=Quantity(int(raw["quantity"])),
        )

    @staticmethod
    def _lines_of(raw) -> list:
        if isinstance(raw, list):
            return raw
        return list(raw["lines"])


def _stored_version(raw) -> int:
    if isinstance(raw, dict):
        try:
            return int(raw.get("version", 0))
        except (TypeError, ValueError):
            return 0
    return 0
