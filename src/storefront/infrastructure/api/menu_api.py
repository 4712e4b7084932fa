"""REST implementation of MenuGateway (``/menu/*``)."""

from __future__ import annotations

from storefront.domain.gateway.menu_gateway import MenuGateway
from storefront.domain.model.menu import MenuCategory, MenuItem
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.infrastructure.api.client import ApiClient
from storefront.infrastructure.api.parsing import parse_list


class RestMenuGateway(MenuGateway):

    def __init__(self, client: ApiClient, currency: str = DEFAULT_CURRENCY) -> None:
        self._client = client
        self._currency = currency

    def list_categories(self) -> list[MenuCategory]:
        return parse_list(self._client.get("/menu/categories"), self._to_category)

    def list_items(self, category_id: int | None = None) -> list[MenuItem]:
        path = "/menu/items" if category_id is None else f"/menu/items/{category_id}"
        return parse_list(self._client.get(path), self._to_item)

    def list_popular_items(self) -> list[MenuItem]:
        return parse_list(self._client.get("/menu/items/popular"), self._to_item)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_category(raw: dict) -> MenuCategory:
        return MenuCategory(
            id=int(raw["id"]),
            name=raw["name"],
            display_order=raw.get("displayOrder"),
            image_url=raw.get("imageUrl"),
        )

    def _to_item(self, raw: dict) -> MenuItem:
        category = raw.get("category") or {}
        return MenuItem(
            id=int(raw["id"]),
            title=raw["title"],
            price=Money.of(raw["price"], self._currency),
            image_url=raw.get("imageUrl"),
            description=raw.get("description"),
            category_id=category.get("id"),
            is_available=raw.get("isAvailable") is not False,
            is_popular=bool(raw.get("isPopular", False)),
        )
