"""Application service: Browse Menu use case (queries)."""

from __future__ import annotations

import logging

from storefront.application.dto import OperationResult, failure_from
from storefront.domain.exceptions import EntityNotFoundError, GatewayError
from storefront.domain.gateway.menu_gateway import MenuGateway
from storefront.domain.model.menu import MenuItem

logger = logging.getLogger(__name__)


class BrowseMenuHandler:

    def __init__(self, menu_gateway: MenuGateway) -> None:
        self._menu_gateway = menu_gateway

    def categories(self) -> OperationResult:
        try:
            categories = self._menu_gateway.list_categories()
        except GatewayError as exc:
            logger.warning("Could not load categories: %s", exc)
            return failure_from(exc, "Failed to load menu categories.")
        return OperationResult.ok(f"{len(categories)} categories", data=categories)

    def items(self, category_id: int | None = None, popular: bool = False) -> OperationResult:
        try:
            if popular:
                items = self._menu_gateway.list_popular_items()
            else:
                items = self._menu_gateway.list_items(category_id)
        except GatewayError as exc:
            logger.warning("Could not load menu items: %s", exc)
            return failure_from(exc, "Failed to load menu items.")
        return OperationResult.ok(f"{len(items)} items", data=items)

    def find_item(self, item_id: int) -> MenuItem:
        """Look up one item to snapshot it into the cart.

        Raises EntityNotFoundError for unknown or unavailable items;
        gateway errors propagate.
        """
        for item in self._menu_gateway.list_items():
            if item.id == item_id:
                if not item.is_available:
                    raise EntityNotFoundError(f"'{item.title}' is currently unavailable")
                return item
        raise EntityNotFoundError(f"Menu item #{item_id} not found")
