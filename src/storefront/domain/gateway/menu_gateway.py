"""Abstract gateway for the read-only menu catalogue."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.menu import MenuCategory, MenuItem


class MenuGateway(ABC):

    @abstractmethod
    def list_categories(self) -> list[MenuCategory]:
        """Return every menu category."""

    @abstractmethod
    def list_items(self, category_id: int | None = None) -> list[MenuItem]:
        """Return all items, or those of one category."""

    @abstractmethod
    def list_popular_items(self) -> list[MenuItem]:
        """Return the items flagged as popular."""
