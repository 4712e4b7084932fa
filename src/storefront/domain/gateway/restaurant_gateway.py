"""Abstract gateway for the public restaurant pages."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.restaurant import Chef, GalleryImage, RestaurantInfo


class RestaurantGateway(ABC):

    @abstractmethod
    def get_info(self) -> RestaurantInfo | None:
        """Return the restaurant's details, or None if none are published."""

    @abstractmethod
    def list_chefs(self) -> list[Chef]:
        """Return the kitchen team."""

    @abstractmethod
    def list_gallery(self) -> list[GalleryImage]:
        """Return the photo gallery."""
