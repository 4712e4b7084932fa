"""REST implementation of RestaurantGateway.

Covers ``/restaurant-info/*``, ``/chefs`` and ``/gallery``.  All three
are public; no token is needed.
"""

from __future__ import annotations

from storefront.domain.gateway.restaurant_gateway import RestaurantGateway
from storefront.domain.model.restaurant import Chef, GalleryImage, RestaurantInfo
from storefront.infrastructure.api.client import ApiClient
from storefront.infrastructure.api.parsing import parse_list


class RestRestaurantGateway(RestaurantGateway):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def get_info(self) -> RestaurantInfo | None:
        # The backend returns a list; the first entry is the restaurant
        infos = parse_list(self._client.get("/restaurant-info/get/all"), self._to_info)
        return infos[0] if infos else None

    def list_chefs(self) -> list[Chef]:
        return _by_display_order(parse_list(self._client.get("/chefs"), self._to_chef))

    def list_gallery(self) -> list[GalleryImage]:
        return _by_display_order(parse_list(self._client.get("/gallery"), self._to_image))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_info(raw: dict) -> RestaurantInfo:
        return RestaurantInfo(
            id=int(raw["id"]),
            name=raw["name"],
            address=raw.get("address") or "",
            phone=raw.get("phone") or "",
            email=raw.get("email"),
            opening_hours=raw.get("openingHours"),
            about_us=raw.get("aboutUs"),
            latitude=_optional_float(raw.get("latitude")),
            longitude=_optional_float(raw.get("longitude")),
            facebook_url=raw.get("facebookUrl"),
            instagram_url=raw.get("instagramUrl"),
            uber_eats_url=raw.get("uberEatsUrl"),
            pickme_food_url=raw.get("pickmeFoodUrl"),
        )

    @staticmethod
    def _to_chef(raw: dict) -> Chef:
        return Chef(
            id=int(raw["id"]),
            name=raw["name"],
            title=raw.get("title"),
            bio=raw.get("bio"),
            image_url=raw.get("imageUrl"),
            display_order=raw.get("displayOrder"),
        )

    @staticmethod
    def _to_image(raw: dict) -> GalleryImage:
        return GalleryImage(
            id=int(raw["id"]),
            image_url=raw["imageUrl"],
            caption=raw.get("caption"),
            display_order=raw.get("displayOrder"),
        )


def _optional_float(value) -> float | None:
    return None if value is None else float(value)


def _by_display_order(entries: list) -> list:
    # Entries without an order go last, otherwise backend order is kept
    return sorted(
        entries,
        key=lambda e: (e.display_order is None, e.display_order or 0),
    )
