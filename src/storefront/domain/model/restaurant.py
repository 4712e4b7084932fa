"""Public restaurant details: contact info, the kitchen team, the gallery."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RestaurantInfo:
    id: int
    name: str
    address: str
    phone: str
    email: str | None = None
    opening_hours: str | None = None
    about_us: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    uber_eats_url: str | None = None
    pickme_food_url: str | None = None

    @property
    def map_url(self) -> str | None:
        if self.latitude is None or self.longitude is None:
            return None
        return f"https://maps.google.com/?q={self.latitude},{self.longitude}"


@dataclass(frozen=True)
class Chef:
    id: int
    name: str
    title: str | None = None
    bio: str | None = None
    image_url: str | None = None
    display_order: int | None = None


@dataclass(frozen=True)
class GalleryImage:
    id: int
    image_url: str
    caption: str | None = None
    display_order: int | None = None
