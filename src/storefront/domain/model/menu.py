"""Menu catalogue as seen by the client.

The backend owns the menu; the client only reads it.  A ``MenuItem`` is
a frozen value so that whatever holds one (a cart line in particular)
keeps the title and price it saw, even if the catalogue changes later.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class MenuCategory:
    id: int
    name: str
    display_order: int | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class MenuItem:
    """A point-in-time copy of a catalogue entry."""

    id: int
    title: str
    price: Money
    image_url: str | None = None
    description: str | None = None
    category_id: int | None = None
    is_available: bool = True
    is_popular: bool = False
