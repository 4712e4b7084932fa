"""Abstract repository for the Cart aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  There is exactly one cart per device, so the
repository has no ids: it loads, saves and forgets a single snapshot.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart | None:
        """Return the persisted cart, or None if nothing was saved.

        Raises PersistenceError if a snapshot exists but cannot be read.
        """

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the full cart state, replacing any previous snapshot."""

    @abstractmethod
    def delete(self) -> None:
        """Remove the persisted snapshot, if any."""
