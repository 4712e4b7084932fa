"""Abstract store for the opaque authentication token."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenRepository(ABC):

    @abstractmethod
    def get(self) -> str | None:
        """Return the stored token, or None."""

    @abstractmethod
    def set(self, token: str) -> None:
        """Persist a new token."""

    @abstractmethod
    def remove(self) -> None:
        """Forget the token.  Removing an absent token is not an error."""
