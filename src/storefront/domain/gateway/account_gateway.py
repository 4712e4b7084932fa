"""Abstract gateway for authentication and the user profile.

Gateways are the backend's counterpart of repositories: the domain
states what it needs, the infrastructure layer speaks HTTP.  Every
method raises a GatewayError subclass on failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.model.session import Registration, User


@dataclass(frozen=True)
class AuthGrant:
    """What the backend hands back on login or signup."""

    token: str
    id: int | None = None
    name: str | None = None
    role: str | None = None


class AccountGateway(ABC):

    @abstractmethod
    def login(self, phone_number: str, password: str) -> AuthGrant:
        """Exchange credentials for a token."""

    @abstractmethod
    def signup(self, registration: Registration) -> AuthGrant:
        """Create an account and return its token."""

    @abstractmethod
    def fetch_profile(self) -> User:
        """Return the user the current token belongs to."""

    @abstractmethod
    def update_profile(self, changes: dict) -> User:
        """Apply profile changes and return the updated user."""

    @abstractmethod
    def update_push_token(self, push_token: str) -> None:
        """Register this device's push notification token."""
