"""Authentication session and the signed-in user.

A ``Session`` is an immutable value; the session manager swaps the
whole value on every transition so token and user always change together.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError

MIN_PASSWORD_LENGTH = 6


class SessionState(Enum):
    BOOTSTRAPPING = "BOOTSTRAPPING"
    AUTHENTICATED = "AUTHENTICATED"
    GUEST = "GUEST"


class UserRole(Enum):
    USER = "USER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class User:
    id: int
    phone_number: str
    name: str
    role: UserRole = UserRole.USER
    email: str | None = None
    email_verified: bool | None = None
    date_of_birth: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


@dataclass(frozen=True)
class Session:
    """Who is using the client right now.

    ``is_authenticated`` is derived from the token, never stored, so the
    two cannot disagree.
    """

    state: SessionState
    token: str | None = None
    user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    @property
    def is_loading(self) -> bool:
        return self.state == SessionState.BOOTSTRAPPING

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def bootstrapping() -> Session:
        return Session(state=SessionState.BOOTSTRAPPING)

    @staticmethod
    def guest() -> Session:
        return Session(state=SessionState.GUEST)

    @staticmethod
    def authenticated(token: str, user: User | None) -> Session:
        if not token:
            raise ValidationError("An authenticated session needs a token")
        return Session(state=SessionState.AUTHENTICATED, token=token, user=user)


@dataclass(frozen=True)
class Registration:
    """Sign-up form contents."""

    phone_number: str
    password: str
    name: str | None = None
    email: str | None = None
    date_of_birth: str | None = None
    confirm_password: str | None = None

    def validate(self) -> None:
        """Client-side checks run before any network call."""
        if not self.phone_number or not self.phone_number.strip():
            raise ValidationError("Phone number is required")
        if not self.password or not self.password.strip():
            raise ValidationError("Password is required")
        if self.confirm_password is not None and self.password != self.confirm_password:
            raise ValidationError("Passwords do not match")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )


def validate_credentials(phone_number: str, password: str) -> None:
    if not phone_number or not phone_number.strip() or not password or not password.strip():
        raise ValidationError("Please enter your phone number and password")
