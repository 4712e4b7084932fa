"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  ``OperationResult`` is
how every remote-backed use case reports back: failures arrive as data,
not as exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from storefront.domain.exceptions import (
    GatewayError,
    NetworkUnreachableError,
    RemoteRejectedError,
    SessionExpiredError,
)
from storefront.domain.model.cart import Cart

NETWORK_MESSAGE = (
    "Unable to connect to the server. "
    "Please check your internet connection."
)


class FailureReason(Enum):
    VALIDATION = "VALIDATION"
    LOGIN_REQUIRED = "LOGIN_REQUIRED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NETWORK_UNREACHABLE = "NETWORK_UNREACHABLE"
    SERVER_ERROR = "SERVER_ERROR"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a use case: a success flag, a message, maybe a payload."""

    success: bool
    message: str
    reason: FailureReason | None = None
    data: Any = None

    @staticmethod
    def ok(message: str, data: Any = None) -> OperationResult:
        return OperationResult(success=True, message=message, data=data)

    @staticmethod
    def fail(reason: FailureReason, message: str) -> OperationResult:
        return OperationResult(success=False, message=message, reason=reason)


def failure_from(
    exc: GatewayError,
    fallback: str,
    pass_through: bool = True,
) -> OperationResult:
    """Translate a remote failure into a result.

    Server messages are shown as-is when ``pass_through`` is set and the
    server sent one; otherwise ``fallback`` is used.
    """
    if isinstance(exc, NetworkUnreachableError):
        return OperationResult.fail(FailureReason.NETWORK_UNREACHABLE, NETWORK_MESSAGE)
    if isinstance(exc, SessionExpiredError):
        return OperationResult.fail(FailureReason.LOGIN_REQUIRED, exc.message)
    if isinstance(exc, RemoteRejectedError) and not exc.is_server_fault:
        message = exc.message if pass_through and exc.message else fallback
        return OperationResult.fail(FailureReason.REJECTED, message)
    return OperationResult.fail(FailureReason.SERVER_ERROR, fallback)


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    item_id: int
    title: str
    quantity: int
    unit_price: str  # formatted, e.g. "LKR 1,250.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    count: int
    subtotal: str

    @staticmethod
    def from_cart(cart: Cart) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    item_id=line.item_id,
                    title=line.item.title,
                    quantity=line.quantity.value,
                    unit_price=str(line.item.price),
                    line_total=str(line.line_total),
                )
                for line in cart.lines
            ],
            count=cart.count,
            subtotal=str(cart.subtotal),
        )
