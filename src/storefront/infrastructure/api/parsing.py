"""Turning envelope ``data`` payloads into domain values.

Anything the backend sends that does not fit the expected shape is a
MalformedResponseError, never a KeyError leaking out of a gateway.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from storefront.domain.exceptions import MalformedResponseError, ValidationError

T = TypeVar("T")

_PARSE_ERRORS = (KeyError, TypeError, ValueError, AttributeError, ValidationError)


def parse_one(raw: Any, to_domain: Callable[[dict], T]) -> T:
    if not isinstance(raw, dict):
        raise MalformedResponseError(f"Expected an object, got {type(raw).__name__}")
    try:
        return to_domain(raw)
    except _PARSE_ERRORS as exc:
        raise MalformedResponseError(f"Unexpected payload: {exc!r}") from exc


def parse_list(raw: Any, to_domain: Callable[[dict], T]) -> list[T]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise MalformedResponseError(f"Expected a list, got {type(raw).__name__}")
    return [parse_one(item, to_domain) for item in raw]
