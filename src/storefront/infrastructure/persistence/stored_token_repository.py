"""JsonStorage-backed implementation of TokenRepository.

The token is cached in memory once read or written.  Storage failures
still raise PersistenceError, but only after the cache is updated, so
the running process keeps a consistent view of the token either way.
"""

from __future__ import annotations

from storefront.domain.repository.token_repository import TokenRepository
from storefront.infrastructure.persistence.json_storage import JsonStorage

_UNLOADED = object()


class StoredTokenRepository(TokenRepository):

    def __init__(self, storage: JsonStorage, key: str) -> None:
        self._storage = storage
        self._key = key
        self._cached = _UNLOADED

    def get(self) -> str | None:
        if self._cached is _UNLOADED:
            value = self._storage.get(self._key)
            self._cached = value if isinstance(value, str) and value else None
        return self._cached

    def set(self, token: str) -> None:
        self._cached = token
        self._storage.set(self._key, token)

    def remove(self) -> None:
        self._cached = None
        self._storage.delete(self._key)
