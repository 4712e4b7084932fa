"""JSON-file-backed key/value storage.

The device-local storage of the client: one JSON object per file, one
entry per key.  Writers are serialized with a file lock and every write
replaces the file atomically, so a reader never sees half a file and a
slow writer cannot interleave with a fast one.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Callable

from filelock import FileLock, Timeout

from storefront.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class JsonStorage:

    def __init__(self, file_path: Path, lock_timeout: float = 10.0) -> None:
        self._file_path = file_path
        self._lock = FileLock(str(file_path) + ".lock", timeout=lock_timeout)

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- Key/value interface --------------------------------------------------

    def get(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or None."""
        with self._locked():
            return self._load(strict=True).get(key)

    def set(self, key: str, value: Any) -> None:
        with self._locked():
            data = self._load(strict=False)
            data[key] = value
            self._persist(data)

    def update(self, key: str, fn: Callable[[Any | None], Any]) -> Any:
        """Replace the value under ``key`` with ``fn(current)``, atomically.

        Returns what ``fn`` returned.  If it returns the current value
        unchanged (by identity), nothing is written.
        """
        with self._locked():
            data = self._load(strict=False)
            current = data.get(key)
            new = fn(current)
            if new is not current:
                data[key] = new
                self._persist(data)
            return new

    def delete(self, key: str) -> None:
        with self._locked():
            data = self._load(strict=False)
            if key not in data:
                return
            del data[key]
            self._persist(data)

    # --- File helpers ---------------------------------------------------------

    def _locked(self) -> _GuardedLock:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Cannot create {self._file_path.parent}: {exc}") from exc
        return _GuardedLock(self._lock)

    def _load(self, strict: bool) -> dict:
        """Read the whole file.

        A corrupt file raises in ``strict`` mode; writers instead start
        over from an empty object, since nothing in it can be recovered.
        """
        if not self._file_path.exists():
            return {}
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        except ValueError as exc:
            if strict:
                raise PersistenceError(f"Corrupt storage file {self._file_path}") from exc
            logger.warning("Discarding corrupt storage file %s", self._file_path)
            return {}
        if not isinstance(data, dict):
            if strict:
                raise PersistenceError(f"Unexpected storage layout in {self._file_path}")
            return {}
        return data

    def _persist(self, data: dict) -> None:
        try:
            text = json.dumps(data, indent=2) + "\n"
        except (TypeError, ValueError) as exc:
            raise PersistenceError(f"Value is not JSON serializable: {exc}") from exc

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=".storage-", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc


class _GuardedLock:
    """Context manager turning lock timeouts into PersistenceError."""

    def __init__(self, lock: FileLock) -> None:
        self._lock = lock

    def __enter__(self) -> None:
        try:
            self._lock.acquire()
        except Timeout as exc:
            raise PersistenceError(f"Timed out waiting for {exc.lock_file}") from exc
        except OSError as exc:
            raise PersistenceError(f"Cannot lock storage: {exc}") from exc

    def __exit__(self, *exc_info) -> None:
        self._lock.release()
