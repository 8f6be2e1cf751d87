"""Key-value persistence for the question and user collections.

Architecture note:
    The store mirrors a browser-style local storage: a flat namespace of text
    values, one key per collection. ``PersistenceStore`` is the only place that
    talks to a backend, and it never lets a backend or parse failure escape.
    A broken or missing value reads back as an empty collection and a failed
    write is logged and skipped, so the in-memory copy held by the caller stays
    authoritative for the rest of the session.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from PySide6.QtCore import QSettings

from solo_quiz.constants.storage_constants import SETTINGS_APPLICATION, SETTINGS_ORGANIZATION

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class StorageError(Exception):
    """Raised by a backend when a value cannot be read, written or removed."""


class KeyValueBackend(Protocol):
    """Minimal contract of a durable text key-value medium."""

    @property
    def location(self) -> str: ...

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryBackend:
    """Dictionary-backed backend. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    @property
    def location(self) -> str:
        return "(in memory)"

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._values)


class QSettingsBackend:
    """Backend persisting through Qt's ``QSettings``.

    With ``file_path`` the values live in an INI file; otherwise the platform's
    native settings store for the application is used. Every mutation is
    followed by ``sync()`` so that it is on disk when the call returns.
    """

    def __init__(self, file_path: Path | None = None) -> None:
        if file_path is not None:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            self._settings = QSettings(str(file_path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)

    @property
    def location(self) -> str:
        return self._settings.fileName()

    def get(self, key: str) -> str | None:
        if not self._settings.contains(key):
            return None
        value = self._settings.value(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageError(f"Value stored under '{key}' is not text ({type(value).__name__}).")
        return value

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._sync()

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self._sync()

    def _sync(self) -> None:
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            raise StorageError(f"Settings store at {self.location} reported {status}.")


class PersistenceStore:
    """Fail-soft text store partitioned into named collections."""

    def __init__(self, backend: KeyValueBackend) -> None:
        self._backend = backend

    @property
    def location(self) -> str:
        return self._backend.location

    def read(self, key: str) -> str | None:
        try:
            return self._backend.get(key)
        except StorageError:
            logger.exception("Error reading '%s' from storage", key)
            return None

    def write(self, key: str, text: str) -> bool:
        try:
            self._backend.set(key, text)
        except StorageError:
            logger.exception("Error saving '%s' to storage", key)
            return False
        return True

    def delete(self, key: str) -> bool:
        try:
            self._backend.remove(key)
        except StorageError:
            logger.exception("Error clearing '%s' from storage", key)
            return False
        return True

    def read_collection(self, key: str, adapter: TypeAdapter[list[RecordT]]) -> list[RecordT]:
        """Deserialize the collection under ``key``; absent or malformed values read as empty."""
        raw = self.read(key)
        if raw is None:
            return []
        try:
            return adapter.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Discarding malformed collection '%s' (%d error(s)): %s",
                key,
                exc.error_count(),
                exc.errors()[0]["msg"] if exc.error_count() else "",
            )
            return []

    def write_collection(self, key: str, adapter: TypeAdapter[list[RecordT]], items: list[RecordT]) -> bool:
        text = adapter.dump_json(items, by_alias=True).decode("utf-8")
        return self.write(key, text)
