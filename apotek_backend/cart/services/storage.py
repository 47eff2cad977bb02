# cart/services/storage.py

"""
VISITOR KEY-VALUE STORAGE

The storefront keeps per-visitor state (cart, checkout history) as JSON
strings under fixed keys. On the server that store is the Django session.

Write policy:
- write() returns True/False instead of raising
- a failed write is logged; the caller's in-memory state stays authoritative
  for the current request
"""

from __future__ import annotations

import logging
from typing import Protocol

from django.db import DatabaseError

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    def read(self, key: str) -> str | None: ...

    def write(self, key: str, value: str) -> bool: ...

    def remove(self, key: str) -> None: ...


class SessionStorage:
    """Django session backed storage. Saves the session on every write."""

    def __init__(self, session):
        self.session = session

    def read(self, key: str) -> str | None:
        value = self.session.get(key)
        return value if isinstance(value, str) else None

    def write(self, key: str, value: str) -> bool:
        self.session[key] = value
        try:
            self.session.save()
        except DatabaseError:
            logger.warning("Session write failed", extra={"storage_key": key}, exc_info=True)
            return False
        return True

    def remove(self, key: str) -> None:
        if key in self.session:
            del self.session[key]
            try:
                self.session.save()
            except DatabaseError:
                logger.warning("Session remove failed", extra={"storage_key": key}, exc_info=True)


class MemoryStorage:
    """Dict backed storage for scripts and tests."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self.data.get(key)

    def write(self, key: str, value: str) -> bool:
        self.data[key] = value
        return True

    def remove(self, key: str) -> None:
        self.data.pop(key, None)
