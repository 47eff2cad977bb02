# checkout/services/history.py

"""
CHECKOUT HISTORY (RECENT NAMES / AREAS)

Two most-recent-first lists, max 5 entries each, no duplicates:
- "apotek-checkout-names"
- "apotek-checkout-areas"

Advisory only: these lists pre-fill the checkout form and never block or
validate a submission. Unreadable stored data is treated as empty.
"""

from __future__ import annotations

import json
import logging

from cart.services.storage import KeyValueStorage

logger = logging.getLogger(__name__)

NAMES_KEY = "apotek-checkout-names"
AREAS_KEY = "apotek-checkout-areas"
HISTORY_LIMIT = 5


def push_recent(items: list[str], value: str | None, limit: int = HISTORY_LIMIT) -> list[str]:
    """
    Move `value` (trimmed) to the front, drop its older occurrence, cap at
    `limit`. A blank value leaves the list unchanged.
    """
    trimmed = (value or "").strip()
    if not trimmed:
        return list(items)
    return [trimmed, *[item for item in items if item != trimmed]][:limit]


class CheckoutHistoryStore:
    def __init__(self, storage: KeyValueStorage):
        self.storage = storage
        self._names: list[str] | None = None
        self._areas: list[str] | None = None

    # -----------------------------
    # Load
    # -----------------------------
    def _load(self, key: str) -> list[str]:
        raw = self.storage.read(key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable checkout history", extra={"storage_key": key})
            return []
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            logger.warning("Discarding malformed checkout history", extra={"storage_key": key})
            return []
        return data[:HISTORY_LIMIT]

    @property
    def names(self) -> list[str]:
        if self._names is None:
            self._names = self._load(NAMES_KEY)
        return list(self._names)

    @property
    def areas(self) -> list[str]:
        if self._areas is None:
            self._areas = self._load(AREAS_KEY)
        return list(self._areas)

    # -----------------------------
    # Record
    # -----------------------------
    def record_name(self, name: str | None) -> list[str]:
        updated = push_recent(self.names, name)
        if updated != self.names:
            self._names = updated
            self.storage.write(NAMES_KEY, json.dumps(updated))
        return list(updated)

    def record_area(self, area: str | None) -> list[str]:
        updated = push_recent(self.areas, area)
        if updated != self.areas:
            self._areas = updated
            self.storage.write(AREAS_KEY, json.dumps(updated))
        return list(updated)

    # -----------------------------
    # Clear
    # -----------------------------
    def clear_names(self) -> None:
        self._names = []
        self.storage.remove(NAMES_KEY)

    def clear_areas(self) -> None:
        self._areas = []
        self.storage.remove(AREAS_KEY)

    def clear_all(self) -> None:
        self.clear_names()
        self.clear_areas()
