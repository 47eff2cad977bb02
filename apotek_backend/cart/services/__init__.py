# cart/services/__init__.py

from .cart_store import (
    CART_STORAGE_KEY,
    MAX_LINE_QUANTITY,
    AddItem,
    CartLine,
    CartStore,
    Clear,
    RemoveItem,
    SetQuantity,
    apply_command,
    snapshot_from_product,
)
from .pricing import effective_price, format_price, line_total, money
from .storage import KeyValueStorage, MemoryStorage, SessionStorage

__all__ = [
    "CART_STORAGE_KEY",
    "MAX_LINE_QUANTITY",
    "AddItem",
    "CartLine",
    "CartStore",
    "Clear",
    "KeyValueStorage",
    "MemoryStorage",
    "RemoveItem",
    "SessionStorage",
    "SetQuantity",
    "apply_command",
    "effective_price",
    "format_price",
    "line_total",
    "money",
    "snapshot_from_product",
]
