# checkout/services/__init__.py

from .delivery import (
    DeliveryQuote,
    delivery_options_for,
    effective_delivery_option,
    express_available,
    find_area,
    quote,
    resolve_delivery_fee,
    search_areas,
)
from .dispatch import DispatchResult, WhatsAppDispatcher
from .exceptions import (
    CheckoutError,
    CheckoutValidationError,
    EmptyCartError,
    IdempotencyConflictError,
    OrderPersistenceError,
)
from .forms import CheckoutForm, ValidationResult, validate_checkout_form
from .history import CheckoutHistoryStore, push_recent
from .order_composer import (
    CheckoutResult,
    OrderComposer,
    OrderRecord,
    generate_order_no,
    render_order_message,
)

__all__ = [
    "CheckoutError",
    "CheckoutForm",
    "CheckoutHistoryStore",
    "CheckoutResult",
    "CheckoutValidationError",
    "DeliveryQuote",
    "DispatchResult",
    "EmptyCartError",
    "IdempotencyConflictError",
    "OrderComposer",
    "OrderPersistenceError",
    "OrderRecord",
    "ValidationResult",
    "WhatsAppDispatcher",
    "delivery_options_for",
    "effective_delivery_option",
    "express_available",
    "find_area",
    "generate_order_no",
    "push_recent",
    "quote",
    "render_order_message",
    "resolve_delivery_fee",
    "search_areas",
    "validate_checkout_form",
]
