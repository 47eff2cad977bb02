# checkout/services/exceptions.py

"""
CHECKOUT SERVICE ERRORS

Centralized domain errors for the order composer.
"""


class CheckoutError(Exception):
    """Base exception for all checkout failures."""


class EmptyCartError(CheckoutError):
    """Raised when submitting with no cart lines. Nothing is mutated."""


class CheckoutValidationError(CheckoutError):
    """
    Raised when the checkout form fails validation.

    errors: ordered {field: message}; the first entry is the first unmet
    precondition.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        first = next(iter(self.errors.values()), "Invalid checkout form")
        super().__init__(first)


class OrderPersistenceError(CheckoutError):
    """Raised when the order record cannot be written. Retryable; the cart is kept."""


class IdempotencyConflictError(CheckoutError):
    """Raised when an idempotency key is reused for a different cart."""
