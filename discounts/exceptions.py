# discounts/exceptions.py
"""
Custom exceptions for the discounts application.

These errors are only surfaced by the explicit validation endpoint;
registration ignores an unusable code and charges the base price.
"""

from robospark.exceptions import DomainError, NotFound


class DiscountError(DomainError):
    """Base class for discount code validation failures."""


class DiscountNotFound(DiscountError, NotFound):
    default_message = "Invalid or expired discount code"


class DiscountInactive(DiscountError):
    http_status = 404
    default_message = "Invalid or expired discount code"


class MaxUsesReached(DiscountError):
    default_message = "Discount code has reached maximum uses"


class NotYetActive(DiscountError):
    default_message = "Discount code is not yet active"


class Expired(DiscountError):
    default_message = "Discount code has expired"


class DiscountInUse(DomainError):
    """Raised when deleting a code that registrations reference."""

    default_message = "Cannot delete discount code that has been used"
