# discounts/services.py
"""
Discount code validation and usage accounting.

:func:`check_discount` holds the validity rules shared by the
validation endpoint and by :func:`apply_usage`, which the
registration transaction calls to consume one use of a code.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db import transaction
from django.db.models import Count, F, Q
from django.utils import timezone

from .exceptions import (
    DiscountInUse,
    DiscountInactive,
    DiscountNotFound,
    Expired,
    MaxUsesReached,
    NotYetActive,
)
from .models import DiscountCode

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def normalize_code(code: str) -> str:
    return (code or "").strip().upper()


def check_discount(discount: DiscountCode, today=None) -> None:
    """
    Raise the first validity rule a discount code breaks.

    Parameters
    ----------
    discount : DiscountCode
        The code to check.
    today : date, optional
        Reference date; defaults to the current local date.

    Raises
    ------
    DiscountInactive
        If the code is switched off.
    MaxUsesReached
        If ``max_uses`` is set and reached.
    NotYetActive, Expired
        If ``today`` lies before ``start_date`` or after ``end_date``.
    """
    today = today or timezone.localdate()
    if not discount.is_active:
        raise DiscountInactive()
    if not discount.has_uses_left:
        raise MaxUsesReached()
    if discount.start_date and discount.start_date > today:
        raise NotYetActive()
    if discount.end_date and discount.end_date < today:
        raise Expired()


def is_applicable(discount, today=None) -> bool:
    """Return whether ``discount`` exists and passes every validity rule."""
    if discount is None:
        return False
    try:
        check_discount(discount, today)
    except (DiscountInactive, MaxUsesReached, NotYetActive, Expired):
        return False
    return True


def validate_discount_code(code: str) -> dict:
    """
    Look up a code and report its discount as a fraction.

    Parameters
    ----------
    code : str
        Code typed by the customer, in any case.

    Returns
    -------
    dict
        ``{"id", "code", "discount", "description"}`` where ``discount``
        is the percentage divided by 100.

    Raises
    ------
    DiscountNotFound
        If no code matches.
    DiscountError
        Any failure of :func:`check_discount`.
    """
    discount = DiscountCode.objects.filter(code=normalize_code(code)).first()
    if discount is None:
        raise DiscountNotFound()
    check_discount(discount)
    return {
        "id": discount.pk,
        "code": discount.code,
        "discount": float(discount.discount_percentage / 100),
        "description": discount.description,
    }


def discounted_price(price: Decimal, percentage: Decimal) -> Decimal:
    """
    Reduce ``price`` by ``percentage`` percent, rounded half-up to cents.

    >>> discounted_price(Decimal("250.00"), Decimal("10"))
    Decimal('225.00')
    """
    reduction = (price * percentage / 100).quantize(CENT, rounding=ROUND_HALF_UP)
    return (price - reduction).quantize(CENT, rounding=ROUND_HALF_UP)


def apply_usage(discount_id, today=None):
    """
    Consume one use of a discount code inside the caller's transaction.

    The row is locked, checked, then incremented with a conditional
    update that never lets ``current_uses`` pass ``max_uses``.

    Parameters
    ----------
    discount_id : int
        Primary key of the code.
    today : date, optional
        Reference date for the validity window.

    Returns
    -------
    DiscountCode or None
        The code when a use was recorded, otherwise ``None``.
    """
    discount = DiscountCode.objects.select_for_update().filter(pk=discount_id).first()
    if not is_applicable(discount, today):
        logger.info("Discount %s not applied", discount_id)
        return None

    updated = (
        DiscountCode.objects.filter(pk=discount.pk)
        .filter(Q(max_uses__isnull=True) | Q(current_uses__lt=F("max_uses")))
        .update(current_uses=F("current_uses") + 1)
    )
    if not updated:
        logger.info("Discount %s exhausted concurrently", discount_id)
        return None
    discount.refresh_from_db(fields=["current_uses"])
    return discount


def discounts_with_usage():
    return DiscountCode.objects.annotate(usage_count=Count("registrations"))


def get_discount(discount_id):
    try:
        return discounts_with_usage().get(pk=discount_id)
    except (DiscountCode.DoesNotExist, ValueError):
        raise DiscountNotFound("Discount code not found")


@transaction.atomic
def delete_discount(discount: DiscountCode) -> None:
    if discount.registrations.exists():
        raise DiscountInUse()
    discount_id = discount.pk
    discount.delete()
    logger.info("Discount code deleted discount=%s", discount_id)
