# registrations/services.py
"""
Registration transaction and cancellation.

:func:`create_registration` runs every check and write of a
booking inside one database transaction. The course row is locked
before seats are counted and the discount code row is locked before
its usage counter moves, so concurrent checkouts cannot overbook a
course or overuse a code. Any failure rolls the whole booking back.
"""

import logging
import random
from datetime import date

from django.db import IntegrityError, transaction
from django.utils import timezone

from courses.exceptions import CourseNotFound
from courses.models import Course
from discounts.services import apply_usage, discounted_price

from .exceptions import (
    AgeOutOfRange,
    AlreadyCancelled,
    ConfirmationNumberUnavailable,
    CourseFull,
    RegistrationNotFound,
    TermsNotAccepted,
)
from .models import Registration
from .notifications import send_registration_confirmation

logger = logging.getLogger(__name__)

CONFIRMATION_ATTEMPTS = 10


def calculate_age(date_of_birth: date, today: date | None = None) -> int:
    """
    Return the number of birthdays completed by ``today``.

    Parameters
    ----------
    date_of_birth : date
        Birth date of the child.
    today : date, optional
        Reference date; defaults to the current local date.

    Returns
    -------
    int
        Age in whole years.

    Examples
    --------
    >>> calculate_age(date(2015, 6, 1), today=date(2024, 5, 31))
    8
    >>> calculate_age(date(2015, 6, 1), today=date(2024, 6, 1))
    9
    """
    today = today or timezone.localdate()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def generate_confirmation_number(today: date | None = None) -> str:
    """Draw a ``RS-<4 digits>-<year>`` confirmation number."""
    year = (today or timezone.localdate()).year
    return f"RS-{random.randint(1000, 9999)}-{year}"


def _save_with_confirmation_number(registration: Registration, today: date) -> None:
    """
    Insert ``registration`` under a confirmation number nobody holds.

    Each attempt runs in a savepoint so that a collision on the unique
    constraint only discards that attempt, not the caller's transaction.
    """
    for _ in range(CONFIRMATION_ATTEMPTS):
        candidate = generate_confirmation_number(today)
        if Registration.objects.filter(confirmation_number=candidate).exists():
            continue
        registration.confirmation_number = candidate
        try:
            with transaction.atomic():
                registration.save()
        except IntegrityError:
            if not Registration.objects.filter(confirmation_number=candidate).exists():
                raise
            logger.warning("Confirmation number collision on %s", candidate)
            continue
        return
    raise ConfirmationNumberUnavailable()


def create_registration(
    user,
    course_id,
    child_info: dict,
    emergency_contact: dict,
    agreed_to_terms: bool,
    photo_release: bool,
    discount_code_id=None,
    today: date | None = None,
) -> Registration:
    """
    Book a seat in a course for a child.

    Parameters
    ----------
    user : User
        Account making the booking.
    course_id : int
        Course to book.
    child_info : dict
        ``first_name``, ``last_name``, ``date_of_birth``, ``grade_level``
        and optional ``allergies`` and ``special_needs``.
    emergency_contact : dict
        ``name``, ``relation`` and ``phone``.
    agreed_to_terms : bool
        Must be true.
    photo_release : bool
        Consent to publish photos.
    discount_code_id : int, optional
        Discount code to apply. A code that does not exist or is not
        currently usable is ignored and the base price is charged.
    today : date, optional
        Reference date for the age and discount checks.

    Returns
    -------
    Registration
        The stored registration with course, instructor, discount code
        and user loaded.

    Raises
    ------
    TermsNotAccepted
        If ``agreed_to_terms`` is false.
    CourseNotFound
        If the course does not exist.
    CourseFull
        If completed and pending registrations already fill the course.
    AgeOutOfRange
        If the child's age lies outside the course age window.

    Notes
    -----
    The registration is stored as ``completed``: payment is taken at
    submission. The confirmation email goes out once the transaction
    has committed.
    """
    today = today or timezone.localdate()

    with transaction.atomic():
        if not agreed_to_terms:
            raise TermsNotAccepted()

        course = Course.objects.select_for_update().filter(pk=course_id).first()
        if course is None:
            raise CourseNotFound()

        taken = course.registrations.filter(payment_status__in=Registration.ACTIVE_STATUSES).count()
        if taken >= course.capacity:
            raise CourseFull()

        age = calculate_age(child_info["date_of_birth"], today)
        if age < course.min_age or age > course.max_age:
            raise AgeOutOfRange(course.min_age, course.max_age)

        amount = course.effective_price
        discount = apply_usage(discount_code_id, today) if discount_code_id else None
        if discount is not None:
            amount = discounted_price(amount, discount.discount_percentage)

        registration = Registration(
            user=user,
            course=course,
            child_first_name=child_info["first_name"],
            child_last_name=child_info["last_name"],
            child_date_of_birth=child_info["date_of_birth"],
            child_grade_level=child_info["grade_level"],
            child_allergies=child_info.get("allergies") or "",
            child_special_needs=child_info.get("special_needs") or "",
            emergency_contact_name=emergency_contact["name"],
            emergency_contact_relation=emergency_contact["relation"],
            emergency_contact_phone=emergency_contact["phone"],
            agreed_to_terms=True,
            photo_release=photo_release,
            payment_status=Registration.PaymentStatus.COMPLETED,
            amount_paid=amount,
            discount_code=discount,
        )
        _save_with_confirmation_number(registration, today)

        registration_id = registration.pk
        transaction.on_commit(lambda: send_registration_confirmation(registration_id))

    logger.info(
        "Registration %s created user=%s course=%s amount=%s discount=%s",
        registration.confirmation_number,
        user.pk,
        course.pk,
        amount,
        discount.code if discount else None,
    )
    return get_registration(registration_id)


def registrations_for_display():
    return Registration.objects.select_related("course__instructor", "discount_code", "user")


def get_registration(registration_id, owner=None) -> Registration:
    """
    Return a registration with its relations loaded.

    When ``owner`` is given, registrations of other accounts are
    reported as missing.

    Raises
    ------
    RegistrationNotFound
        If no matching registration is visible.
    """
    queryset = registrations_for_display()
    if owner is not None:
        queryset = queryset.filter(user=owner)
    try:
        return queryset.get(pk=registration_id)
    except (Registration.DoesNotExist, ValueError):
        raise RegistrationNotFound()


def cancel_registration(registration_id, owner=None) -> Registration:
    """
    Cancel a registration and release its seat.

    The amount paid and the discount code usage are left as they are.

    Parameters
    ----------
    registration_id : int
        Registration to cancel.
    owner : User, optional
        Restrict the lookup to this account's registrations.

    Returns
    -------
    Registration
        The refunded registration.

    Raises
    ------
    RegistrationNotFound
        If no matching registration is visible.
    AlreadyCancelled
        If it is already refunded.
    """
    with transaction.atomic():
        queryset = Registration.objects.select_for_update()
        if owner is not None:
            queryset = queryset.filter(user=owner)
        registration = queryset.filter(pk=registration_id).first()
        if registration is None:
            raise RegistrationNotFound()
        if registration.payment_status == Registration.PaymentStatus.REFUNDED:
            raise AlreadyCancelled()

        registration.payment_status = Registration.PaymentStatus.REFUNDED
        registration.save(update_fields=["payment_status", "updated_at"])

    logger.info("Registration %s cancelled", registration.confirmation_number)
    return registration
