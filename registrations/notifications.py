# registrations/notifications.py
"""
Customer emails about registrations.

Mail delivery problems are logged and never reach the caller.
"""

import logging

from django.conf import settings
from django.core.mail import send_mail

from .models import Registration

logger = logging.getLogger(__name__)


def send_registration_confirmation(registration_id) -> bool:
    """
    Email the booking account its confirmation number.

    Parameters
    ----------
    registration_id : int
        The registration to confirm.

    Returns
    -------
    bool
        ``True`` when the message was handed to the mail backend.
    """
    registration = (
        Registration.objects.select_related("course", "user").filter(pk=registration_id).first()
    )
    if registration is None or not registration.user.email:
        return False

    course = registration.course
    body = (
        f"Hello {registration.user.first_name},\n\n"
        f"{registration.child_name} is registered for {course.title} "
        f"({course.start_date:%B %d, %Y} - {course.end_date:%B %d, %Y}).\n"
        f"Confirmation number: {registration.confirmation_number}\n"
        f"Amount paid: ${registration.amount_paid}\n\n"
        "Thank you for choosing RoboSpark!"
    )
    try:
        send_mail(
            f"RoboSpark registration confirmed: {registration.confirmation_number}",
            body,
            settings.DEFAULT_FROM_EMAIL,
            [registration.user.email],
        )
    except Exception:
        logger.exception("Could not send confirmation for registration %s", registration_id)
        return False
    logger.info("Confirmation sent for registration %s", registration_id)
    return True
