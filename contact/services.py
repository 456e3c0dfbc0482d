# contact/services.py
"""
Contact form intake and back-office triage.
"""

import logging

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction
from django.utils.html import escape

from .exceptions import MessageNotFound
from .models import ContactMessage

logger = logging.getLogger(__name__)


def notify_admin(contact: ContactMessage) -> bool:
    """
    Forward a contact message to ``settings.ADMIN_EMAIL``.

    Returns
    -------
    bool
        ``True`` when the mail backend accepted the message.
    """
    phone = contact.phone or "Not provided"
    try:
        send_mail(
            f"New Contact Message: {contact.subject}",
            f"Name: {contact.name}\nEmail: {contact.email}\nPhone: {phone}\n\n"
            f"Message:\n{contact.message}",
            settings.DEFAULT_FROM_EMAIL,
            [settings.ADMIN_EMAIL],
            html_message=(
                f"<p><strong>Name:</strong> {escape(contact.name)}</p>"
                f"<p><strong>Email:</strong> {escape(contact.email)}</p>"
                f"<p><strong>Phone:</strong> {escape(phone)}</p>"
                f"<p><strong>Message:</strong></p><p>{escape(contact.message)}</p>"
            ),
        )
    except Exception:
        logger.exception("Could not forward contact message %s", contact.pk)
        return False
    return True


def submit_message(data: dict) -> ContactMessage:
    """
    Store a contact message as unread and notify the admin once stored.

    Parameters
    ----------
    data : dict
        ``name``, ``email``, ``subject``, ``message`` and optional ``phone``.

    Returns
    -------
    ContactMessage
        The stored message.
    """
    with transaction.atomic():
        contact = ContactMessage.objects.create(
            name=data["name"],
            email=data["email"],
            phone=data.get("phone") or "",
            subject=data["subject"],
            message=data["message"],
        )
        transaction.on_commit(lambda: notify_admin(contact))
    logger.info("Contact message %s received", contact.pk)
    return contact


def get_message(message_id) -> ContactMessage:
    try:
        return ContactMessage.objects.get(pk=message_id)
    except (ContactMessage.DoesNotExist, ValueError):
        raise MessageNotFound()


def set_status(contact: ContactMessage, status: str) -> ContactMessage:
    contact.status = status
    contact.save(update_fields=["status"])
    return contact
