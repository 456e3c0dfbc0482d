# accounts/models.py
"""
Database models for the accounts application.

Django's built-in user carries the identity (email used as the
login name, first and last name, ``is_staff`` for the admin role).
:class:`UserProfile` stores the contact details the registration
forms collect on top of it.
"""

from django.conf import settings
from django.db import models

ROLE_ADMIN = "admin"
ROLE_USER = "user"


def role_of(user) -> str:
    """
    Return the API role name of a user.

    Parameters
    ----------
    user : User
        The user to evaluate.

    Returns
    -------
    str
        ``"admin"`` for staff accounts, ``"user"`` otherwise.
    """
    return ROLE_ADMIN if user.is_staff else ROLE_USER


class UserProfile(models.Model):
    """
    Profile model linked to the Django user.

    Attributes
    ----------
    user : OneToOneField
        The owning user; each user has exactly one profile.
    phone : CharField
        Optional phone number.
    address, city, state, zip_code : CharField
        Optional postal address.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    phone = models.CharField("Phone", max_length=32, blank=True)
    address = models.CharField("Address", max_length=255, blank=True)
    city = models.CharField("City", max_length=100, blank=True)
    state = models.CharField("State", max_length=100, blank=True)
    zip_code = models.CharField("ZIP code", max_length=20, blank=True)

    def __str__(self) -> str:
        return f"{self.user} profile"
