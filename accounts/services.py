# accounts/services.py
"""
Account operations: sign-up, credential checks, profile and
password management, and the user administration used by the
back-office.
"""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.contrib.auth.tokens import default_token_generator
from django.core.mail import send_mail
from django.db import transaction
from django.utils.encoding import force_bytes, force_str
from django.utils.http import urlsafe_base64_decode, urlsafe_base64_encode

from registrations.models import Registration
from robospark.exceptions import NotFound

from .exceptions import (
    AdminDeletionForbidden,
    AdminRoleRequired,
    EmailInUse,
    InvalidCredentials,
    InvalidResetToken,
    UserDeletionBlocked,
    WrongPassword,
)
from .models import ROLE_ADMIN

logger = logging.getLogger(__name__)

User = get_user_model()

PROFILE_FIELDS = ("phone", "address", "city", "state", "zip_code")


def _normalize_email(email: str) -> str:
    return User.objects.normalize_email(email).strip().lower()


def _apply_profile(user, data: dict) -> None:
    # The post_save signal created the row and cached it on the user.
    profile = user.profile
    changed = [f for f in PROFILE_FIELDS if f in data]
    for field in changed:
        setattr(profile, field, data[field] or "")
    if changed:
        profile.save(update_fields=changed)


@transaction.atomic
def register_user(*, email, password, first_name, last_name, phone=None, is_staff=False):
    """
    Create an account whose login name is its email address.

    Parameters
    ----------
    email, password, first_name, last_name : str
        Identity and credentials of the new account.
    phone : str, optional
        Stored on the profile.
    is_staff : bool
        Grants the admin role.

    Returns
    -------
    User
        The created user.

    Raises
    ------
    EmailInUse
        If another account already uses this email.
    django.core.exceptions.ValidationError
        If the password fails the configured validators.
    """
    email = _normalize_email(email)
    if User.objects.filter(username__iexact=email).exists():
        raise EmailInUse()

    user = User(
        username=email,
        email=email,
        first_name=first_name,
        last_name=last_name,
        is_staff=is_staff,
    )
    validate_password(password, user)
    user.set_password(password)
    user.save()
    _apply_profile(user, {"phone": phone})
    logger.info("Account created user=%s", user.pk)
    return user


def authenticate_credentials(email: str, password: str, *, require_admin: bool = False):
    """
    Return the active user matching an email/password pair.

    Raises
    ------
    InvalidCredentials
        If no active account matches.
    AdminRoleRequired
        If ``require_admin`` is set and the account is not staff.
    """
    user = User.objects.filter(username__iexact=_normalize_email(email)).first()
    if user is None or not user.is_active or not user.check_password(password):
        logger.warning("Failed login for %s", email)
        raise InvalidCredentials()
    if require_admin and not user.is_staff:
        logger.warning("Non-admin user=%s attempted admin login", user.pk)
        raise AdminRoleRequired()
    return user


def update_profile(user, data: dict):
    """
    Update names and contact details of a user.

    Blank names are ignored so that a partial form never wipes them.
    """
    fields = []
    for field in ("first_name", "last_name"):
        if data.get(field):
            setattr(user, field, data[field])
            fields.append(field)
    if fields:
        user.save(update_fields=fields)
    _apply_profile(user, data)
    return user


def change_password(user, current_password: str, new_password: str) -> None:
    if not user.check_password(current_password):
        raise WrongPassword()
    validate_password(new_password, user)
    user.set_password(new_password)
    user.save(update_fields=["password"])
    logger.info("Password changed user=%s", user.pk)


def request_password_reset(email: str) -> None:
    """
    Email a password reset link when the account exists.

    The caller always gets the same answer so that account
    existence is not revealed; mail failures are logged only.
    """
    user = User.objects.filter(username__iexact=_normalize_email(email), is_active=True).first()
    if user is None:
        return

    uid = urlsafe_base64_encode(force_bytes(user.pk))
    token = default_token_generator.make_token(user)
    reset_url = f"{settings.FRONTEND_URL}/reset-password/{uid}/{token}"
    try:
        send_mail(
            "Password Reset Request",
            f"Please use the following link to reset your password: {reset_url}",
            settings.DEFAULT_FROM_EMAIL,
            [user.email],
            html_message=f'<p>Please click <a href="{reset_url}">here</a> to reset your password.</p>',
        )
    except Exception:
        logger.exception("Could not send password reset email to user=%s", user.pk)
        return
    logger.info("Password reset link sent user=%s", user.pk)


def reset_password(uid: str, token: str, new_password: str) -> None:
    try:
        user = User.objects.get(pk=force_str(urlsafe_base64_decode(uid)))
    except (TypeError, ValueError, OverflowError, User.DoesNotExist):
        raise InvalidResetToken()
    if not default_token_generator.check_token(user, token):
        raise InvalidResetToken()
    validate_password(new_password, user)
    user.set_password(new_password)
    user.save(update_fields=["password"])
    logger.info("Password reset completed user=%s", user.pk)


# ---------------------------------------------------------------------------
# Back-office user management
# ---------------------------------------------------------------------------

def get_user(user_id):
    try:
        return User.objects.select_related("profile").get(pk=user_id)
    except User.DoesNotExist:
        raise NotFound("User not found")


def create_user(data: dict):
    """Create a user from the admin panel; ``role`` defaults to ``user``."""
    return register_user(
        email=data["email"],
        password=data["password"],
        first_name=data["first_name"],
        last_name=data["last_name"],
        phone=data.get("phone"),
        is_staff=data.get("role") == ROLE_ADMIN,
    )


@transaction.atomic
def update_user(user, data: dict):
    update_profile(user, data)
    fields = []
    if data.get("email"):
        email = _normalize_email(data["email"])
        if User.objects.filter(username__iexact=email).exclude(pk=user.pk).exists():
            raise EmailInUse()
        user.username = user.email = email
        fields += ["username", "email"]
    if "role" in data:
        user.is_staff = data["role"] == ROLE_ADMIN
        fields.append("is_staff")
    if data.get("password"):
        validate_password(data["password"], user)
        user.set_password(data["password"])
        fields.append("password")
    if fields:
        user.save(update_fields=fields)
    logger.info("User updated user=%s fields=%s", user.pk, fields)
    return user


@transaction.atomic
def delete_user(user) -> None:
    """
    Delete a non-admin user without completed or pending registrations.

    Refunded registrations are removed along with the account.

    Raises
    ------
    AdminDeletionForbidden
        If the user is an admin.
    UserDeletionBlocked
        If the user still has active registrations.
    """
    if user.is_staff:
        raise AdminDeletionForbidden()
    if user.registrations.filter(payment_status__in=Registration.ACTIVE_STATUSES).exists():
        raise UserDeletionBlocked()
    user_id = user.pk
    user.registrations.all().delete()
    user.delete()
    logger.info("User deleted user=%s", user_id)
