# accounts/exceptions.py
"""
Custom exceptions for the accounts application.
"""

from robospark.exceptions import DomainError, Forbidden


class EmailInUse(DomainError):
    """Raised when signing up or creating a user with a taken email."""

    default_message = "Email is already in use"


class InvalidCredentials(DomainError):
    """Raised when an email/password pair does not match an active account."""

    http_status = 401
    default_message = "Invalid email or password"


class AdminRoleRequired(Forbidden):
    """Raised when a non-admin account uses the admin login."""

    default_message = "Require Admin Role!"


class WrongPassword(DomainError):
    """Raised when the current password given for a change does not match."""

    default_message = "Current password is incorrect"


class InvalidResetToken(DomainError):
    """Raised when a password reset link is malformed or expired."""

    default_message = "Invalid or expired password reset link"


class UserDeletionBlocked(DomainError):
    """Raised when a user still has registrations that must be kept."""

    default_message = "Cannot delete user with active registrations"


class AdminDeletionForbidden(Forbidden):
    """Raised when deleting an admin account."""

    default_message = "Cannot delete admin user"
