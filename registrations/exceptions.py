# registrations/exceptions.py
"""
Custom exceptions for the registrations application.

They signal why a registration could not be created or cancelled.
Every creation failure is reported to the client as a 400.
"""

from robospark.exceptions import DomainError, NotFound


class RegistrationNotFound(NotFound):
    default_message = "Registration not found"


class RegistrationError(DomainError):
    """Base class for registration business-rule failures."""


class TermsNotAccepted(RegistrationError):
    default_message = "You must agree to the terms and conditions"


class CourseFull(RegistrationError):
    default_message = "Course is full"


class AgeOutOfRange(RegistrationError):
    """Raised when the child's age lies outside the course window."""

    def __init__(self, min_age: int, max_age: int) -> None:
        super().__init__(
            f"Child's age must be between {min_age} and {max_age} years for this course"
        )


class AlreadyCancelled(RegistrationError):
    default_message = "Registration is already canceled"


class ConfirmationNumberUnavailable(RegistrationError):
    """Raised when no free confirmation number was drawn after several attempts."""

    default_message = "Could not allocate a confirmation number, please try again"
