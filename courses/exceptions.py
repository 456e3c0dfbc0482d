# courses/exceptions.py
"""
Custom exceptions for the courses application.

Both errors guard deletions that would orphan dependent records.
"""

from robospark.exceptions import DomainError, NotFound


class CourseNotFound(NotFound):
    default_message = "Course not found"


class InstructorNotFound(NotFound):
    default_message = "Instructor not found"


class CourseInUse(DomainError):
    """Raised when deleting a course that registrations still reference."""

    default_message = "Cannot delete course with existing registrations"


class InstructorInUse(DomainError):
    """Raised when deleting an instructor still assigned to courses."""

    default_message = "Cannot delete instructor assigned to courses"
