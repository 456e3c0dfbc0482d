# courses/apps.py
"""
Application configuration for the courses module.
"""

from django.apps import AppConfig


class CoursesConfig(AppConfig):
    """
    Configuration class for the courses application.

    Attributes
    ----------
    default_auto_field : str
        Primary key field type for models that do not define one.
    name : str
        The full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "courses"
