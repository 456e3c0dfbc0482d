# accounts/apps.py
"""
Application configuration for the accounts module.
"""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """
    Configuration class for the accounts application.

    ``ready`` connects the signal that creates user profiles.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"

    def ready(self) -> None:
        from . import signals  # noqa: F401
