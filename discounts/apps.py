# discounts/apps.py
"""
Application configuration for the discounts module.
"""

from django.apps import AppConfig


class DiscountsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "discounts"
