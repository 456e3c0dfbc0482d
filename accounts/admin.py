# accounts/admin.py
"""
Admin configuration for the accounts application.
"""

from django.contrib import admin
from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    """
    Admin configuration for the UserProfile model.

    Lists profiles with their contact details; searchable by the
    owner's email and name.
    """

    list_display = ("user", "phone", "city", "state")
    list_filter = ("state",)
    search_fields = ("user__email", "user__first_name", "user__last_name", "phone")
