# registrations/admin.py
"""
Admin configuration for the registrations application.
"""

from django.contrib import admin
from .models import Registration


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Registration model.

    The confirmation number and the amount paid are fixed at
    checkout and shown read-only.
    """
    # Fields displayed in the admin list view
    list_display = (
        "confirmation_number",
        "child_first_name",
        "child_last_name",
        "course",
        "user",
        "payment_status",
        "amount_paid",
        "created_at",
    )
    # Filters available in the right sidebar
    list_filter = ("payment_status", "course")
    # Fields available for the admin search bar
    search_fields = (
        "confirmation_number",
        "child_first_name",
        "child_last_name",
        "user__email",
        "course__title",
    )
    readonly_fields = ("confirmation_number", "amount_paid", "discount_code")
