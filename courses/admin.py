# courses/admin.py
"""
Admin configuration for the courses application.

This module defines Django admin customizations for the
:class:`Course` and :class:`Instructor` models.
"""

from django.contrib import admin
from .models import Course, Instructor


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Course model.

    Provides list display, filters, and search options for
    Course records in the Django admin interface.
    """
    # Fields displayed in the admin list view
    list_display = (
        "title",
        "skill_level",
        "min_age",
        "max_age",
        "price",
        "discounted_price",
        "start_date",
        "end_date",
        "capacity",
        "featured",
    )
    # Filters available in the right sidebar
    list_filter = ("skill_level", "featured", "instructor")
    # Fields available for the admin search bar
    search_fields = ("title", "description")


@admin.register(Instructor)
class InstructorAdmin(admin.ModelAdmin):
    list_display = ("name", "created_at")
    search_fields = ("name",)
