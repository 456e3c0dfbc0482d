# robospark/urls.py
"""
Root URL configuration for the RoboSpark project.

This module defines the global URL routes and delegates to
application-specific ``urls.py`` modules. Every API route lives
under ``/api/``; the back-office routes under ``/api/admin/`` are
restricted to staff accounts.

For more details, see:
https://docs.djangoproject.com/en/stable/topics/http/urls/
"""

from django.contrib import admin
from django.urls import path, include

from accounts.views import ProfileView
from registrations.views import UserRegistrationListView

from .api import index

#: Self-service routes of the signed-in user
user_patterns = [
    path("profile", ProfileView.as_view(), name="user-profile"),
    path("registrations", UserRegistrationListView.as_view(), name="user-registrations"),
]

#: Back-office routes (staff only)
admin_api_patterns = [
    path("", include("accounts.urls_admin")),
    path("", include("courses.urls_admin")),
    path("", include("discounts.urls_admin")),
    path("", include("registrations.urls_admin")),
    path("", include("contact.urls_admin")),
    path("", include("monitoring.urls")),
]

#: Global URL patterns for the project
urlpatterns = [
    # Django admin interface
    path("admin/", admin.site.urls),

    # Authentication (sign-up, login, password management)
    path("api/auth/", include("accounts.urls")),
    path("api/users/", include(user_patterns)),

    # Catalogue, discount check, bookings and contact form
    path("api/", include("courses.urls")),
    path("api/", include("discounts.urls")),
    path("api/", include("registrations.urls")),
    path("api/", include("contact.urls")),

    # Back-office API
    path("api/admin/", include(admin_api_patterns)),

    # Landing endpoint
    path("", index, name="home"),
]
