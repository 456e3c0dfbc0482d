# monitoring/urls.py
"""
URL configuration for the monitoring application.

This module defines routes for accessing monitoring features,
including the log journal for staff users.
"""

from django.urls import path
from .views import LogsView

# Application namespace for reverse lookups
app_name = "monitoring"

#: URL patterns for the monitoring application
urlpatterns = [
    # Display application logs (restricted to staff members)
    path("logs", LogsView.as_view(), name="logs"),
]
