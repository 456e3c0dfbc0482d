# registrations/urls_admin.py
from django.urls import path

from . import views_admin

app_name = "registrations-admin"

urlpatterns = [
    path("registrations", views_admin.AdminRegistrationListView.as_view(), name="registration-list"),
    path(
        "registrations/<int:pk>",
        views_admin.AdminRegistrationDetailView.as_view(),
        name="registration-detail",
    ),
    path(
        "registrations/<int:pk>/cancel",
        views_admin.AdminRegistrationCancelView.as_view(),
        name="registration-cancel",
    ),
    path("dashboard/stats", views_admin.DashboardStatsView.as_view(), name="dashboard-stats"),
]
