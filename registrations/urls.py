# registrations/urls.py
"""
URL configuration for registrations (mounted under ``/api/``).
"""

from django.urls import path

from . import views

app_name = "registrations"

urlpatterns = [
    path("registrations", views.RegistrationCreateView.as_view(), name="create"),
    path("registrations/<int:pk>", views.RegistrationDetailView.as_view(), name="detail"),
    path("registrations/<int:pk>/cancel", views.RegistrationCancelView.as_view(), name="cancel"),
    path("registrations/<int:pk>/receipt", views.RegistrationReceiptView.as_view(), name="receipt"),
]
