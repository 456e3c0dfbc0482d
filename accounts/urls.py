# accounts/urls.py
"""
URL configuration for authentication (mounted under ``/api/auth/``).
"""

from django.urls import path

from . import views

app_name = "accounts"

urlpatterns = [
    path("register", views.RegisterView.as_view(), name="register"),
    path("login", views.LoginView.as_view(), name="login"),
    path("admin/login", views.AdminLoginView.as_view(), name="admin-login"),
    path("profile", views.ProfileView.as_view(), name="profile"),
    path("change-password", views.ChangePasswordView.as_view(), name="change-password"),
    path(
        "reset-password-request",
        views.ResetPasswordRequestView.as_view(),
        name="reset-password-request",
    ),
    path("reset-password", views.ResetPasswordView.as_view(), name="reset-password"),
]
