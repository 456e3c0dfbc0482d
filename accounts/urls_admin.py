# accounts/urls_admin.py
from django.urls import path

from . import views_admin

app_name = "accounts-admin"

urlpatterns = [
    path("users", views_admin.AdminUserListView.as_view(), name="user-list"),
    path("users/<int:pk>", views_admin.AdminUserDetailView.as_view(), name="user-detail"),
]
