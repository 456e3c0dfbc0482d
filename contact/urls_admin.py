# contact/urls_admin.py
from django.urls import path

from . import views

app_name = "contact-admin"

urlpatterns = [
    path("contact-messages", views.AdminContactMessageListView.as_view(), name="message-list"),
    path(
        "contact-messages/<int:pk>",
        views.AdminContactMessageDetailView.as_view(),
        name="message-detail",
    ),
]
