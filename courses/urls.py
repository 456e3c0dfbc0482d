# courses/urls.py
"""
URL configuration for the public catalogue (mounted under ``/api/``).
"""

from django.urls import path

from . import views

app_name = "courses"

urlpatterns = [
    path("courses", views.CourseListView.as_view(), name="course-list"),
    path("courses/<int:pk>", views.CourseDetailView.as_view(), name="course-detail"),
]
