# courses/urls_admin.py
from django.urls import path

from . import views_admin

app_name = "courses-admin"

urlpatterns = [
    path("courses", views_admin.AdminCourseListView.as_view(), name="course-list"),
    path("courses/<int:pk>", views_admin.AdminCourseDetailView.as_view(), name="course-detail"),
    path("instructors", views_admin.AdminInstructorListView.as_view(), name="instructor-list"),
    path(
        "instructors/<int:pk>",
        views_admin.AdminInstructorDetailView.as_view(),
        name="instructor-detail",
    ),
]
