# discounts/urls_admin.py
from django.urls import path

from . import views_admin

app_name = "discounts-admin"

urlpatterns = [
    path("discounts", views_admin.AdminDiscountListView.as_view(), name="discount-list"),
    path("discounts/<int:pk>", views_admin.AdminDiscountDetailView.as_view(), name="discount-detail"),
]
