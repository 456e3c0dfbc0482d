# discounts/urls.py
from django.urls import path

from . import views

app_name = "discounts"

urlpatterns = [
    path("discounts/validate", views.ValidateDiscountView.as_view(), name="validate"),
]
