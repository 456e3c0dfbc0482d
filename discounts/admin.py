# discounts/admin.py
from django.contrib import admin
from .models import DiscountCode


@admin.register(DiscountCode)
class DiscountCodeAdmin(admin.ModelAdmin):
    list_display = (
        "code",
        "discount_percentage",
        "is_active",
        "current_uses",
        "max_uses",
        "start_date",
        "end_date",
    )
    list_filter = ("is_active",)
    search_fields = ("code", "description")
    readonly_fields = ("current_uses",)
