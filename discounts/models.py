# discounts/models.py
"""
Database models for the discounts application.
"""

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class DiscountCode(models.Model):
    """
    Model representing a promotional discount code.

    Attributes
    ----------
    code : CharField
        Unique code, stored upper-cased so lookups are case-insensitive.
    description : CharField
        Optional text shown to the customer.
    discount_percentage : DecimalField
        Percentage taken off the course price, between 0 and 100.
    is_active : BooleanField
        Inactive codes are never applied.
    max_uses : PositiveIntegerField
        Optional cap on ``current_uses``.
    current_uses : PositiveIntegerField
        Number of registrations the code was applied to. Only ever
        incremented.
    start_date, end_date : DateField
        Optional inclusive validity window.
    created_at : DateTimeField
        Creation timestamp.
    """

    code = models.CharField("Code", max_length=50, unique=True)
    description = models.CharField("Description", max_length=255, blank=True)
    discount_percentage = models.DecimalField(
        "Discount (%)",
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    is_active = models.BooleanField("Active", default=True)
    max_uses = models.PositiveIntegerField("Maximum uses", null=True, blank=True)
    current_uses = models.PositiveIntegerField("Current uses", default=0)
    start_date = models.DateField("Start date", null=True, blank=True)
    end_date = models.DateField("End date", null=True, blank=True)
    created_at = models.DateTimeField("Created at", auto_now_add=True)

    class Meta:
        ordering = ["code"]

    def __str__(self) -> str:
        return self.code

    def save(self, *args, **kwargs):
        self.code = (self.code or "").strip().upper()
        super().save(*args, **kwargs)

    @property
    def has_uses_left(self) -> bool:
        return self.max_uses is None or self.current_uses < self.max_uses
