# registrations/models.py
"""
Database models for the registrations application.

A registration records one child attending one course, booked
by a user account, together with the guardian and emergency
contact data collected at checkout and the amount charged.
"""

from django.conf import settings
from django.db import models

from courses.models import Course
from discounts.models import DiscountCode


class Registration(models.Model):
    """
    Model representing the registration of a child to a course.

    Attributes
    ----------
    user : ForeignKey
        Account that booked the course.
    course : ForeignKey
        The course booked.
    child_first_name, child_last_name : CharField
        Identity of the child.
    child_date_of_birth : DateField
        Used to check the course age window.
    child_grade_level : CharField
        School grade of the child.
    child_allergies, child_special_needs : TextField
        Optional free text.
    emergency_contact_name, emergency_contact_relation, emergency_contact_phone : CharField
        Person to call during the course.
    agreed_to_terms : BooleanField
        Always true for stored registrations.
    photo_release : BooleanField
        Whether photos of the child may be published.
    confirmation_number : CharField
        Unique ``RS-<digits>-<year>`` reference given to the customer.
    payment_status : CharField
        One of :class:`Registration.PaymentStatus`.
    amount_paid : DecimalField
        Price charged at creation, never recomputed.
    discount_code : ForeignKey
        Discount code applied to the price, if any.
    """

    class PaymentStatus(models.TextChoices):
        """
        Enumeration of payment statuses.

        PENDING
            Payment not captured yet; the seat is held.
        COMPLETED
            Paid; the seat is taken.
        REFUNDED
            Cancelled; the seat is released.
        """

        PENDING = "pending", "Pending"
        COMPLETED = "completed", "Completed"
        REFUNDED = "refunded", "Refunded"

    #: Statuses that hold a seat in the course.
    ACTIVE_STATUSES = (PaymentStatus.COMPLETED, PaymentStatus.PENDING)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="registrations",
        verbose_name="User",
    )
    course = models.ForeignKey(
        Course,
        on_delete=models.PROTECT,
        related_name="registrations",
        verbose_name="Course",
    )
    child_first_name = models.CharField("Child first name", max_length=100)
    child_last_name = models.CharField("Child last name", max_length=100)
    child_date_of_birth = models.DateField("Child date of birth")
    child_grade_level = models.CharField("Child grade level", max_length=50)
    child_allergies = models.TextField("Allergies", blank=True)
    child_special_needs = models.TextField("Special needs", blank=True)
    emergency_contact_name = models.CharField("Emergency contact name", max_length=200)
    emergency_contact_relation = models.CharField("Emergency contact relation", max_length=100)
    emergency_contact_phone = models.CharField("Emergency contact phone", max_length=32)
    agreed_to_terms = models.BooleanField("Agreed to terms", default=False)
    photo_release = models.BooleanField("Photo release", default=False)
    confirmation_number = models.CharField("Confirmation number", max_length=32, unique=True)
    payment_status = models.CharField(
        "Payment status",
        max_length=16,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
    )
    amount_paid = models.DecimalField("Amount paid ($)", max_digits=10, decimal_places=2)
    discount_code = models.ForeignKey(
        DiscountCode,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="registrations",
        verbose_name="Discount code",
    )
    created_at = models.DateTimeField("Created at", auto_now_add=True)
    updated_at = models.DateTimeField("Updated at", auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.confirmation_number} {self.child_name} -> {self.course} ({self.payment_status})"

    @property
    def child_name(self) -> str:
        return f"{self.child_first_name} {self.child_last_name}"
