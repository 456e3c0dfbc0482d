from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("courses", "0001_initial"),
        ("discounts", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Registration",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("child_first_name", models.CharField(max_length=100, verbose_name="Child first name")),
                ("child_last_name", models.CharField(max_length=100, verbose_name="Child last name")),
                ("child_date_of_birth", models.DateField(verbose_name="Child date of birth")),
                ("child_grade_level", models.CharField(max_length=50, verbose_name="Child grade level")),
                ("child_allergies", models.TextField(blank=True, verbose_name="Allergies")),
                ("child_special_needs", models.TextField(blank=True, verbose_name="Special needs")),
                ("emergency_contact_name", models.CharField(max_length=200, verbose_name="Emergency contact name")),
                (
                    "emergency_contact_relation",
                    models.CharField(max_length=100, verbose_name="Emergency contact relation"),
                ),
                ("emergency_contact_phone", models.CharField(max_length=32, verbose_name="Emergency contact phone")),
                ("agreed_to_terms", models.BooleanField(default=False, verbose_name="Agreed to terms")),
                ("photo_release", models.BooleanField(default=False, verbose_name="Photo release")),
                (
                    "confirmation_number",
                    models.CharField(max_length=32, unique=True, verbose_name="Confirmation number"),
                ),
                (
                    "payment_status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("completed", "Completed"), ("refunded", "Refunded")],
                        default="pending",
                        max_length=16,
                        verbose_name="Payment status",
                    ),
                ),
                ("amount_paid", models.DecimalField(decimal_places=2, max_digits=10, verbose_name="Amount paid ($)")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated at")),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="registrations",
                        to="courses.course",
                        verbose_name="Course",
                    ),
                ),
                (
                    "discount_code",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="registrations",
                        to="discounts.discountcode",
                        verbose_name="Discount code",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="registrations",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="User",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
