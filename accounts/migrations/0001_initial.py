# accounts/migrations/0001_initial.py
"""
Initial migration for the accounts application.

Creates the UserProfile model holding contact details for
each user.
"""

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("phone", models.CharField(blank=True, max_length=32, verbose_name="Phone")),
                ("address", models.CharField(blank=True, max_length=255, verbose_name="Address")),
                ("city", models.CharField(blank=True, max_length=100, verbose_name="City")),
                ("state", models.CharField(blank=True, max_length=100, verbose_name="State")),
                ("zip_code", models.CharField(blank=True, max_length=20, verbose_name="ZIP code")),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="profile",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
        ),
    ]
