from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Instructor",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200, verbose_name="Name")),
                ("bio", models.TextField(blank=True, verbose_name="Bio")),
                ("image_url", models.CharField(blank=True, max_length=500, verbose_name="Image URL")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200, verbose_name="Title")),
                ("description", models.TextField(verbose_name="Description")),
                ("long_description", models.TextField(blank=True, verbose_name="Long description")),
                ("min_age", models.PositiveSmallIntegerField(verbose_name="Minimum age")),
                ("max_age", models.PositiveSmallIntegerField(verbose_name="Maximum age")),
                (
                    "skill_level",
                    models.CharField(
                        choices=[("Beginner", "Beginner"), ("Intermediate", "Intermediate"), ("Advanced", "Advanced")],
                        default="Beginner",
                        max_length=20,
                        verbose_name="Skill level",
                    ),
                ),
                ("topics", models.JSONField(blank=True, default=list, verbose_name="Topics")),
                ("duration", models.CharField(max_length=100, verbose_name="Duration")),
                ("start_date", models.DateField(verbose_name="Start date")),
                ("end_date", models.DateField(verbose_name="End date")),
                ("days", models.JSONField(blank=True, default=list, verbose_name="Days")),
                ("time_slot", models.CharField(max_length=100, verbose_name="Time slot")),
                ("price", models.DecimalField(decimal_places=2, max_digits=10, verbose_name="Price ($)")),
                (
                    "discounted_price",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=10, null=True, verbose_name="Discounted price ($)"
                    ),
                ),
                ("capacity", models.PositiveIntegerField(verbose_name="Capacity")),
                ("image_url", models.CharField(blank=True, max_length=500, verbose_name="Image URL")),
                ("featured", models.BooleanField(default=False, verbose_name="Featured")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated at")),
                (
                    "instructor",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="courses",
                        to="courses.instructor",
                        verbose_name="Instructor",
                    ),
                ),
            ],
            options={
                "ordering": ["start_date", "title"],
            },
        ),
    ]
