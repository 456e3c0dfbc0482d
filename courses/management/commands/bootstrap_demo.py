# courses/management/commands/bootstrap_demo.py
"""
Management command to initialize demo data.

This command creates the administrator account, instructors,
courses and discount codes needed to try the application.
It can be executed using::

    python manage.py bootstrap_demo
"""

from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from courses.models import Course, Instructor
from discounts.models import DiscountCode

User = get_user_model()


class Command(BaseCommand):
    """
    Django management command for demo initialization.

    Creates:
    - An administrator account (``ADMIN_EMAIL`` / ``ADMIN_PASSWORD``).
    - Two instructors.
    - A beginner and an advanced course, scheduled after today.
    - The ``SUMMER25`` and ``EARLYBIRD15`` discount codes.

    Running it again updates the records in place.

    Attributes
    ----------
    help : str
        Short description displayed in ``python manage.py help``.
    """

    help = "Create the admin account and demo courses, instructors and discount codes."

    @transaction.atomic
    def handle(self, *args, **options):
        """
        Execute the command.

        Notes
        -----
        - Admin credentials come from the settings.
        - Course and discount dates are computed from the current date
          so that the demo catalogue is always open for registration.
        """
        # --- Create administrator account ---
        email = settings.ADMIN_EMAIL.lower()
        admin, created = User.objects.get_or_create(
            username=email,
            defaults={
                "email": email,
                "first_name": "Admin",
                "last_name": "User",
                "is_staff": True,
                "is_superuser": True,
            },
        )
        if created:
            admin.set_password(settings.ADMIN_PASSWORD)
            admin.save()
            self.stdout.write(self.style.SUCCESS(f"Admin : {email}"))

        # --- Create instructors ---
        chen, _ = Instructor.objects.update_or_create(
            name="Dr. Emily Chen",
            defaults={
                "bio": "Dr. Chen has 10 years of experience teaching STEM "
                "to elementary school students.",
                "image_url": "https://via.placeholder.com/150",
            },
        )
        wilson, _ = Instructor.objects.update_or_create(
            name="Prof. James Wilson",
            defaults={
                "bio": "Robotics researcher with experience at leading technology companies.",
                "image_url": "https://via.placeholder.com/150",
            },
        )

        today = timezone.localdate()

        # --- Create courses ---
        beginner_start = today + timedelta(days=30)
        Course.objects.update_or_create(
            title="Robotics Fundamentals for Beginners",
            defaults={
                "description": "An introductory course to the exciting world of "
                "robotics for younger students.",
                "long_description": "This course introduces young learners to the "
                "fascinating world of robotics through engaging hands-on activities.",
                "min_age": 7,
                "max_age": 9,
                "skill_level": Course.SkillLevel.BEGINNER,
                "topics": ["Robot Design", "Block Coding", "Basic Electronics"],
                "duration": "2 weeks",
                "start_date": beginner_start,
                "end_date": beginner_start + timedelta(days=11),
                "days": ["Monday", "Wednesday", "Friday"],
                "time_slot": "9:00 AM - 12:00 PM",
                "price": Decimal("299.00"),
                "discounted_price": Decimal("254.00"),
                "capacity": 15,
                "instructor": chen,
                "image_url": "https://via.placeholder.com/800x600",
                "featured": True,
            },
        )
        advanced_start = today + timedelta(days=60)
        Course.objects.update_or_create(
            title="Advanced Robotics Engineering",
            defaults={
                "description": "A deep dive into complex robotics systems for "
                "experienced students.",
                "long_description": "Designed for students with prior robotics "
                "experience, this advanced course explores sophisticated concepts "
                "in robot engineering and automation.",
                "min_age": 13,
                "max_age": 16,
                "skill_level": Course.SkillLevel.ADVANCED,
                "topics": ["Autonomous Systems", "Python Programming", "AI Basics"],
                "duration": "3 weeks",
                "start_date": advanced_start,
                "end_date": advanced_start + timedelta(days=21),
                "days": ["Tuesday", "Thursday"],
                "time_slot": "1:00 PM - 4:30 PM",
                "price": Decimal("499.00"),
                "discounted_price": None,
                "capacity": 12,
                "instructor": wilson,
                "image_url": "https://via.placeholder.com/800x600",
                "featured": True,
            },
        )

        # --- Create discount codes (usage counters are left untouched) ---
        DiscountCode.objects.update_or_create(
            code="SUMMER25",
            defaults={
                "description": "25% off any course",
                "discount_percentage": Decimal("25"),
                "start_date": today,
                "end_date": today + timedelta(days=90),
                "is_active": True,
                "max_uses": 100,
            },
        )
        DiscountCode.objects.update_or_create(
            code="EARLYBIRD15",
            defaults={
                "description": "15% early bird discount",
                "discount_percentage": Decimal("15"),
                "start_date": today,
                "end_date": today + timedelta(days=45),
                "is_active": True,
                "max_uses": 50,
            },
        )

        self.stdout.write(self.style.SUCCESS("Demo data initialized."))
