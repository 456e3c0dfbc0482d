# robospark/testing.py
"""
Builders shared by the test-suites of every application.
"""

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.tokens import create_access_token
from courses.models import Course, Instructor
from discounts.models import DiscountCode

User = get_user_model()

PASSWORD = "Sparky-Robot-2024"


def make_user(email="parent@example.com", password=PASSWORD, **extra):
    extra.setdefault("first_name", "Pat")
    extra.setdefault("last_name", "Parent")
    return User.objects.create_user(username=email, email=email, password=password, **extra)


def make_admin(email="staff@example.com", password=PASSWORD):
    return make_user(email, password, is_staff=True, first_name="Ada", last_name="Admin")


def make_course(**overrides):
    today = timezone.localdate()
    if "instructor" not in overrides:
        overrides["instructor"] = Instructor.objects.create(name="Dr. Emily Chen", bio="STEM teacher")
    values = {
        "title": "Robotics Fundamentals",
        "description": "Build and code a first robot.",
        "min_age": 7,
        "max_age": 10,
        "skill_level": Course.SkillLevel.BEGINNER,
        "topics": ["Robot Design", "Block Coding"],
        "duration": "2 weeks",
        "start_date": today + timedelta(days=30),
        "end_date": today + timedelta(days=41),
        "days": ["Monday", "Wednesday"],
        "time_slot": "9:00 AM - 12:00 PM",
        "price": Decimal("300.00"),
        "discounted_price": Decimal("250.00"),
        "capacity": 10,
    }
    values.update(overrides)
    return Course.objects.create(**values)


def make_discount(code="SIBLING10", percentage="10", **overrides):
    values = {
        "code": code,
        "description": "Sibling discount",
        "discount_percentage": Decimal(percentage),
        "is_active": True,
        "max_uses": None,
    }
    values.update(overrides)
    return DiscountCode.objects.create(**values)


def years_ago(years: int, today=None):
    """Birth date of a child turning ``years`` on ``today``."""
    today = today or timezone.localdate()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # 29 February
        return today.replace(year=today.year - years, day=28)


def child_info(date_of_birth, **overrides):
    info = {
        "first_name": "Sam",
        "last_name": "Parent",
        "date_of_birth": date_of_birth,
        "grade_level": "4th",
        "allergies": "",
        "special_needs": "",
    }
    info.update(overrides)
    return info


EMERGENCY_CONTACT = {"name": "Jo Parent", "relation": "Aunt", "phone": "555-0100"}


def registration_payload(course, date_of_birth=None, **overrides):
    """camelCase body of ``POST /api/registrations``."""
    payload = {
        "courseId": course.pk,
        "childFirstName": "Sam",
        "childLastName": "Parent",
        "childDateOfBirth": (date_of_birth or years_ago(9)).isoformat(),
        "childGradeLevel": "4th",
        "childAllergies": "Peanuts",
        "emergencyContactName": "Jo Parent",
        "emergencyContactRelation": "Aunt",
        "emergencyContactPhone": "555-0100",
        "agreedToTerms": True,
        "photoRelease": False,
    }
    payload.update(overrides)
    return payload


def bearer_client(user=None) -> APIClient:
    """API client sending a bearer token for ``user`` (anonymous when ``None``)."""
    client = APIClient()
    if user is not None:
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {create_access_token(user)}")
    return client
