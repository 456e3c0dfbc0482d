from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from django.utils import timezone

from courses.models import Course, Instructor
from discounts.models import DiscountCode
from discounts.services import validate_discount_code


class BootstrapDemoTests(TestCase):
    def test_creates_demo_data(self):
        call_command("bootstrap_demo")

        admin = get_user_model().objects.get(username=settings.ADMIN_EMAIL.lower())
        assert admin.is_staff
        assert admin.check_password(settings.ADMIN_PASSWORD)

        assert Instructor.objects.count() == 2
        today = timezone.localdate()
        for course in Course.objects.all():
            assert course.start_date > today
            assert course.end_date > course.start_date
            assert course.instructor is not None

        beginner = Course.objects.get(title="Robotics Fundamentals for Beginners")
        assert beginner.effective_price == beginner.discounted_price

        assert validate_discount_code("summer25")["discount"] == 0.25
        assert validate_discount_code("EARLYBIRD15")["discount"] == 0.15

    def test_is_idempotent(self):
        call_command("bootstrap_demo")
        DiscountCode.objects.filter(code="SUMMER25").update(current_uses=7)
        call_command("bootstrap_demo")

        self.assertEqual(get_user_model().objects.filter(is_staff=True).count(), 1)
        self.assertEqual(Course.objects.count(), 2)
        self.assertEqual(DiscountCode.objects.count(), 2)
        self.assertEqual(DiscountCode.objects.get(code="SUMMER25").current_uses, 7)
