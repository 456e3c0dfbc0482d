"""
Test suite for the discounts application.

Covers the public validation endpoint, price rounding and the
back-office management of codes.
"""

from datetime import timedelta
from decimal import Decimal

from django.test import TestCase
from django.utils import timezone

from discounts.models import DiscountCode
from discounts.services import apply_usage, discounted_price
from registrations import services as registration_services
from robospark.testing import (
    EMERGENCY_CONTACT,
    bearer_client,
    child_info,
    make_admin,
    make_course,
    make_discount,
    make_user,
    years_ago,
)

VALIDATE_URL = "/api/discounts/validate"


class ValidateDiscountTests(TestCase):
    def setUp(self):
        self.client = bearer_client()
        self.today = timezone.localdate()

    def test_valid_code_is_case_insensitive(self):
        discount = make_discount("SUMMER25", "25", description="25% off any course")
        resp = self.client.post(VALIDATE_URL, {"code": "summer25"}, format="json")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {"id": discount.pk, "code": "SUMMER25", "discount": 0.25, "description": "25% off any course"},
        )

    def test_unknown_code(self):
        resp = self.client.post(VALIDATE_URL, {"code": "NOPE"}, format="json")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "Invalid or expired discount code"})

    def test_inactive_code(self):
        make_discount(is_active=False)
        resp = self.client.post(VALIDATE_URL, {"code": "SIBLING10"}, format="json")
        self.assertEqual(resp.status_code, 404)

    def test_max_uses_reached(self):
        make_discount(max_uses=3, current_uses=3)
        resp = self.client.post(VALIDATE_URL, {"code": "SIBLING10"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "Discount code has reached maximum uses"})

    def test_not_yet_active(self):
        make_discount(start_date=self.today + timedelta(days=2))
        resp = self.client.post(VALIDATE_URL, {"code": "SIBLING10"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "Discount code is not yet active"})

    def test_expired(self):
        make_discount(end_date=self.today - timedelta(days=1))
        resp = self.client.post(VALIDATE_URL, {"code": "SIBLING10"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "Discount code has expired"})

    def test_code_is_required(self):
        resp = self.client.post(VALIDATE_URL, {}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["errors"], {"code": ["Discount code is required"]})

    def test_validation_does_not_consume_uses(self):
        discount = make_discount(max_uses=1)
        self.client.post(VALIDATE_URL, {"code": "SIBLING10"}, format="json")
        discount.refresh_from_db()
        self.assertEqual(discount.current_uses, 0)


class PricingTests(TestCase):
    def test_rounds_half_up_to_cents(self):
        self.assertEqual(discounted_price(Decimal("250.00"), Decimal("10")), Decimal("225.00"))
        self.assertEqual(discounted_price(Decimal("99.99"), Decimal("15")), Decimal("84.99"))
        self.assertEqual(discounted_price(Decimal("254.00"), Decimal("12.5")), Decimal("222.25"))
        self.assertEqual(discounted_price(Decimal("300.00"), Decimal("100")), Decimal("0.00"))

    def test_apply_usage_respects_max_uses(self):
        discount = make_discount(max_uses=2)
        self.assertIsNotNone(apply_usage(discount.pk))
        self.assertIsNotNone(apply_usage(discount.pk))
        self.assertIsNone(apply_usage(discount.pk))
        discount.refresh_from_db()
        self.assertEqual(discount.current_uses, 2)

    def test_code_is_stored_upper_case(self):
        discount = make_discount(code="  spring5 ")
        self.assertEqual(discount.code, "SPRING5")


class AdminDiscountTests(TestCase):
    def setUp(self):
        self.admin = bearer_client(make_admin())

    def test_non_admin_is_forbidden(self):
        resp = bearer_client(make_user()).get("/api/admin/discounts")
        self.assertEqual(resp.status_code, 403)

    def test_create_and_list(self):
        resp = self.admin.post(
            "/api/admin/discounts",
            {"code": "fall20", "discountPercentage": "20", "maxUses": 10},
            format="json",
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["code"], "FALL20")
        self.assertEqual(resp.json()["currentUses"], 0)
        self.assertEqual(resp.json()["usageCount"], 0)

        duplicate = self.admin.post(
            "/api/admin/discounts", {"code": "Fall20", "discountPercentage": "5"}, format="json"
        )
        self.assertEqual(duplicate.status_code, 400)
        self.assertIn("code", duplicate.json()["errors"])

        listed = self.admin.get("/api/admin/discounts").json()
        self.assertEqual([d["code"] for d in listed], ["FALL20"])

    def test_percentage_bounds(self):
        resp = self.admin.post(
            "/api/admin/discounts", {"code": "HUGE", "discountPercentage": "150"}, format="json"
        )
        self.assertEqual(resp.status_code, 400)

    def test_update(self):
        discount = make_discount()
        resp = self.admin.put(
            f"/api/admin/discounts/{discount.pk}", {"isActive": False}, format="json"
        )
        self.assertEqual(resp.status_code, 200)
        discount.refresh_from_db()
        self.assertFalse(discount.is_active)

    def test_max_uses_cannot_drop_below_current_uses(self):
        discount = make_discount(max_uses=5, current_uses=3)
        url = f"/api/admin/discounts/{discount.pk}"

        resp = self.admin.put(url, {"maxUses": 1}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("maxUses", resp.json()["errors"])
        discount.refresh_from_db()
        self.assertEqual(discount.max_uses, 5)

        resp = self.admin.put(url, {"maxUses": 3}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["maxUses"], 3)

    def test_delete_blocked_once_used(self):
        discount = make_discount()
        registration_services.create_registration(
            make_user(),
            make_course().pk,
            child_info(years_ago(8)),
            EMERGENCY_CONTACT,
            True,
            False,
            discount_code_id=discount.pk,
        )
        resp = self.admin.delete(f"/api/admin/discounts/{discount.pk}")
        self.assertEqual(resp.status_code, 400)
        self.assertTrue(DiscountCode.objects.filter(pk=discount.pk).exists())

        self.assertEqual(self.admin.get("/api/admin/discounts").json()[0]["usageCount"], 1)

    def test_delete_unused(self):
        discount = make_discount()
        resp = self.admin.delete(f"/api/admin/discounts/{discount.pk}")
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(DiscountCode.objects.exists())
