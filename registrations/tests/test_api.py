"""
Test suite for the registration HTTP endpoints, customer and staff side.
"""

from decimal import Decimal
from unittest.mock import patch

from django.test import TestCase, override_settings

from registrations import services
from registrations.models import Registration
from robospark.testing import (
    EMERGENCY_CONTACT,
    bearer_client,
    child_info,
    make_admin,
    make_course,
    make_discount,
    make_user,
    registration_payload,
    years_ago,
)


class RegistrationEndpointTests(TestCase):
    def setUp(self):
        self.user = make_user()
        self.course = make_course(capacity=1)
        self.client = bearer_client(self.user)

    def test_create_returns_joined_registration(self):
        resp = self.client.post("/api/registrations", registration_payload(self.course), format="json")

        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertEqual(data["amountPaid"], "250.00")
        self.assertEqual(data["paymentStatus"], "completed")
        self.assertEqual(data["courseId"], self.course.pk)
        self.assertEqual(data["course"]["instructor"]["name"], "Dr. Emily Chen")
        self.assertEqual(
            data["user"],
            {"id": self.user.pk, "firstName": "Pat", "lastName": "Parent", "email": self.user.email},
        )
        self.assertIsNone(data["discountCode"])
        self.assertTrue(data["confirmationNumber"].startswith("RS-"))

    def test_create_with_discount(self):
        discount = make_discount()
        resp = self.client.post(
            "/api/registrations",
            registration_payload(self.course, discountCodeId=discount.pk),
            format="json",
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["amountPaid"], "225.00")
        self.assertEqual(resp.json()["discountCode"]["code"], "SIBLING10")

    def test_requires_authentication(self):
        resp = bearer_client().post("/api/registrations", registration_payload(self.course), format="json")
        self.assertEqual(resp.status_code, 401)

    def test_business_failures_are_bad_requests(self):
        self.client.post("/api/registrations", registration_payload(self.course), format="json")

        full = self.client.post("/api/registrations", registration_payload(self.course), format="json")
        self.assertEqual(full.status_code, 400)
        self.assertEqual(full.json(), {"message": "Course is full"})

        missing = self.client.post(
            "/api/registrations", registration_payload(self.course, courseId=999999), format="json"
        )
        self.assertEqual(missing.status_code, 400)
        self.assertEqual(missing.json(), {"message": "Course not found"})

    def test_age_message_names_the_range(self):
        resp = self.client.post(
            "/api/registrations",
            registration_payload(self.course, years_ago(6)),
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(
            resp.json()["message"],
            "Child's age must be between 7 and 10 years for this course",
        )

    def test_invalid_payload(self):
        payload = registration_payload(self.course)
        del payload["childFirstName"]
        resp = self.client.post("/api/registrations", payload, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Invalid payload")
        self.assertIn("childFirstName", resp.json()["errors"])

    @override_settings(DEBUG=False)
    def test_unexpected_error_hides_detail(self):
        with patch.object(services, "create_registration", side_effect=RuntimeError("db went away")):
            with self.assertLogs("robospark.api", level="ERROR"):
                resp = self.client.post("/api/registrations", registration_payload(self.course), format="json")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Internal Server Error"})
        self.assertFalse(Registration.objects.exists())

    @override_settings(DEBUG=True)
    def test_unexpected_error_detail_in_debug(self):
        with patch.object(services, "create_registration", side_effect=RuntimeError("db went away")):
            with self.assertLogs("robospark.api", level="ERROR"):
                resp = self.client.post("/api/registrations", registration_payload(self.course), format="json")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Internal Server Error", "error": "db went away"})


class OwnedRegistrationTests(TestCase):
    def setUp(self):
        self.user = make_user()
        self.course = make_course()
        self.registration = services.create_registration(
            self.user, self.course.pk, child_info(years_ago(8)), EMERGENCY_CONTACT, True, True
        )
        self.client = bearer_client(self.user)
        self.stranger = bearer_client(make_user("stranger@example.com"))

    def test_detail(self):
        resp = self.client.get(f"/api/registrations/{self.registration.pk}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["confirmationNumber"], self.registration.confirmation_number)

        self.assertEqual(self.stranger.get(f"/api/registrations/{self.registration.pk}").status_code, 404)

    def test_cancel(self):
        url = f"/api/registrations/{self.registration.pk}/cancel"

        self.assertEqual(self.stranger.post(url).status_code, 404)

        resp = self.client.post(url)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {
                "id": self.registration.pk,
                "status": "refunded",
                "message": "Registration canceled successfully",
            },
        )

        again = self.client.post(url)
        self.assertEqual(again.status_code, 400)
        self.assertEqual(again.json(), {"message": "Registration is already canceled"})

    def test_receipt_pdf(self):
        resp = self.client.get(f"/api/registrations/{self.registration.pk}/receipt")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp["Content-Type"], "application/pdf")
        self.assertTrue(resp.content.startswith(b"%PDF"))

        self.assertEqual(
            self.stranger.get(f"/api/registrations/{self.registration.pk}/receipt").status_code, 404
        )

    def test_my_registrations(self):
        resp = self.client.get("/api/users/registrations")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            [
                {
                    "id": self.registration.pk,
                    "courseId": self.course.pk,
                    "childName": "Sam Parent",
                    "courseName": self.course.title,
                    "startDate": self.course.start_date.isoformat(),
                    "endDate": self.course.end_date.isoformat(),
                    "confirmationNumber": self.registration.confirmation_number,
                    "status": "completed",
                    "amountPaid": "250.00",
                }
            ],
        )
        self.assertEqual(self.stranger.get("/api/users/registrations").json(), [])


class AdminRegistrationTests(TestCase):
    def setUp(self):
        self.admin = bearer_client(make_admin())
        self.user = make_user()
        self.course = make_course()
        self.other_course = make_course(title="Drones", price=Decimal("100.00"), discounted_price=None)
        self.first = services.create_registration(
            self.user, self.course.pk, child_info(years_ago(8)), EMERGENCY_CONTACT, True, False
        )
        self.second = services.create_registration(
            self.user, self.other_course.pk, child_info(years_ago(9)), EMERGENCY_CONTACT, True, False
        )
        services.cancel_registration(self.second.pk)

    def test_non_admin_is_forbidden(self):
        resp = bearer_client(self.user).get("/api/admin/registrations")
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"message": "Require Admin Role!"})

    def test_list_filters(self):
        self.assertEqual(len(self.admin.get("/api/admin/registrations").json()), 2)

        refunded = self.admin.get("/api/admin/registrations", {"status": "refunded"}).json()
        self.assertEqual([r["id"] for r in refunded], [self.second.pk])

        by_course = self.admin.get("/api/admin/registrations", {"course": self.course.pk}).json()
        self.assertEqual([r["id"] for r in by_course], [self.first.pk])

    def test_detail_and_cancel(self):
        resp = self.admin.get(f"/api/admin/registrations/{self.first.pk}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["user"]["email"], self.user.email)

        cancel = self.admin.post(f"/api/admin/registrations/{self.first.pk}/cancel")
        self.assertEqual(cancel.status_code, 200)
        self.first.refresh_from_db()
        self.assertEqual(self.first.payment_status, Registration.PaymentStatus.REFUNDED)

    def test_dashboard_stats(self):
        resp = self.admin.get("/api/admin/dashboard/stats")
        self.assertEqual(resp.status_code, 200)
        stats = resp.json()
        self.assertEqual(stats["totalUsers"], 1)
        self.assertEqual(stats["totalCourses"], 2)
        self.assertEqual(stats["activeCourses"], 2)
        self.assertEqual(stats["totalRegistrations"], 2)
        self.assertEqual(stats["newRegistrationsThisWeek"], 2)
        self.assertEqual(stats["totalRevenue"], "250.00")
        self.assertEqual(stats["revenueThisMonth"], "250.00")
        self.assertEqual(len(stats["revenueByMonth"]), 6)
        self.assertEqual(stats["revenueByMonth"][-1]["amount"], "250.00")
        enrollments = {row["courseName"]: row["count"] for row in stats["enrollmentsByCourse"]}
        self.assertEqual(enrollments, {self.course.title: 1, "Drones": 0})
        self.assertEqual(len(stats["recentRegistrations"]), 2)
