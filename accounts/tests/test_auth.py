"""
Test suite for sign-up, login and self-service account endpoints.
"""

import re

from django.contrib.auth import get_user_model
from django.contrib.auth.tokens import default_token_generator
from django.core import mail
from django.test import TestCase, override_settings
from django.utils.encoding import force_bytes
from django.utils.http import urlsafe_base64_encode

from accounts import services
from accounts.models import UserProfile
from accounts.tokens import decode_token
from robospark.testing import PASSWORD, bearer_client, make_admin, make_user

User = get_user_model()


class RegisterTests(TestCase):
    def setUp(self):
        self.client = bearer_client()
        self.payload = {
            "firstName": "Pat",
            "lastName": "Parent",
            "email": "Pat@Example.com",
            "password": PASSWORD,
            "phone": "555-0101",
        }

    def test_register(self):
        resp = self.client.post("/api/auth/register", self.payload, format="json")

        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertEqual(data["message"], "User registered successfully")
        self.assertEqual(data["user"]["email"], "pat@example.com")
        self.assertEqual(data["user"]["role"], "user")
        self.assertEqual(data["user"]["phone"], "555-0101")
        self.assertEqual(int(decode_token(data["token"])["sub"]), data["user"]["id"])

    def test_register_keeps_a_single_profile(self):
        user = services.register_user(
            email="pat@example.com", password=PASSWORD, first_name="Pat", last_name="Parent", phone="555-0101"
        )
        self.assertEqual(user.profile.phone, "555-0101")
        self.assertEqual(UserProfile.objects.filter(user=user).count(), 1)
        self.assertEqual(UserProfile.objects.get(user=user).phone, "555-0101")

    def test_email_in_use(self):
        make_user("pat@example.com")
        resp = self.client.post("/api/auth/register", self.payload, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "Email is already in use"})

    def test_weak_password(self):
        resp = self.client.post(
            "/api/auth/register", dict(self.payload, password="123"), format="json"
        )
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(User.objects.exists())


class LoginTests(TestCase):
    def setUp(self):
        self.client = bearer_client()
        self.user = make_user()
        self.admin = make_admin()

    def test_login(self):
        resp = self.client.post(
            "/api/auth/login", {"email": "PARENT@example.com", "password": PASSWORD}, format="json"
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["user"]["id"], self.user.pk)
        self.assertIn("token", resp.json())

    def test_wrong_password(self):
        resp = self.client.post(
            "/api/auth/login", {"email": self.user.email, "password": "nope"}, format="json"
        )
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"message": "Invalid email or password"})

    def test_admin_login(self):
        ok = self.client.post(
            "/api/auth/admin/login", {"email": self.admin.email, "password": PASSWORD}, format="json"
        )
        self.assertEqual(ok.status_code, 200)
        self.assertEqual(ok.json()["user"]["role"], "admin")

        denied = self.client.post(
            "/api/auth/admin/login", {"email": self.user.email, "password": PASSWORD}, format="json"
        )
        self.assertEqual(denied.status_code, 403)
        self.assertEqual(denied.json(), {"message": "Require Admin Role!"})


class ProfileTests(TestCase):
    def setUp(self):
        self.user = make_user()
        self.client = bearer_client(self.user)

    def test_profile_requires_token(self):
        self.assertEqual(bearer_client().get("/api/auth/profile").status_code, 401)

    def test_get_and_update_profile(self):
        resp = self.client.put(
            "/api/users/profile",
            {"firstName": "Robin", "city": "Boston", "zipCode": "02110"},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["firstName"], "Robin")
        self.assertEqual(resp.json()["lastName"], "Parent")

        profile = self.client.get("/api/auth/profile").json()
        self.assertEqual(profile["city"], "Boston")
        self.assertEqual(profile["zipCode"], "02110")

    def test_change_password(self):
        wrong = self.client.put(
            "/api/auth/change-password",
            {"currentPassword": "nope", "newPassword": "Another-Robot-99"},
            format="json",
        )
        self.assertEqual(wrong.status_code, 400)
        self.assertEqual(wrong.json(), {"message": "Current password is incorrect"})

        ok = self.client.put(
            "/api/auth/change-password",
            {"currentPassword": PASSWORD, "newPassword": "Another-Robot-99"},
            format="json",
        )
        self.assertEqual(ok.status_code, 200)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("Another-Robot-99"))


@override_settings(FRONTEND_URL="https://robospark.test")
class PasswordResetTests(TestCase):
    def setUp(self):
        self.client = bearer_client()
        self.user = make_user()

    def test_request_sends_link(self):
        resp = self.client.post(
            "/api/auth/reset-password-request", {"email": self.user.email}, format="json"
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(mail.outbox), 1)
        self.assertTrue(
            re.search(r"https://robospark\.test/reset-password/[\w-]+/[\w-]+", mail.outbox[0].body)
        )

    def test_request_for_unknown_email_looks_the_same(self):
        resp = self.client.post(
            "/api/auth/reset-password-request", {"email": "ghost@example.com"}, format="json"
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(mail.outbox, [])

    def test_reset(self):
        uid = urlsafe_base64_encode(force_bytes(self.user.pk))
        token = default_token_generator.make_token(self.user)

        resp = self.client.post(
            "/api/auth/reset-password",
            {"uid": uid, "token": token, "newPassword": "Fresh-Robot-77"},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("Fresh-Robot-77"))

        reused = self.client.post(
            "/api/auth/reset-password",
            {"uid": uid, "token": token, "newPassword": "Other-Robot-55"},
            format="json",
        )
        self.assertEqual(reused.status_code, 400)
