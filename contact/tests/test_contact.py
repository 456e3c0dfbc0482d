"""
Test suite for the contact form and its back-office.
"""

from unittest.mock import patch

from django.core import mail
from django.test import TestCase, override_settings

from contact.models import ContactMessage
from robospark.testing import bearer_client, make_admin, make_user

PAYLOAD = {
    "name": "Jamie Doe",
    "email": "jamie@example.com",
    "subject": "Summer camp",
    "message": "Are there spots left in July?",
}


@override_settings(ADMIN_EMAIL="office@robospark.test")
class ContactFormTests(TestCase):
    def setUp(self):
        self.client = bearer_client()

    def test_submit(self):
        with self.captureOnCommitCallbacks(execute=True):
            resp = self.client.post("/api/contact", PAYLOAD, format="json")

        self.assertEqual(resp.status_code, 201)
        contact = ContactMessage.objects.get()
        self.assertEqual(resp.json()["contactId"], contact.pk)
        self.assertEqual(contact.status, ContactMessage.Status.UNREAD)
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["office@robospark.test"])
        self.assertIn("Phone: Not provided", mail.outbox[0].body)

    def test_status_cannot_be_set_by_the_public(self):
        self.client.post("/api/contact", dict(PAYLOAD, status="replied"), format="json")
        self.assertEqual(ContactMessage.objects.get().status, ContactMessage.Status.UNREAD)

    def test_mail_failure_does_not_fail_the_request(self):
        with patch("contact.services.send_mail", side_effect=OSError("smtp down")):
            with self.captureOnCommitCallbacks(execute=True):
                resp = self.client.post("/api/contact", PAYLOAD, format="json")
        self.assertEqual(resp.status_code, 201)
        self.assertTrue(ContactMessage.objects.exists())

    def test_missing_fields(self):
        resp = self.client.post("/api/contact", {"name": "Jamie"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(set(resp.json()["errors"]), {"email", "subject", "message"})


class AdminContactTests(TestCase):
    def setUp(self):
        self.admin = bearer_client(make_admin())
        self.contact = ContactMessage.objects.create(**PAYLOAD)

    def test_non_admin_is_forbidden(self):
        self.assertEqual(bearer_client(make_user()).get("/api/admin/contact-messages").status_code, 403)

    def test_list_update_delete(self):
        listed = self.admin.get("/api/admin/contact-messages").json()
        self.assertEqual([m["id"] for m in listed], [self.contact.pk])

        url = f"/api/admin/contact-messages/{self.contact.pk}"
        updated = self.admin.put(url, {"status": "read"}, format="json")
        self.assertEqual(updated.json()["status"], "read")

        self.assertEqual(self.admin.put(url, {"status": "archived"}, format="json").status_code, 400)

        self.assertEqual(self.admin.delete(url).status_code, 200)
        self.assertEqual(self.admin.delete(url).status_code, 404)
