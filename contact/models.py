# contact/models.py
"""
Database models for the contact application.
"""

from django.db import models


class ContactMessage(models.Model):
    """
    Message left through the public contact form.

    Attributes
    ----------
    name, email, phone : CharField / EmailField
        Who wrote; the phone number is optional.
    subject, message : CharField / TextField
        What they wrote.
    status : CharField
        Triage state, one of :class:`ContactMessage.Status`.
    created_at : DateTimeField
        Reception timestamp.
    """

    class Status(models.TextChoices):
        UNREAD = "unread", "Unread"
        READ = "read", "Read"
        REPLIED = "replied", "Replied"

    name = models.CharField("Name", max_length=200)
    email = models.EmailField("Email")
    phone = models.CharField("Phone", max_length=32, blank=True)
    subject = models.CharField("Subject", max_length=200)
    message = models.TextField("Message")
    status = models.CharField(
        "Status", max_length=16, choices=Status.choices, default=Status.UNREAD
    )
    created_at = models.DateTimeField("Created at", auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.subject} ({self.email})"
