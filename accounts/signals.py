# accounts/signals.py
"""
Signals for the accounts application.

Every account owns exactly one :class:`UserProfile`, created here when
the user row is inserted. Services then edit ``user.profile`` in place.
"""

from django.contrib.auth import get_user_model
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import UserProfile

User = get_user_model()


@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, raw=False, **kwargs):
    """
    Attach an empty contact profile to a newly inserted user.

    Parameters
    ----------
    sender : Model
        The user model.
    instance : User
        The saved user; its ``profile`` cache holds the new row.
    created : bool
        True when the user was just inserted.
    raw : bool
        True while loading fixtures, which bring their own profiles.
    """
    if created and not raw:
        UserProfile.objects.create(user=instance)
