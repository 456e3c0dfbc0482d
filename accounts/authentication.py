# accounts/authentication.py
"""
DRF authentication backed by the JWT bearer tokens of
:mod:`accounts.tokens`.
"""

import logging

from django.contrib.auth import get_user_model
from rest_framework import authentication, exceptions

from .tokens import TokenError, decode_token, subject_id

logger = logging.getLogger(__name__)

User = get_user_model()


class BearerTokenAuthentication(authentication.BaseAuthentication):
    """
    Authenticate ``Authorization: Bearer <token>`` requests.

    Requests without the header are left anonymous so that public
    endpoints keep working; protected views then answer 401 through
    their permission classes.
    """

    keyword = "Bearer"

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword.lower().encode():
            return None
        if len(header) != 2:
            raise exceptions.AuthenticationFailed("No token provided")

        try:
            payload = decode_token(header[1].decode())
            user_id = subject_id(payload)
        except (TokenError, UnicodeError) as exc:
            logger.info("Rejected bearer token: %s", exc)
            raise exceptions.AuthenticationFailed("Unauthorized")

        user = User.objects.filter(pk=user_id).first()
        if user is None or not user.is_active:
            raise exceptions.AuthenticationFailed("Unauthorized")
        return user, payload

    def authenticate_header(self, request):
        return self.keyword
