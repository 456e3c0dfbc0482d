# robospark/api.py
"""
HTTP helpers shared by the API views.

Every error leaving the API has the shape ``{"message": ...}``.
Payload validation errors add an ``errors`` mapping, and unexpected
failures only expose their raw detail when ``DEBUG`` is enabled.
"""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import JsonResponse
from rest_framework import exceptions, permissions
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from .exceptions import DomainError

logger = logging.getLogger(__name__)


class IsAdmin(permissions.BasePermission):
    """Grant access to staff accounts only (the ``admin`` role)."""

    message = "Require Admin Role!"

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_staff)


def error_response(message: str, status: int, **extra) -> Response:
    data = {"message": message}
    data.update(extra)
    return Response(data, status=status)


def exception_handler(exc, context):
    """
    Convert exceptions raised by API views into JSON responses.

    Parameters
    ----------
    exc : Exception
        The exception raised by the view.
    context : dict
        DRF context (view, request, args, kwargs).

    Returns
    -------
    Response
        ``{"message": ...}`` with the matching status code.
    """
    if isinstance(exc, DomainError):
        set_rollback()
        return error_response(exc.message, exc.http_status)

    if isinstance(exc, DjangoValidationError):
        set_rollback()
        return error_response(" ".join(exc.messages), 400)

    response = drf_exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", type(view).__name__ if view else "API view")
        set_rollback()
        extra = {"error": str(exc)} if settings.DEBUG else {}
        return error_response("Internal Server Error", 500, **extra)

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"message": "Invalid payload", "errors": response.data}
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"message": str(response.data["detail"])}
    return response


def index(request):
    """Landing endpoint confirming the API is up."""
    return JsonResponse({"message": "Welcome to RoboSpark API"})
