# registrations/views.py
"""
Registration endpoints of the customer area.
"""

from django.http import HttpResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from robospark.api import error_response
from robospark.exceptions import DomainError

from . import services
from .pdf import render_receipt_pdf
from .serializers import (
    RegistrationCreateSerializer,
    RegistrationSerializer,
    UserRegistrationSerializer,
)


class RegistrationCreateView(APIView):
    """Handler for POST /api/registrations"""

    def post(self, request):
        serializer = RegistrationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            registration = services.create_registration(request.user, **serializer.to_service_kwargs())
        except DomainError as exc:
            # Every booking failure, unknown course included, is a bad request.
            return error_response(exc.message, status.HTTP_400_BAD_REQUEST)
        return Response(RegistrationSerializer(registration).data, status=status.HTTP_201_CREATED)


class RegistrationDetailView(APIView):
    """Handler for GET /api/registrations/<pk>"""

    def get(self, request, pk):
        registration = services.get_registration(pk, owner=request.user)
        return Response(RegistrationSerializer(registration).data)


class RegistrationCancelView(APIView):
    """Handler for POST /api/registrations/<pk>/cancel"""

    def post(self, request, pk):
        registration = services.cancel_registration(pk, owner=request.user)
        return Response(
            {
                "id": registration.pk,
                "status": registration.payment_status,
                "message": "Registration canceled successfully",
            }
        )


class RegistrationReceiptView(APIView):
    """Handler for GET /api/registrations/<pk>/receipt"""

    def get(self, request, pk):
        registration = services.get_registration(pk, owner=request.user)
        response = HttpResponse(render_receipt_pdf(registration), content_type="application/pdf")
        response["Content-Disposition"] = (
            f'attachment; filename="receipt-{registration.confirmation_number}.pdf"'
        )
        return response


class UserRegistrationListView(APIView):
    """Handler for GET /api/users/registrations"""

    def get(self, request):
        registrations = (
            request.user.registrations.select_related("course").order_by("-created_at")
        )
        return Response(UserRegistrationSerializer(registrations, many=True).data)
