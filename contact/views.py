# contact/views.py
"""
Public contact form and its back-office (staff only) counterpart.
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from robospark.api import IsAdmin

from . import services
from .models import ContactMessage
from .serializers import ContactMessageSerializer, ContactStatusSerializer


class ContactView(APIView):
    """Handler for POST /api/contact"""

    permission_classes = (AllowAny,)

    def post(self, request):
        serializer = ContactMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contact = services.submit_message(serializer.validated_data)
        return Response(
            {
                "message": "Your message has been sent successfully. We will get back to you soon!",
                "contactId": contact.pk,
            },
            status=status.HTTP_201_CREATED,
        )


class AdminContactMessageListView(APIView):
    """Handler for GET /api/admin/contact-messages"""

    permission_classes = (IsAdmin,)

    def get(self, request):
        messages = ContactMessage.objects.order_by("-created_at")
        return Response(ContactMessageSerializer(messages, many=True).data)


class AdminContactMessageDetailView(APIView):
    """Handler for PUT/DELETE /api/admin/contact-messages/<pk>"""

    permission_classes = (IsAdmin,)

    def put(self, request, pk):
        contact = services.get_message(pk)
        serializer = ContactStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.set_status(contact, serializer.validated_data["status"])
        return Response(ContactMessageSerializer(contact).data)

    def delete(self, request, pk):
        services.get_message(pk).delete()
        return Response({"message": "Contact message deleted successfully"})
