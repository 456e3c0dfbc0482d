# accounts/views_admin.py
"""
Back-office user management (staff only).
"""

from django.contrib.auth import get_user_model
from django.db.models import Count
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from registrations.serializers import RegistrationSerializer
from robospark.api import IsAdmin

from . import services
from .serializers import AdminUserSerializer, AdminUserWriteSerializer, UserSerializer

User = get_user_model()


class AdminUserListView(APIView):
    """Handler for GET/POST /api/admin/users"""

    permission_classes = (IsAdmin,)

    def get(self, request):
        users = (
            User.objects.select_related("profile")
            .annotate(registration_count=Count("registrations"))
            .order_by("-date_joined")
        )
        return Response(AdminUserSerializer(users, many=True).data)

    def post(self, request):
        serializer = AdminUserWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.create_user(serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class AdminUserDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/admin/users/<pk>"""

    permission_classes = (IsAdmin,)

    def _payload(self, user) -> dict:
        data = UserSerializer(user).data
        registrations = user.registrations.select_related(
            "course__instructor", "discount_code", "user"
        )
        data["registrations"] = RegistrationSerializer(registrations, many=True).data
        return data

    def get(self, request, pk):
        return Response(self._payload(services.get_user(pk)))

    def put(self, request, pk):
        user = services.get_user(pk)
        serializer = AdminUserWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        services.update_user(user, serializer.validated_data)
        return Response(self._payload(services.get_user(pk)))

    def delete(self, request, pk):
        services.delete_user(services.get_user(pk))
        return Response({"message": "User deleted successfully"})
