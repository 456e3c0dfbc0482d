# accounts/views.py
"""
Authentication and self-service profile endpoints.
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import (
    ChangePasswordSerializer,
    LoginSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
    ResetPasswordRequestSerializer,
    ResetPasswordSerializer,
    UserSerializer,
)
from .tokens import create_access_token


def _auth_payload(user) -> dict:
    return {"user": UserSerializer(user).data, "token": create_access_token(user)}


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    permission_classes = (AllowAny,)

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.register_user(**serializer.validated_data)
        payload = {"message": "User registered successfully"}
        payload.update(_auth_payload(user))
        return Response(payload, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    permission_classes = (AllowAny,)
    require_admin = False

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.authenticate_credentials(
            serializer.validated_data["email"],
            serializer.validated_data["password"],
            require_admin=self.require_admin,
        )
        return Response(_auth_payload(user))


class AdminLoginView(LoginView):
    """Handler for POST /api/auth/admin/login"""

    require_admin = True


class ProfileView(APIView):
    """Handler for GET /api/auth/profile and PUT /api/users/profile"""

    def get(self, request):
        return Response(UserSerializer(request.user).data)

    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = services.update_profile(request.user, serializer.validated_data)
        return Response(UserSerializer(user).data)


class ChangePasswordView(APIView):
    """Handler for PUT /api/auth/change-password"""

    def put(self, request):
        serializer = ChangePasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.change_password(request.user, **serializer.validated_data)
        return Response({"message": "Password changed successfully"})


class ResetPasswordRequestView(APIView):
    """Handler for POST /api/auth/reset-password-request"""

    permission_classes = (AllowAny,)

    def post(self, request):
        serializer = ResetPasswordRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.request_password_reset(serializer.validated_data["email"])
        return Response(
            {
                "message": "If an account with that email exists, "
                "a password reset link has been sent."
            }
        )


class ResetPasswordView(APIView):
    """Handler for POST /api/auth/reset-password"""

    permission_classes = (AllowAny,)

    def post(self, request):
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.reset_password(**serializer.validated_data)
        return Response({"message": "Password has been reset successfully"})
