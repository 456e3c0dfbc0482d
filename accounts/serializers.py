# accounts/serializers.py
"""
Serializers for account payloads.

Field names follow the camelCase JSON contract of the client
application; ``source`` maps them onto the snake_case model fields.
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers

from .models import ROLE_ADMIN, ROLE_USER, role_of

User = get_user_model()


class UserSummarySerializer(serializers.ModelSerializer):
    """Minimal user projection embedded in registrations."""

    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")

    class Meta:
        model = User
        fields = ["id", "firstName", "lastName", "email"]


class UserSerializer(UserSummarySerializer):
    """Full user profile."""

    phone = serializers.CharField(source="profile.phone", read_only=True)
    address = serializers.CharField(source="profile.address", read_only=True)
    city = serializers.CharField(source="profile.city", read_only=True)
    state = serializers.CharField(source="profile.state", read_only=True)
    zipCode = serializers.CharField(source="profile.zip_code", read_only=True)
    role = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta(UserSummarySerializer.Meta):
        fields = UserSummarySerializer.Meta.fields + [
            "phone",
            "address",
            "city",
            "state",
            "zipCode",
            "role",
            "createdAt",
        ]

    def get_role(self, obj) -> str:
        return role_of(obj)


class AdminUserSerializer(UserSerializer):
    """User row of the admin list, with its registration count."""

    registrations = serializers.IntegerField(source="registration_count", read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ["registrations"]


class RegisterSerializer(serializers.Serializer):
    firstName = serializers.CharField(source="first_name", max_length=150)
    lastName = serializers.CharField(source="last_name", max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    phone = serializers.CharField(max_length=32, required=False, allow_blank=True, allow_null=True)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class ProfileUpdateSerializer(serializers.Serializer):
    firstName = serializers.CharField(source="first_name", max_length=150, required=False, allow_blank=True)
    lastName = serializers.CharField(source="last_name", max_length=150, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=32, required=False, allow_blank=True, allow_null=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    state = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    zipCode = serializers.CharField(
        source="zip_code", max_length=20, required=False, allow_blank=True, allow_null=True
    )


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(source="current_password")
    newPassword = serializers.CharField(source="new_password")


class ResetPasswordRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()


class ResetPasswordSerializer(serializers.Serializer):
    uid = serializers.CharField()
    token = serializers.CharField()
    newPassword = serializers.CharField(source="new_password")


class AdminUserWriteSerializer(ProfileUpdateSerializer):
    """
    Payload of the admin create/update user endpoints.

    ``email``, names and ``password`` are required on creation only;
    pass ``partial=True`` when updating.
    """

    firstName = serializers.CharField(source="first_name", max_length=150)
    lastName = serializers.CharField(source="last_name", max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    role = serializers.ChoiceField(choices=[ROLE_USER, ROLE_ADMIN], default=ROLE_USER)
