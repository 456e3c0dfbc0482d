# contact/serializers.py
from rest_framework import serializers

from .models import ContactMessage


class ContactMessageSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = ContactMessage
        fields = ["id", "name", "email", "phone", "subject", "message", "status", "createdAt"]
        read_only_fields = ["status"]
        extra_kwargs = {"phone": {"required": False, "allow_blank": True, "allow_null": True}}


class ContactStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ContactMessage.Status.choices)
