# discounts/serializers.py
from rest_framework import serializers

from .models import DiscountCode
from .services import normalize_code


class DiscountCodeSerializer(serializers.ModelSerializer):
    """Discount code as embedded in registrations and managed by admins."""

    code = serializers.CharField(max_length=50)
    discountPercentage = serializers.DecimalField(
        source="discount_percentage", max_digits=5, decimal_places=2, min_value=0, max_value=100
    )
    isActive = serializers.BooleanField(source="is_active", required=False)
    maxUses = serializers.IntegerField(source="max_uses", min_value=1, required=False, allow_null=True)
    currentUses = serializers.IntegerField(source="current_uses", read_only=True)
    startDate = serializers.DateField(source="start_date", required=False, allow_null=True)
    endDate = serializers.DateField(source="end_date", required=False, allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = DiscountCode
        fields = [
            "id",
            "code",
            "description",
            "discountPercentage",
            "isActive",
            "maxUses",
            "currentUses",
            "startDate",
            "endDate",
            "createdAt",
        ]
        extra_kwargs = {"description": {"required": False, "allow_blank": True}}

    def validate_code(self, value):
        code = normalize_code(value)
        if not code:
            raise serializers.ValidationError("This field may not be blank.")
        taken = DiscountCode.objects.filter(code=code)
        if self.instance is not None:
            taken = taken.exclude(pk=self.instance.pk)
        if taken.exists():
            raise serializers.ValidationError("Discount code already exists.")
        return code

    def validate(self, attrs):
        start = attrs.get("start_date", getattr(self.instance, "start_date", None))
        end = attrs.get("end_date", getattr(self.instance, "end_date", None))
        if start and end and start > end:
            raise serializers.ValidationError({"endDate": "End date must not be before start date."})
        max_uses = attrs.get("max_uses")
        current_uses = getattr(self.instance, "current_uses", 0)
        if max_uses is not None and max_uses < current_uses:
            raise serializers.ValidationError(
                {"maxUses": f"Max uses cannot be lower than the {current_uses} uses already made."}
            )
        return attrs


class AdminDiscountCodeSerializer(DiscountCodeSerializer):
    usageCount = serializers.IntegerField(source="usage_count", read_only=True)

    class Meta(DiscountCodeSerializer.Meta):
        fields = DiscountCodeSerializer.Meta.fields + ["usageCount"]


class ValidateDiscountSerializer(serializers.Serializer):
    code = serializers.CharField(
        error_messages={
            "required": "Discount code is required",
            "blank": "Discount code is required",
        }
    )
