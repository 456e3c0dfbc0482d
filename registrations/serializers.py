# registrations/serializers.py
"""
Serializers for registrations.
"""

from rest_framework import serializers

from accounts.serializers import UserSummarySerializer
from courses.serializers import CourseSerializer
from discounts.serializers import DiscountCodeSerializer

from .models import Registration


class RegistrationCreateSerializer(serializers.Serializer):
    """Checkout payload of ``POST /api/registrations``."""

    courseId = serializers.IntegerField()
    childFirstName = serializers.CharField(max_length=100)
    childLastName = serializers.CharField(max_length=100)
    childDateOfBirth = serializers.DateField()
    childGradeLevel = serializers.CharField(max_length=50)
    childAllergies = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    childSpecialNeeds = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    emergencyContactName = serializers.CharField(max_length=200)
    emergencyContactRelation = serializers.CharField(max_length=100)
    emergencyContactPhone = serializers.CharField(max_length=32)
    agreedToTerms = serializers.BooleanField(required=False, default=False)
    photoRelease = serializers.BooleanField(required=False, default=False)
    discountCodeId = serializers.IntegerField(required=False, allow_null=True)

    def to_service_kwargs(self) -> dict:
        """Arguments of :func:`registrations.services.create_registration`."""
        data = self.validated_data
        return {
            "course_id": data["courseId"],
            "child_info": {
                "first_name": data["childFirstName"],
                "last_name": data["childLastName"],
                "date_of_birth": data["childDateOfBirth"],
                "grade_level": data["childGradeLevel"],
                "allergies": data.get("childAllergies"),
                "special_needs": data.get("childSpecialNeeds"),
            },
            "emergency_contact": {
                "name": data["emergencyContactName"],
                "relation": data["emergencyContactRelation"],
                "phone": data["emergencyContactPhone"],
            },
            "agreed_to_terms": data["agreedToTerms"],
            "photo_release": data["photoRelease"],
            "discount_code_id": data.get("discountCodeId"),
        }


class RegistrationSerializer(serializers.ModelSerializer):
    """Registration joined with its course, instructor, discount code and owner."""

    userId = serializers.IntegerField(source="user_id", read_only=True)
    courseId = serializers.IntegerField(source="course_id", read_only=True)
    childFirstName = serializers.CharField(source="child_first_name")
    childLastName = serializers.CharField(source="child_last_name")
    childDateOfBirth = serializers.DateField(source="child_date_of_birth")
    childGradeLevel = serializers.CharField(source="child_grade_level")
    childAllergies = serializers.CharField(source="child_allergies")
    childSpecialNeeds = serializers.CharField(source="child_special_needs")
    emergencyContactName = serializers.CharField(source="emergency_contact_name")
    emergencyContactRelation = serializers.CharField(source="emergency_contact_relation")
    emergencyContactPhone = serializers.CharField(source="emergency_contact_phone")
    agreedToTerms = serializers.BooleanField(source="agreed_to_terms")
    photoRelease = serializers.BooleanField(source="photo_release")
    confirmationNumber = serializers.CharField(source="confirmation_number")
    paymentStatus = serializers.CharField(source="payment_status")
    amountPaid = serializers.DecimalField(source="amount_paid", max_digits=10, decimal_places=2)
    discountCodeId = serializers.IntegerField(source="discount_code_id", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
    course = CourseSerializer()
    user = UserSummarySerializer()
    discountCode = DiscountCodeSerializer(source="discount_code", allow_null=True)

    class Meta:
        model = Registration
        fields = [
            "id",
            "userId",
            "courseId",
            "childFirstName",
            "childLastName",
            "childDateOfBirth",
            "childGradeLevel",
            "childAllergies",
            "childSpecialNeeds",
            "emergencyContactName",
            "emergencyContactRelation",
            "emergencyContactPhone",
            "agreedToTerms",
            "photoRelease",
            "confirmationNumber",
            "paymentStatus",
            "amountPaid",
            "discountCodeId",
            "createdAt",
            "updatedAt",
            "course",
            "user",
            "discountCode",
        ]


class UserRegistrationSerializer(serializers.ModelSerializer):
    """Flattened row of the "my registrations" list."""

    courseId = serializers.IntegerField(source="course_id")
    childName = serializers.CharField(source="child_name")
    courseName = serializers.CharField(source="course.title")
    startDate = serializers.DateField(source="course.start_date")
    endDate = serializers.DateField(source="course.end_date")
    confirmationNumber = serializers.CharField(source="confirmation_number")
    status = serializers.CharField(source="payment_status")
    amountPaid = serializers.DecimalField(source="amount_paid", max_digits=10, decimal_places=2)

    class Meta:
        model = Registration
        fields = [
            "id",
            "courseId",
            "childName",
            "courseName",
            "startDate",
            "endDate",
            "confirmationNumber",
            "status",
            "amountPaid",
        ]
