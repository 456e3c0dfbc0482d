# courses/serializers.py
"""
Serializers for courses and instructors.

Read serializers expose the camelCase catalogue contract; the write
serializers back the admin endpoints and enforce the age and price
windows of :meth:`courses.models.Course.clean`.
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from .models import Course, Instructor

# Model field name -> API field name, used to report clean() errors.
COURSE_API_NAMES = {
    "min_age": "minAge",
    "max_age": "maxAge",
    "price": "price",
    "discounted_price": "discountedPrice",
    "start_date": "startDate",
    "end_date": "endDate",
}


class InstructorSerializer(serializers.ModelSerializer):
    imageUrl = serializers.CharField(source="image_url", required=False, allow_blank=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Instructor
        fields = ["id", "name", "bio", "imageUrl", "createdAt"]
        extra_kwargs = {"bio": {"required": False, "allow_blank": True}}


class AdminInstructorSerializer(InstructorSerializer):
    courseCount = serializers.IntegerField(source="course_count", read_only=True)

    class Meta(InstructorSerializer.Meta):
        fields = InstructorSerializer.Meta.fields + ["courseCount"]


class CourseSerializer(serializers.ModelSerializer):
    """
    Course with its instructor, as listed in the catalogue.

    Also used for writes: ``instructorId`` selects the instructor and
    the nested ``instructor`` object is read-only.
    """

    longDescription = serializers.CharField(source="long_description", required=False, allow_blank=True)
    minAge = serializers.IntegerField(source="min_age", min_value=0)
    maxAge = serializers.IntegerField(source="max_age", min_value=0)
    skillLevel = serializers.ChoiceField(
        source="skill_level", choices=Course.SkillLevel.choices, required=False
    )
    topics = serializers.ListField(child=serializers.CharField(), required=False)
    days = serializers.ListField(child=serializers.CharField(), required=False)
    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")
    timeSlot = serializers.CharField(source="time_slot")
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    discountedPrice = serializers.DecimalField(
        source="discounted_price",
        max_digits=10,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True,
    )
    capacity = serializers.IntegerField(min_value=1)
    instructorId = serializers.PrimaryKeyRelatedField(
        source="instructor",
        queryset=Instructor.objects.all(),
        required=False,
        allow_null=True,
    )
    instructor = InstructorSerializer(read_only=True)
    imageUrl = serializers.CharField(source="image_url", required=False, allow_blank=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Course
        fields = [
            "id",
            "title",
            "description",
            "longDescription",
            "minAge",
            "maxAge",
            "skillLevel",
            "topics",
            "duration",
            "startDate",
            "endDate",
            "days",
            "timeSlot",
            "price",
            "discountedPrice",
            "capacity",
            "instructorId",
            "instructor",
            "imageUrl",
            "featured",
            "createdAt",
            "updatedAt",
        ]

    def validate(self, attrs):
        values = {
            field: attrs.get(field, getattr(self.instance, field, None))
            for field in COURSE_API_NAMES
        }
        try:
            Course(**values).clean()
        except DjangoValidationError as exc:
            raise serializers.ValidationError(
                {COURSE_API_NAMES.get(k, k): v for k, v in exc.message_dict.items()}
            )
        return attrs


class CourseDetailSerializer(CourseSerializer):
    """Course with ``enrolledCount``; needs a queryset from ``courses_with_enrollment``."""

    enrolledCount = serializers.IntegerField(source="enrolled_count", read_only=True)

    class Meta(CourseSerializer.Meta):
        fields = CourseSerializer.Meta.fields + ["enrolledCount"]
