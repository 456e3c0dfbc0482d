# courses/views.py
"""
Public catalogue endpoints.
"""

from rest_framework import serializers
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import CourseDetailSerializer, CourseSerializer


class CourseFilterSerializer(serializers.Serializer):
    """Query string of ``GET /api/courses``."""

    search = serializers.CharField(required=False, allow_blank=True)
    age = serializers.IntegerField(required=False, min_value=0)
    skillLevel = serializers.CharField(source="skill_level", required=False, allow_blank=True)
    featured = serializers.BooleanField(required=False, allow_null=True, default=None)
    sort = serializers.CharField(required=False, allow_blank=True)


class CourseListView(APIView):
    """Handler for GET /api/courses"""

    permission_classes = (AllowAny,)

    def get(self, request):
        filters = CourseFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        courses = services.filter_courses(
            services.courses_with_enrollment(), **filters.validated_data
        )
        return Response(CourseSerializer(courses, many=True).data)


class CourseDetailView(APIView):
    """Handler for GET /api/courses/<pk>"""

    permission_classes = (AllowAny,)

    def get(self, request, pk):
        return Response(CourseDetailSerializer(services.get_course(pk)).data)
