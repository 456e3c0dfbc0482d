# courses/views_admin.py
"""
Back-office management of courses and instructors (staff only).
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from robospark.api import IsAdmin

from . import services
from .serializers import AdminInstructorSerializer, CourseDetailSerializer

logger = logging.getLogger(__name__)


class AdminCourseListView(APIView):
    """Handler for GET/POST /api/admin/courses"""

    permission_classes = (IsAdmin,)

    def get(self, request):
        courses = services.courses_with_enrollment().order_by("-created_at")
        return Response(CourseDetailSerializer(courses, many=True).data)

    def post(self, request):
        serializer = CourseDetailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        course = serializer.save()
        logger.info("Course created course=%s", course.pk)
        return Response(
            CourseDetailSerializer(services.get_course(course.pk)).data,
            status=status.HTTP_201_CREATED,
        )


class AdminCourseDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/admin/courses/<pk>"""

    permission_classes = (IsAdmin,)

    def get(self, request, pk):
        return Response(CourseDetailSerializer(services.get_course(pk)).data)

    def put(self, request, pk):
        course = services.get_course(pk)
        serializer = CourseDetailSerializer(course, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Course updated course=%s", course.pk)
        return Response(CourseDetailSerializer(services.get_course(pk)).data)

    def delete(self, request, pk):
        services.delete_course(services.get_course(pk))
        return Response({"message": "Course deleted successfully"})


class AdminInstructorListView(APIView):
    """Handler for GET/POST /api/admin/instructors"""

    permission_classes = (IsAdmin,)

    def get(self, request):
        instructors = services.instructors_with_course_count()
        return Response(AdminInstructorSerializer(instructors, many=True).data)

    def post(self, request):
        serializer = AdminInstructorSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instructor = serializer.save()
        logger.info("Instructor created instructor=%s", instructor.pk)
        return Response(
            AdminInstructorSerializer(services.get_instructor(instructor.pk)).data,
            status=status.HTTP_201_CREATED,
        )


class AdminInstructorDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/admin/instructors/<pk>"""

    permission_classes = (IsAdmin,)

    def get(self, request, pk):
        return Response(AdminInstructorSerializer(services.get_instructor(pk)).data)

    def put(self, request, pk):
        instructor = services.get_instructor(pk)
        serializer = AdminInstructorSerializer(instructor, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(AdminInstructorSerializer(services.get_instructor(pk)).data)

    def delete(self, request, pk):
        services.delete_instructor(services.get_instructor(pk))
        return Response({"message": "Instructor deleted successfully"})
