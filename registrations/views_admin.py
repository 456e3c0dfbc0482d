# registrations/views_admin.py
"""
Back-office views over registrations and the dashboard (staff only).
"""

from rest_framework.response import Response
from rest_framework.views import APIView

from robospark.api import IsAdmin

from . import services
from .models import Registration
from .reports import dashboard_stats
from .serializers import RegistrationSerializer


class AdminRegistrationListView(APIView):
    """
    Handler for GET /api/admin/registrations

    Optional query parameters ``status`` (payment status) and
    ``course`` (course id) narrow the list.
    """

    permission_classes = (IsAdmin,)

    def get(self, request):
        registrations = services.registrations_for_display().order_by("-created_at")
        payment_status = request.query_params.get("status")
        if payment_status in Registration.PaymentStatus.values:
            registrations = registrations.filter(payment_status=payment_status)
        course_id = request.query_params.get("course")
        if course_id and course_id.isdigit():
            registrations = registrations.filter(course_id=int(course_id))
        return Response(RegistrationSerializer(registrations, many=True).data)


class AdminRegistrationDetailView(APIView):
    """Handler for GET /api/admin/registrations/<pk>"""

    permission_classes = (IsAdmin,)

    def get(self, request, pk):
        return Response(RegistrationSerializer(services.get_registration(pk)).data)


class AdminRegistrationCancelView(APIView):
    """Handler for POST /api/admin/registrations/<pk>/cancel"""

    permission_classes = (IsAdmin,)

    def post(self, request, pk):
        registration = services.cancel_registration(pk)
        return Response(
            {
                "id": registration.pk,
                "status": registration.payment_status,
                "message": "Registration canceled successfully",
            }
        )


class DashboardStatsView(APIView):
    """Handler for GET /api/admin/dashboard/stats"""

    permission_classes = (IsAdmin,)

    def get(self, request):
        return Response(dashboard_stats())
