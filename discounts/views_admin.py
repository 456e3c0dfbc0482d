# discounts/views_admin.py
"""
Back-office management of discount codes (staff only).
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from robospark.api import IsAdmin

from . import services
from .serializers import AdminDiscountCodeSerializer

logger = logging.getLogger(__name__)


class AdminDiscountListView(APIView):
    """Handler for GET/POST /api/admin/discounts"""

    permission_classes = (IsAdmin,)

    def get(self, request):
        discounts = services.discounts_with_usage().order_by("-created_at")
        return Response(AdminDiscountCodeSerializer(discounts, many=True).data)

    def post(self, request):
        serializer = AdminDiscountCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        discount = serializer.save()
        logger.info("Discount code created discount=%s code=%s", discount.pk, discount.code)
        return Response(
            AdminDiscountCodeSerializer(services.get_discount(discount.pk)).data,
            status=status.HTTP_201_CREATED,
        )


class AdminDiscountDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/admin/discounts/<pk>"""

    permission_classes = (IsAdmin,)

    def get(self, request, pk):
        return Response(AdminDiscountCodeSerializer(services.get_discount(pk)).data)

    def put(self, request, pk):
        discount = services.get_discount(pk)
        serializer = AdminDiscountCodeSerializer(discount, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(AdminDiscountCodeSerializer(services.get_discount(pk)).data)

    def delete(self, request, pk):
        services.delete_discount(services.get_discount(pk))
        return Response({"message": "Discount code deleted successfully"})
