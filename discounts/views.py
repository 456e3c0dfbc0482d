# discounts/views.py
"""
Public discount code check, used by the checkout before submission.
"""

from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import ValidateDiscountSerializer
from .services import validate_discount_code


class ValidateDiscountView(APIView):
    """Handler for POST /api/discounts/validate"""

    permission_classes = (AllowAny,)

    def post(self, request):
        serializer = ValidateDiscountSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(validate_discount_code(serializer.validated_data["code"]))
