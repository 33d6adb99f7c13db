"""API views for payments."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.rooms.tenancy import CompanyScopedViewSetMixin, get_company_id

from .application.command_handlers import ProcessQueuedPaymentHandler
from .models import Payment
from .serializers import PaymentSerializer, QueuedPaymentSerializer


def process_payment(request) -> Payment:
    serializer = QueuedPaymentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    handler = ProcessQueuedPaymentHandler(default_currency=settings.HOTEL_DEFAULT_CURRENCY)
    return handler.handle(serializer.to_command(get_company_id(request)))


class SyncPaymentCreateView(APIView):
    """Record a payment sent by a front desk client."""

    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        payment = process_payment(request)
        return Response(PaymentSerializer(payment).data, status=status.HTTP_201_CREATED)


class PaymentViewSet(CompanyScopedViewSetMixin, viewsets.ModelViewSet):
    """Payments of a company's bookings; ``?bookingId=`` narrows to one booking."""

    queryset = Payment.objects.select_related("booking").all()
    serializer_class = PaymentSerializer
    permission_classes = [permissions.AllowAny]
    company_lookup = "booking__company_id"
    http_method_names = ["get", "post", "put", "patch", "head", "options"]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        booking_id = self.request.query_params.get("bookingId")
        if booking_id:
            qs = qs.filter(booking_id=booking_id)
        return qs

    def create(self, request, *args, **kwargs):  # type: ignore
        payment = process_payment(request)
        serializer = self.get_serializer(payment)
        headers = self.get_success_headers(serializer.data)
        return Response(serializer.data, status=status.HTTP_201_CREATED, headers=headers)
