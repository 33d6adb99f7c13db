"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.rooms.tenancy import CompanyScopedViewSetMixin, get_company_id

from .application.command_handlers import (
    ConfirmBookingCommand,
    ConfirmBookingHandler,
    QueueBookingHandler,
    UpdateBookingCommand,
    UpdateBookingHandler,
)
from .models import Booking
from .serializers import BookingSerializer, QueuedBookingSerializer


def queue_booking(request) -> Booking:
    serializer = QueuedBookingSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    return QueueBookingHandler().handle(serializer.to_command(get_company_id(request)))


class SyncBookingCreateView(APIView):
    """Accept a booking request from a front desk client."""

    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        booking = queue_booking(request)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class SyncBookingConfirmView(APIView):
    """Promote a queued booking to confirmed."""

    permission_classes = [permissions.AllowAny]

    def post(self, request, booking_id: str):  # type: ignore
        result = ConfirmBookingHandler().handle(
            ConfirmBookingCommand(booking_id=booking_id, company_id=get_company_id(request))
        )
        return Response(
            {
                "success": True,
                "message": result.message,
                "booking": BookingSerializer(result.booking).data,
            },
            status=status.HTTP_200_OK,
        )


class BookingViewSet(CompanyScopedViewSetMixin, viewsets.ModelViewSet):
    """Bookings of a company. Writes go through the booking command handlers."""

    queryset = Booking.objects.select_related("company", "room", "guest").all()
    serializer_class = BookingSerializer
    permission_classes = [permissions.AllowAny]
    http_method_names = ["get", "post", "put", "patch", "head", "options"]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        booking_status = self.request.query_params.get("status")
        if booking_status:
            qs = qs.filter(status=booking_status)
        room_id = self.request.query_params.get("roomId")
        if room_id:
            qs = qs.filter(room_id=room_id)
        return qs

    def create(self, request, *args, **kwargs):  # type: ignore
        booking = queue_booking(request)
        serializer = self.get_serializer(booking)
        headers = self.get_success_headers(serializer.data)
        return Response(serializer.data, status=status.HTTP_201_CREATED, headers=headers)

    def update(self, request, *args, **kwargs):  # type: ignore
        partial = kwargs.pop("partial", False)
        instance: Booking = self.get_object()  # type: ignore
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        booking = UpdateBookingHandler().handle(
            UpdateBookingCommand(
                booking_id=instance.pk,
                changes=serializer.changes(),
                company_id=instance.company_id,
            )
        )
        return Response(self.get_serializer(booking).data)
