"""CRUD viewsets for room inventory."""

from __future__ import annotations

from rest_framework import permissions, viewsets  # type: ignore

from .models import Company, Room, RoomCategory
from .serializers import CompanySerializer, RoomCategorySerializer, RoomSerializer
from .tenancy import CompanyScopedViewSetMixin


class CompanyViewSet(viewsets.ModelViewSet):
    queryset = Company.objects.all()
    serializer_class = CompanySerializer
    permission_classes = [permissions.AllowAny]


class RoomCategoryViewSet(CompanyScopedViewSetMixin, viewsets.ModelViewSet):
    queryset = RoomCategory.objects.select_related("company").all()
    serializer_class = RoomCategorySerializer
    permission_classes = [permissions.AllowAny]


class RoomViewSet(CompanyScopedViewSetMixin, viewsets.ModelViewSet):
    """Rooms of a company; ``status`` may be filtered with ``?status=``."""

    queryset = Room.objects.select_related("company", "category").all()
    serializer_class = RoomSerializer
    permission_classes = [permissions.AllowAny]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        room_status = self.request.query_params.get("status")
        if room_status:
            qs = qs.filter(status=room_status)
        return qs
