"""CRUD viewset for guests."""

from __future__ import annotations

from rest_framework import permissions, viewsets  # type: ignore

from apps.rooms.tenancy import CompanyScopedViewSetMixin

from .models import Guest
from .serializers import GuestSerializer


class GuestViewSet(CompanyScopedViewSetMixin, viewsets.ModelViewSet):
    queryset = Guest.objects.select_related("company").all()
    serializer_class = GuestSerializer
    permission_classes = [permissions.AllowAny]
