"""URL configuration for the StayOS back office.

The same API is mounted at ``api/`` and ``api/v1/``: older front desk
clients call the unversioned paths.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore

from apps.bookings.views import BookingViewSet
from apps.finances.views import PaymentViewSet
from apps.guests.views import GuestViewSet
from apps.rooms.views import CompanyViewSet, RoomCategoryViewSet, RoomViewSet
from shared.api.resources import ResourceKind, build_resource_router

router = build_resource_router({
    ResourceKind.COMPANIES: CompanyViewSet,
    ResourceKind.CATEGORIES: RoomCategoryViewSet,
    ResourceKind.ROOMS: RoomViewSet,
    ResourceKind.GUESTS: GuestViewSet,
    ResourceKind.BOOKINGS: BookingViewSet,
    ResourceKind.PAYMENTS: PaymentViewSet,
})

api_patterns = [
    path('', include('apps.bookings.urls')),
    path('', include('apps.finances.urls')),
    path('', include(router.urls)),
]

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include((api_patterns, 'api'), namespace='v1')),
    path('api/', include((api_patterns, 'api'), namespace='api')),
]
