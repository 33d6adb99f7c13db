"""DRF exception handler rendering every failure as ``{"error": ...}``."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler  # type: ignore

from shared.domain.exceptions import ConflictError, HotelError

logger = logging.getLogger(__name__)


def _flatten_errors(data) -> str:
    """Collapse DRF error structures into one human-readable line."""

    if isinstance(data, dict):
        if "detail" in data and len(data) == 1:
            return _flatten_errors(data["detail"])
        parts = []
        for field, errors in data.items():
            message = _flatten_errors(errors)
            if field in ("non_field_errors", "__all__"):
                parts.append(message)
            else:
                parts.append(f"{field}: {message}")
        return "; ".join(parts)
    if isinstance(data, (list, tuple)):
        return " ".join(_flatten_errors(item) for item in data)
    return str(data)


def api_exception_handler(exc, context):
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if isinstance(exc, HotelError):
        if isinstance(exc, ConflictError):
            logger.warning(f"{view_name}: booking conflict: {exc.message}")
        else:
            logger.info(f"{view_name}: {exc.__class__.__name__}: {exc.message}")
        return Response(exc.to_payload(), status=exc.status_code)

    if isinstance(exc, DjangoValidationError):
        detail = exc.message_dict if hasattr(exc, "error_dict") else exc.messages
        return Response({"error": _flatten_errors(detail)}, status=status.HTTP_400_BAD_REQUEST)

    response = drf_exception_handler(exc, context)
    if response is not None:
        response.data = {"error": _flatten_errors(response.data)}
        return response

    logger.error(f"Unhandled error in {view_name}: {exc}", exc_info=exc)
    message = str(exc) if settings.DEBUG else "Internal server error"
    return Response({"error": message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
