"""DRF exception handler rendering every failure as ``{"error", "message"}``."""

from __future__ import annotations

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied  # type: ignore
from django.http import Http404  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import set_rollback  # type: ignore

from shared.domain.errors import DomainError, InternalError, RateLimited

logger = logging.getLogger(__name__)

MISSING_CODES = {"required", "null", "blank"}


def _first_error(detail):
    """Walk a ValidationError payload and return its first ErrorDetail."""
    if isinstance(detail, dict):
        for value in detail.values():
            found = _first_error(value)
            if found is not None:
                return found
        return None
    if isinstance(detail, list):
        for value in detail:
            found = _first_error(value)
            if found is not None:
                return found
        return None
    return detail


def _has_missing(detail) -> bool:
    if isinstance(detail, dict):
        return any(_has_missing(value) for value in detail.values())
    if isinstance(detail, list):
        return any(_has_missing(value) for value in detail)
    return getattr(detail, "code", None) in MISSING_CODES


def _validation_body(exc: exceptions.ValidationError) -> dict[str, str]:
    if _has_missing(exc.detail):
        return {"error": "missing_fields", "message": "Required fields are missing"}
    first = _first_error(exc.detail)
    code = getattr(first, "code", None)
    if not code or code == "invalid":
        code = "invalid_input"
    return {"error": code, "message": str(first) if first is not None else "Invalid input"}


def _render(body: dict[str, str], status_code: int, headers: dict[str, str] | None = None) -> Response:
    set_rollback()
    return Response(body, status=status_code, headers=headers)


def api_exception_handler(exc, context):  # type: ignore
    """Map domain errors and DRF exceptions to the public error shape."""

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if isinstance(exc, DomainError):
        if isinstance(exc, InternalError):
            logger.error("Internal error in %s: %s", view_name, exc.code)
        return _render(exc.as_dict(), exc.status_code)

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    if isinstance(exc, exceptions.ValidationError):
        return _render(_validation_body(exc), status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, exceptions.Throttled):
        logger.warning("Throttled request in %s", view_name)
        headers = {"Retry-After": str(int(exc.wait))} if exc.wait is not None else None
        return _render(RateLimited().as_dict(), status.HTTP_429_TOO_MANY_REQUESTS, headers)

    if isinstance(exc, exceptions.NotAuthenticated):
        return _render({"error": "unauthorized", "message": "Please log in"}, status.HTTP_401_UNAUTHORIZED)

    if isinstance(exc, exceptions.AuthenticationFailed):
        return _render(
            {"error": "invalid_token", "message": "Invalid or expired token"},
            status.HTTP_401_UNAUTHORIZED,
        )

    if isinstance(exc, exceptions.PermissionDenied):
        return _render({"error": "forbidden", "message": str(exc.detail)}, status.HTTP_403_FORBIDDEN)

    if isinstance(exc, exceptions.ParseError):
        return _render({"error": "invalid_input", "message": str(exc.detail)}, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, exceptions.APIException):
        return _render({"error": exc.default_code, "message": str(exc.detail)}, exc.status_code)

    logger.exception("Unhandled error in %s", view_name)
    return _render(InternalError().as_dict(), status.HTTP_500_INTERNAL_SERVER_ERROR)
