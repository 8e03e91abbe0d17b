"""Authorization gate: session presence and resource ownership."""

from __future__ import annotations

import logging

from rest_framework import permissions  # type: ignore

from shared.domain.errors import Forbidden, Unauthorized

from .sessions import Claims

logger = logging.getLogger(__name__)


def require_authenticated(request) -> Claims:
    """Return the caller's claims or raise before the handler body runs."""
    claims = getattr(request, "auth", None)
    if isinstance(claims, Claims):
        return claims
    error = getattr(request, "session_error", None)
    if error is not None:
        raise error
    raise Unauthorized()


def require_ownership(owner_id, claims: Claims, message: str | None = None) -> None:
    """Raise ``Forbidden`` unless ``owner_id`` is the caller's id."""
    if str(owner_id) != str(claims.id):
        logger.warning("Ownership check failed: user %s on resource owned by %s", claims.id, owner_id)
        raise Forbidden("forbidden", message)


class IsSessionAuthenticated(permissions.BasePermission):
    """Rejects requests without a valid session cookie.

    Raises instead of returning ``False`` so the client gets
    ``unauthorized`` or ``invalid_token`` rather than DRF's generic 403.
    """

    def has_permission(self, request, view) -> bool:  # type: ignore
        require_authenticated(request)
        return True
