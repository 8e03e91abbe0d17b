"""DRF authentication reading the session token from the ``token`` cookie."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication  # type: ignore

from shared.domain.errors import InvalidToken

from .sessions import Claims, decode_token

logger = logging.getLogger(__name__)


class CookieJWTAuthentication(JWTStatelessUserAuthentication):
    """Stateless cookie authentication.

    A valid cookie yields ``(TokenUser, Claims)`` without a database hit.
    A missing cookie leaves the request anonymous. A bad cookie also leaves
    it anonymous but records the failure on ``request.session_error`` so the
    gate can answer ``invalid_token`` on protected routes while public routes
    keep working.
    """

    def authenticate(self, request):  # type: ignore
        raw_token = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        if not raw_token:
            return None
        try:
            token = decode_token(raw_token)
            claims = Claims.from_token(token)
        except InvalidToken as exc:
            logger.debug("Rejected session cookie: %s", exc)
            request.session_error = exc
            return None
        return self.get_user(token), claims

    def authenticate_header(self, request):  # type: ignore
        return 'Cookie realm="api"'
