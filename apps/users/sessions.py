"""Session issuer/verifier built on SimpleJWT access tokens.

Tokens are signed (HS256) and expire after ``SESSION_TOKEN_LIFETIME``
(24 hours by default). Nothing is stored server side, so logging out only
clears the cookie: a copied token stays valid until it expires.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings  # type: ignore
from rest_framework_simplejwt.exceptions import TokenError  # type: ignore
from rest_framework_simplejwt.tokens import AccessToken  # type: ignore

from shared.domain.errors import InvalidToken


@dataclass(frozen=True)
class Claims:
    """Identity carried by a verified session token."""

    id: int
    email: str
    name: str

    @classmethod
    def from_token(cls, token: AccessToken) -> "Claims":
        try:
            return cls(id=token["id"], email=token["email"], name=token["name"])
        except KeyError as exc:
            raise InvalidToken() from exc


def issue_token(user) -> str:
    token = AccessToken.for_user(user)
    token.set_exp(lifetime=settings.SESSION_TOKEN_LIFETIME)
    token["email"] = user.email
    token["name"] = user.name
    return str(token)


def decode_token(raw_token: str) -> AccessToken:
    """Validate signature and expiry, raising ``InvalidToken`` otherwise."""
    try:
        return AccessToken(raw_token)
    except TokenError as exc:
        raise InvalidToken() from exc


def verify_token(raw_token: str) -> Claims:
    return Claims.from_token(decode_token(raw_token))


def set_session_cookie(response, token: str) -> None:
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        max_age=int(settings.SESSION_TOKEN_LIFETIME.total_seconds()),
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite=settings.AUTH_COOKIE_SAMESITE,
    )


def clear_session_cookie(response) -> None:
    response.delete_cookie(settings.AUTH_COOKIE_NAME, samesite=settings.AUTH_COOKIE_SAMESITE)
