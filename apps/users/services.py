"""Credential store: registration and password authentication."""

from __future__ import annotations

import logging
import re
from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore

from shared.application.uow import PersistenceBoundary
from shared.domain.errors import Conflict, InvalidInput, NotFound, WrongPassword

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 8


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_registration(name: Any, email: Any, password: Any) -> tuple[str, str, str]:
    """Return ``(name, email, password)`` cleaned, or raise ``InvalidInput``.

    Checks run in a fixed order so the client always sees the first
    problem: missing fields, name, e‑mail format, password strength.
    """
    if _is_blank(name) or _is_blank(email) or not password:
        raise InvalidInput("missing_fields", "Name, email, and password are required")
    if not isinstance(name, str) or len(name.strip()) < MIN_NAME_LENGTH:
        raise InvalidInput("invalid_name", "Name must be at least 2 characters")
    if not isinstance(email, str) or not EMAIL_PATTERN.match(email.strip()):
        raise InvalidInput("invalid_email", "Invalid email format")
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidInput("weak_password", "Password must be at least 8 characters")
    User = get_user_model()
    return name.strip(), User.objects.normalize_email(email), password


def register_user(name: Any, email: Any, password: Any):
    """Create an account with a salted password hash.

    Raises ``InvalidInput`` before touching the database and ``Conflict``
    when the normalized e‑mail is already taken.
    """
    name, email, password = validate_registration(name, email, password)
    User = get_user_model()

    with PersistenceBoundary("registration_failed", "Registration failed"):
        if User.objects.filter(email__iexact=email).exists():
            logger.info("Registration rejected, email already registered")
            raise Conflict("email_exists", "Email already exists")
        try:
            with transaction.atomic():
                user = User.objects.create_user(email=email, password=password, name=name)
        except IntegrityError:
            # Concurrent registration won the unique constraint
            logger.info("Registration rejected, email registered concurrently")
            raise Conflict("email_exists", "Email already exists")

    logger.info("Registered user %s", user.pk)
    return user


def authenticate_user(email: Any, password: Any):
    """Return the user whose password matches, or raise.

    ``NotFound`` when no account uses the e‑mail, ``WrongPassword`` when
    the hash comparison fails.
    """
    if _is_blank(email) or not password:
        raise InvalidInput("missing_fields", "Email and password are required")

    User = get_user_model()
    with PersistenceBoundary("server_error", "Login failed"):
        try:
            user = User.objects.get_by_email(str(email))
        except User.DoesNotExist:
            raise NotFound("not_found", "No account found with this email")

    if not user.check_password(str(password)):
        logger.info("Login failed for user %s: wrong password", user.pk)
        raise WrongPassword()

    logger.info("User %s logged in", user.pk)
    return user
