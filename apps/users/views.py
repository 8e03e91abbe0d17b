"""Views for account flows (register, login, profile, logout)."""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from . import services, sessions
from .serializers import LoginSerializer, RegisterSerializer, UserSerializer
from .throttling import AuthRateThrottle

logger = logging.getLogger(__name__)

User = get_user_model()


class HealthView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):  # type: ignore
        return Response("test ok and is running")


class RegisterView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [AuthRateThrottle]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.register_user(**serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)


class LoginView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [AuthRateThrottle]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.authenticate_user(**serializer.validated_data)
        response = Response(UserSerializer(user).data, status=status.HTTP_200_OK)
        sessions.set_session_cookie(response, sessions.issue_token(user))
        return response


class ProfileView(APIView):
    """Current user from the cookie, or ``null`` for anonymous callers."""

    permission_classes = [AllowAny]

    def get(self, request):  # type: ignore
        if getattr(request, "session_error", None) is not None:
            return Response(None, status=status.HTTP_401_UNAUTHORIZED)
        claims = request.auth
        if not isinstance(claims, sessions.Claims):
            return Response(None)
        user = User.objects.filter(pk=claims.id).first()
        if user is None:
            return Response(None)
        return Response(UserSerializer(user).data)


class LogoutView(APIView):
    """Clears the cookie. The token itself stays valid until it expires."""

    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        response = Response(True)
        sessions.clear_session_cookie(response)
        return response
