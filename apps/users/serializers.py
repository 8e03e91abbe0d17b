"""Serializers for account endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public user document. The password hash is never included."""

    class Meta:
        model = User
        fields = ["id", "name", "email"]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """Shape of the registration payload; content rules live in services."""

    name = serializers.CharField(trim_whitespace=False)
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)
