"""Tests for the fixed-window auth throttle and the cache it counts in."""

from __future__ import annotations

import importlib
import os
from unittest import mock

from django.test import SimpleTestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User
from apps.users.throttling import AuthRateThrottle

WINDOW = 15 * 60
WINDOW_START = 1_000 * WINDOW


class LoginThrottleTests(APITestCase):
    def setUp(self) -> None:
        User.objects.create_user(email="eve@example.com", password="Secret123", name="Eve")
        self.url = reverse("users:login")
        self.credentials = {"email": "eve@example.com", "password": "Secret123"}
        self.now = WINDOW_START + 100
        patcher = mock.patch.object(AuthRateThrottle, "timer", side_effect=lambda: self.now)
        patcher.start()
        self.addCleanup(patcher.stop)

    def exhaust_window(self) -> None:
        for _ in range(20):
            response = self.client.post(self.url, self.credentials, format="json")
            self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_login_is_rate_limited(self) -> None:
        self.exhaust_window()
        response = self.client.post(self.url, self.credentials, format="json")
        self.assertEqual(response.status_code, status.HTTP_429_TOO_MANY_REQUESTS)
        self.assertEqual(response.data["error"], "rate_limited")

    def test_failed_logins_count_towards_the_limit(self) -> None:
        wrong = dict(self.credentials, password="wrong-password")
        for _ in range(20):
            self.client.post(self.url, wrong, format="json")
        response = self.client.post(self.url, self.credentials, format="json")
        self.assertEqual(response.status_code, status.HTTP_429_TOO_MANY_REQUESTS)

    def test_retry_after_is_time_left_in_window(self) -> None:
        self.exhaust_window()
        response = self.client.post(self.url, self.credentials, format="json")
        retry_after = int(response["Retry-After"])
        self.assertLessEqual(retry_after, WINDOW)
        self.assertEqual(retry_after, WINDOW - 100)

    def test_blocked_until_window_rolls_over(self) -> None:
        self.exhaust_window()

        self.now = WINDOW_START + WINDOW - 1
        response = self.client.post(self.url, self.credentials, format="json")
        self.assertEqual(response.status_code, status.HTTP_429_TOO_MANY_REQUESTS)

        self.now = WINDOW_START + WINDOW + 1
        response = self.client.post(self.url, self.credentials, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

    def test_register_and_login_share_the_counter(self) -> None:
        for attempt in range(20):
            self.client.post(
                reverse("users:register"),
                {"name": "Guest", "email": f"guest{attempt}@example.com", "password": "Secret123"},
                format="json",
            )
        response = self.client.post(self.url, self.credentials, format="json")
        self.assertEqual(response.status_code, status.HTTP_429_TOO_MANY_REQUESTS)


class ThrottleRateTests(SimpleTestCase):
    def test_parse_rate_with_multiplier(self) -> None:
        throttle = AuthRateThrottle()
        self.assertEqual(throttle.parse_rate("20/15m"), (20, WINDOW))
        self.assertEqual(throttle.parse_rate("5/h"), (5, 3600))
        with self.assertRaises(ValueError):
            throttle.parse_rate("lots")


class CacheSettingsTests(SimpleTestCase):
    """Throttle counters must live in a cache shared by every worker when one is configured."""

    def tearDown(self) -> None:
        self.load_base()

    def load_base(self, **env):
        with mock.patch.dict(os.environ, env):
            if not env:
                os.environ.pop("CACHE_URL", None)
                os.environ.pop("REDIS_CACHE_URL", None)
            return importlib.reload(importlib.import_module("config.settings.base"))

    def test_cache_url_selects_redis(self) -> None:
        base = self.load_base(CACHE_URL="redis://cache:6379/2")
        self.assertEqual(base.CACHES["default"]["BACKEND"], "django_redis.cache.RedisCache")
        self.assertEqual(base.CACHES["default"]["LOCATION"], "redis://cache:6379/2")

    def test_local_memory_without_cache_url(self) -> None:
        base = self.load_base()
        self.assertEqual(
            base.CACHES["default"]["BACKEND"], "django.core.cache.backends.locmem.LocMemCache"
        )
