"""Fixed-window rate limiting for the register and login endpoints."""

from __future__ import annotations

import logging
import re

from rest_framework.throttling import SimpleRateThrottle  # type: ignore

logger = logging.getLogger(__name__)

RATE_PATTERN = re.compile(r"^(?P<num>\d+)/(?P<mult>\d*)(?P<unit>[smhd])")
UNIT_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400}


class AuthRateThrottle(SimpleRateThrottle):
    """Allow ``num`` requests per client address per fixed window.

    Rates look like ``20/15m``. Unlike DRF's sliding history this counter
    resets when the window rolls over, so a blocked client is released at
    the window boundary.
    """

    scope = "auth"

    def parse_rate(self, rate):  # type: ignore
        if rate is None:
            return (None, None)
        match = RATE_PATTERN.match(rate)
        if match is None:
            raise ValueError(f"Invalid throttle rate: {rate!r}")
        multiplier = int(match.group("mult") or 1)
        return int(match.group("num")), multiplier * UNIT_SECONDS[match.group("unit")]

    def get_cache_key(self, request, view):  # type: ignore
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}

    def allow_request(self, request, view):  # type: ignore
        if self.rate is None:
            return True
        self.key = self.get_cache_key(request, view)
        if self.key is None:
            return True

        self.now = self.timer()
        window = int(self.now // self.duration)
        self.window_end = (window + 1) * self.duration
        window_key = f"{self.key}:{window}"

        # add() is a no-op if the counter already exists in this window
        self.cache.add(window_key, 0, self.duration)
        try:
            count = self.cache.incr(window_key)
        except ValueError:
            # Counter expired between add() and incr()
            self.cache.set(window_key, 1, self.duration)
            count = 1

        if count > self.num_requests:
            logger.warning("Auth rate limit hit for %s", self.get_ident(request))
            return False
        return True

    def wait(self):  # type: ignore
        return max(self.window_end - self.now, 0)
