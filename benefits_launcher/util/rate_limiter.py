"""
In-Memory Rate Limiter

Fixed window per (rule, client IP). Windows live in process memory, so
limits are per worker.
"""

# Python Packages
import logging
import threading
import time
from typing import Callable, Dict, Optional, Tuple

# Flask Packages
from flask import current_app, request

# Constants
from ..base import constants

# Exceptions
from .exceptions import RateLimitException
from . import messages

logger = logging.getLogger("benefits_launcher.security")

# Seconds between purges of expired windows
SWEEP_INTERVAL = 60





class RateLimiter:
    """
    Counts hits per key inside a fixed window.
    """

    def __init__(self, rules: Dict[str, Tuple[int, int]], clock: Callable[[], float] = time.monotonic):
        self.rules = rules
        self._clock = clock
        self._windows: Dict[Tuple[str, str], Tuple[float, int]] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()


    def hit(self, rule: str, key: str) -> Tuple[bool, int]:
        """
        Register one request.

        Returns:
            (allowed, retry_after_seconds)
        """

        limit, window = self.rules[rule]
        now = self._clock()

        with self._lock:
            if now - self._last_sweep >= SWEEP_INTERVAL:
                self._sweep(now)

            started, count = self._windows.get((rule, key), (now, 0))

            if now - started >= window:
                started, count = now, 0

            if count >= limit:
                return False, max(1, int(window - (now - started)))

            self._windows[(rule, key)] = (started, count + 1)
            return True, 0


    def _sweep(self, now: float):
        """ Drop windows that have run out; caller holds the lock... """

        expired = [
            (rule, key) for (rule, key), (started, _) in self._windows.items()
            if now - started >= self.rules[rule][1]
        ]
        for window_key in expired:
            del self._windows[window_key]

        self._last_sweep = now


    def reset(self):
        with self._lock:
            self._windows.clear()


    def check(self, rule: str, key: Optional[str] = None):
        """
        Hit the rule for the current client and raise when over the limit
        """

        if not current_app.config.get("RATE_LIMIT_ENABLED", constants.RATE_LIMIT_ENABLED):
            return

        key = key or request.remote_addr or "unknown"
        allowed, retry_after = self.hit(rule, key)

        if not allowed:
            logger.warning(
                "Rate limit exceeded",
                extra = {"component": rule, "ip_address": key, "path": request.path}
            )
            raise RateLimitException(
                message = messages.ERROR["TOO_MANY_REQUESTS"],
                retry_after = retry_after
            )


# Process-wide limiter
rate_limiter = RateLimiter(constants.RATE_LIMITS)
