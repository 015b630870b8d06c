"""
Rate Limiter for CodeLikeBasics
Fixed-window, in-process request counting per client key
"""

import threading
import time
from collections import namedtuple

RateLimitResult = namedtuple('RateLimitResult', ['allowed', 'remaining', 'reset_time'])


class RateLimiter:
    """
    Counts requests per key inside a fixed time window.

    State lives in this process only; each Cloud Function instance keeps its
    own counters.
    """
    def __init__(self, max_requests=30, window_seconds=60, clock=time.time):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._entries = {}
        self._lock = threading.Lock()

    def check(self, key):
        now = self._clock()

        with self._lock:
            self._purge_expired(now)

            entry = self._entries.get(key)
            if entry is None:
                reset_time = now + self.window_seconds
                self._entries[key] = [1, reset_time]
                return RateLimitResult(True, self.max_requests - 1, reset_time)

            count, reset_time = entry
            if count >= self.max_requests:
                return RateLimitResult(False, 0, reset_time)

            entry[0] = count + 1
            return RateLimitResult(True, self.max_requests - entry[0], reset_time)

    def _purge_expired(self, now):
        expired = [key for key, (_, reset_time) in self._entries.items() if reset_time <= now]
        for key in expired:
            del self._entries[key]
