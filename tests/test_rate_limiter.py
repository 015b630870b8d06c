import pytest

from utils.rate_limiter import RateLimiter

pytestmark = pytest.mark.unit


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class TestRateLimiter:

    def test_allows_up_to_the_limit(self):
        limiter = RateLimiter(max_requests=3, window_seconds=60, clock=FakeClock())

        remaining = [limiter.check('client').remaining for _ in range(3)]

        assert remaining == [2, 1, 0]
        assert limiter.check('client').allowed is False

    def test_blocked_result_reports_window_end(self):
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=FakeClock(1000.0))
        limiter.check('client')

        result = limiter.check('client')

        assert result.allowed is False
        assert result.remaining == 0
        assert result.reset_time == 1060.0

    def test_window_expiry_resets_count(self):
        clock = FakeClock()
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=clock)
        limiter.check('client')
        assert limiter.check('client').allowed is False

        clock.now += 61

        assert limiter.check('client').allowed is True

    def test_keys_are_independent(self):
        limiter = RateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
        limiter.check('a')

        assert limiter.check('a').allowed is False
        assert limiter.check('b').allowed is True
