from datetime import datetime, timedelta, timezone

import pytest


class FrozenClock:
    def __init__(self, now):
        self.current = now

    def now(self):
        return self.current

    def advance(self, **kwargs):
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FrozenClock(datetime(2024, 1, 30, 9, 0, tzinfo=timezone.utc))
