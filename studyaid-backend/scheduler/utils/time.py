from datetime import timedelta
from typing import Protocol

from django.utils import timezone


class Clock(Protocol):
    def now(self): ...


class SystemClock:
    def now(self):
        return timezone.now()


system_clock = SystemClock()


def add_days(moment, days: int):
    """Add whole calendar days, keeping the local wall-clock time."""
    local = timezone.localtime(moment)
    return local + timedelta(days=days)


def to_local_iso(dt):
    return timezone.localtime(dt).isoformat()
