import math
from datetime import datetime
from typing import NamedTuple

from ..config import (
    DIFFICULTY_MULTIPLIER,
    EASE_STEP_DOWN,
    EASE_STEP_UP,
    FIRST_INTERVAL_DAYS,
    MAX_EASE_FACTOR,
    MAX_INTERVAL_DAYS,
    MIN_EASE_FACTOR,
    SECOND_INTERVAL_DAYS,
    SECOND_INTERVAL_HARD_DAYS,
    THIRD_INTERVAL_DAYS,
)
from ..utils.time import add_days
from .enums import Difficulty


class Schedule(NamedTuple):
    interval_days: int
    ease_factor: float
    next_review_date: datetime


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def next_interval(difficulty: int, repetition_count: int, ease_factor: float) -> int:
    """Days until the next review.

    ``repetition_count`` is the number of reviews before this one.
    """
    if repetition_count <= 0:
        return FIRST_INTERVAL_DAYS

    if repetition_count == 1:
        if difficulty <= Difficulty.MEDIUM:
            return SECOND_INTERVAL_DAYS
        return SECOND_INTERVAL_HARD_DAYS

    if repetition_count == 2:
        base_interval = THIRD_INTERVAL_DAYS
    else:
        try:
            base_interval = ease_factor ** (repetition_count - 2) * THIRD_INTERVAL_DAYS
        except OverflowError:
            return MAX_INTERVAL_DAYS

    multiplier = DIFFICULTY_MULTIPLIER.get(int(difficulty), 1.0)
    scaled = base_interval * multiplier
    if not math.isfinite(scaled) or scaled >= MAX_INTERVAL_DAYS:
        return MAX_INTERVAL_DAYS
    proposed = _round_half_up(scaled)
    return max(1, min(proposed, MAX_INTERVAL_DAYS))


def next_ease_factor(difficulty: int, ease_factor: float) -> float:
    if difficulty <= Difficulty.EASY:
        ease_factor = min(ease_factor + EASE_STEP_UP, MAX_EASE_FACTOR)
    elif difficulty >= Difficulty.HARD:
        ease_factor = max(ease_factor - EASE_STEP_DOWN, MIN_EASE_FACTOR)
    # stored with two decimals so repeated steps land exactly on the bounds
    return round(ease_factor, 2)


def schedule_next(difficulty: int, repetition_count: int, ease_factor: float, now) -> Schedule:
    # difficulty is validated by the caller
    interval = next_interval(difficulty, repetition_count, ease_factor)
    return Schedule(
        interval_days=interval,
        ease_factor=next_ease_factor(difficulty, ease_factor),
        next_review_date=add_days(now, interval),
    )
