import structlog
from studyaid.models import Note

from ..data.repos import (
    all_schedules,
    delete_schedule,
    due_schedules,
    upsert_schedule,
)
from ..domain.enums import Difficulty
from ..domain.errors import InvalidDifficulty, ScheduleNotFound
from ..utils.time import system_clock, to_local_iso

logger = structlog.get_logger()

def _validate_difficulty(difficulty):
    try:
        return Difficulty(difficulty)
    except (TypeError, ValueError):
        raise InvalidDifficulty(difficulty) from None

def record_review(user_id, note_id, topic, difficulty, clock=None):
    clock = clock or system_clock
    logger.info("review_received",
        user_id=user_id,
        note_id=note_id,
        difficulty=difficulty,
    )

    try:
        difficulty = _validate_difficulty(difficulty)
    except InvalidDifficulty:
        logger.warning("review_rejected",
            user_id=user_id,
            note_id=note_id,
            difficulty=difficulty,
        )
        raise

    now = clock.now()
    sched, created = upsert_schedule(user_id, note_id, topic or "", int(difficulty), now)

    logger.info("review_scheduled",
        user_id=user_id,
        note_id=note_id,
        created=created,
        repetition_count=sched.repetition_count,
        ease_factor=sched.ease_factor,
        interval_days=sched.interval_days,
        next_review_utc=sched.next_review_date.isoformat(),
        next_review_local=to_local_iso(sched.next_review_date),
    )
    return sched, created

def list_due(user_id, clock=None):
    clock = clock or system_clock
    now = clock.now()
    schedules = due_schedules(user_id, now)
    logger.info("due_reviews_listed",
        user_id=user_id,
        as_of_utc=now.isoformat(),
        count=len(schedules),
    )
    return schedules

def list_due_with_notes(user_id, clock=None):
    """
    Due schedules paired with the content of their notes.

    A note that no longer exists yields ``None`` content; the schedule is
    still listed.
    """
    schedules = list_due(user_id, clock)
    contents = dict(
        Note.objects
        .filter(user_id=user_id, id__in=[s.note_id for s in schedules])
        .values_list("id", "content")
    )
    return [(sched, contents.get(sched.note_id)) for sched in schedules]

def list_scheduled(user_id):
    schedules = all_schedules(user_id)
    logger.info("scheduled_reviews_listed", user_id=user_id, count=len(schedules))
    return schedules

def delete_review(user_id, note_id):
    try:
        sched = delete_schedule(user_id, note_id)
    except ScheduleNotFound:
        logger.info("review_delete_missing", user_id=user_id, note_id=note_id)
        raise

    logger.info("review_deleted",
        user_id=user_id,
        note_id=note_id,
        repetition_count=sched.repetition_count,
    )
    return sched
