from django.db import transaction, IntegrityError

from ..config import DEFAULT_EASE_FACTOR
from ..domain.errors import ScheduleNotFound
from ..domain.logic import schedule_next
from .models import ReviewSchedule

def _lock_schedule(user_id, note_id):
    return (ReviewSchedule.objects
            .select_for_update()
            .get(user_id=user_id, note_id=note_id))

def upsert_schedule(user_id, note_id, topic, difficulty, now):
    """
    Insert or update the schedule for (user, note) in one transaction.

    The row stays locked from read to write so concurrent reviews of the
    same pair serialize and no repetition is lost. Returns (schedule, created).
    """
    with transaction.atomic():
        try:
            sched = _lock_schedule(user_id, note_id)
        except ReviewSchedule.DoesNotExist:
            sched = None

        if sched is None:
            plan = schedule_next(difficulty, 0, DEFAULT_EASE_FACTOR, now)
            try:
                with transaction.atomic():
                    sched = ReviewSchedule.objects.create(
                        user_id=user_id, note_id=note_id, topic=topic,
                        difficulty_level=difficulty,
                        ease_factor=plan.ease_factor,
                        repetition_count=1,
                        interval_days=plan.interval_days,
                        last_reviewed=now,
                        next_review_date=plan.next_review_date,
                        created_at=now,
                    )
                return sched, True
            except IntegrityError:
                # Lost the insert race; review on top of the winner's row
                sched = _lock_schedule(user_id, note_id)

        plan = schedule_next(difficulty, sched.repetition_count, sched.ease_factor, now)
        sched.difficulty_level = difficulty
        sched.ease_factor = plan.ease_factor
        sched.repetition_count = sched.repetition_count + 1
        sched.interval_days = plan.interval_days
        sched.last_reviewed = now
        sched.next_review_date = plan.next_review_date
        sched.save(update_fields=[
            "difficulty_level", "ease_factor", "repetition_count",
            "interval_days", "last_reviewed", "next_review_date",
        ])
        return sched, False

def get_schedule(user_id, note_id):
    return ReviewSchedule.objects.filter(user_id=user_id, note_id=note_id).first()

def due_schedules(user_id, now):
    return list(
        ReviewSchedule.objects
        .filter(user_id=user_id, next_review_date__lte=now)
        .order_by("next_review_date", "id")
    )

def all_schedules(user_id):
    return list(
        ReviewSchedule.objects
        .filter(user_id=user_id)
        .order_by("next_review_date", "id")
    )

def delete_schedule(user_id, note_id):
    """
    Remove the schedule for (user, note) and return its last state.
    """
    with transaction.atomic():
        try:
            sched = _lock_schedule(user_id, note_id)
        except ReviewSchedule.DoesNotExist:
            raise ScheduleNotFound(user_id, note_id) from None
        # queryset delete keeps the pk on the returned instance
        ReviewSchedule.objects.filter(pk=sched.pk).delete()
        return sched
