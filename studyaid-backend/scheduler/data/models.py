from django.db import models
from django.utils import timezone

from ..config import DEFAULT_EASE_FACTOR

class ReviewSchedule(models.Model):
    # foreign references owned by the notes/accounts side
    user_id = models.PositiveIntegerField()
    note_id = models.PositiveIntegerField()
    topic = models.CharField(max_length=255, blank=True, default="")
    difficulty_level = models.PositiveSmallIntegerField()
    ease_factor = models.FloatField(default=DEFAULT_EASE_FACTOR)
    repetition_count = models.PositiveIntegerField(default=1)
    interval_days = models.PositiveIntegerField(default=1)
    last_reviewed = models.DateTimeField(default=timezone.now)
    next_review_date = models.DateTimeField(default=timezone.now)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = (("user_id", "note_id"),)
        indexes = [
            models.Index(fields=["user_id", "next_review_date"], name="schedule_user_next_idx"),
        ]
        ordering = ["next_review_date", "id"]

    def __str__(self):
        return f"ReviewSchedule(user={self.user_id}, note={self.note_id}, next={self.next_review_date:%Y-%m-%d})"
