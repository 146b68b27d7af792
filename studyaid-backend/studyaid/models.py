from django.db import models
from django.utils import timezone


class Note(models.Model):
    """
    A study note produced by the upload flow.

    The review scheduler only reads ``content`` to show alongside due reviews.
    """

    DEFAULT_TOPIC = "Uploaded Files"

    user_id = models.PositiveIntegerField(db_index=True)
    topic = models.CharField(max_length=255, default=DEFAULT_TOPIC)
    content = models.TextField()
    uploaded_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-uploaded_at", "-id"]

    def __str__(self):
        return f"Note({self.pk}, {self.topic})"
