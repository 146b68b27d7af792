from rest_framework import serializers

from ..data.models import ReviewSchedule

class ReviewInSerializer(serializers.Serializer):
    userId = serializers.IntegerField(min_value=1, source="user_id")
    noteId = serializers.IntegerField(min_value=1, source="note_id")
    topic = serializers.CharField(max_length=255, allow_blank=True, allow_null=True, default="")
    difficultyLevel = serializers.IntegerField(min_value=1, max_value=5, source="difficulty_level")

class ReviewScheduleSerializer(serializers.ModelSerializer):
    class Meta:
        model = ReviewSchedule
        fields = [
            "id", "user_id", "note_id", "topic", "difficulty_level",
            "ease_factor", "repetition_count", "interval_days",
            "last_reviewed", "next_review_date", "created_at",
        ]
        read_only_fields = fields

class DueReviewSerializer(ReviewScheduleSerializer):
    content = serializers.CharField(allow_null=True, read_only=True)

    class Meta(ReviewScheduleSerializer.Meta):
        fields = ReviewScheduleSerializer.Meta.fields + ["content"]
        read_only_fields = fields
