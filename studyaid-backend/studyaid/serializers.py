from rest_framework import serializers

from .models import Note


class NoteInSerializer(serializers.Serializer):
    userId = serializers.IntegerField(min_value=1, source="user_id")
    topic = serializers.CharField(max_length=255, allow_blank=True, default="")
    content = serializers.CharField(allow_blank=True, default="", trim_whitespace=True)

    def validate(self, attrs):
        if not attrs["topic"] and not attrs["content"]:
            raise serializers.ValidationError("Provide a topic or some note content")
        return attrs


class NoteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Note
        fields = ["id", "user_id", "topic", "content", "uploaded_at"]
        read_only_fields = fields
