from rest_framework import status, views
from rest_framework.decorators import api_view
from rest_framework.response import Response
import structlog

from .models import Note
from .serializers import NoteInSerializer, NoteSerializer

logger = structlog.get_logger()


@api_view(["GET"])
def health(request):
    return Response({"message": "Backend is working!"}, status=status.HTTP_200_OK)


class NotesView(views.APIView):
    """
    Stores a text note for a user.

    Image upload and OCR happen upstream; this endpoint takes the extracted text.
    """

    def post(self, request):
        s = NoteInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        topic = s.validated_data["topic"] or Note.DEFAULT_TOPIC
        content = s.validated_data["content"] or f"Notes for topic: {topic}"
        note = Note.objects.create(
            user_id=s.validated_data["user_id"], topic=topic, content=content
        )
        logger.info("note_created", user_id=note.user_id, note_id=note.pk, topic=topic)

        return Response(
            {"message": "Note saved", "noteId": note.pk, "note": NoteSerializer(note).data},
            status=status.HTTP_201_CREATED,
        )


class UserNotesView(views.APIView):
    def get(self, request, user_id):
        notes = Note.objects.filter(user_id=user_id).order_by("-uploaded_at", "-id")
        return Response({"notes": NoteSerializer(notes, many=True).data})
