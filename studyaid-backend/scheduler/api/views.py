from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..services.reviews import (
    delete_review,
    list_due_with_notes,
    list_scheduled,
    record_review,
)
from ..domain.enums import DIFFICULTY_LABELS
from ..domain.errors import ScheduleNotFound
from ..utils.time import to_local_iso
from .serializers import DueReviewSerializer, ReviewInSerializer, ReviewScheduleSerializer

base_logger = structlog.get_logger()


class ReviewView(views.APIView):
    def post(self, request):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        user_id = s.validated_data["user_id"]
        note_id = s.validated_data["note_id"]
        topic = s.validated_data["topic"]
        difficulty = s.validated_data["difficulty_level"]

        sched, created = record_review(user_id, note_id, topic, difficulty)
        status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK

        logger.info(
            "review_api_response",
            user_id=user_id,
            note_id=note_id,
            difficulty=difficulty,
            created=created,
            interval_days=sched.interval_days,
            next_review_utc=sched.next_review_date.isoformat(),
            next_review_local=to_local_iso(sched.next_review_date),
            status=status_code,
        )

        return Response(
            {
                "message": "Review recorded",
                "intervalDays": sched.interval_days,
                "nextReviewDate": sched.next_review_date.isoformat(),
                "repetitionCount": sched.repetition_count,
                "easeFactor": sched.ease_factor,
                "difficultyLabel": DIFFICULTY_LABELS[difficulty],
            },
            status=status_code,
        )


class DueReviewsView(views.APIView):
    def get(self, request, user_id):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        rows = []
        for sched, content in list_due_with_notes(user_id):
            sched.content = content
            rows.append(sched)

        data = DueReviewSerializer(rows, many=True).data

        logger.info(
            "due_reviews_api_response",
            user_id=user_id,
            count=len(data),
            status=status.HTTP_200_OK,
        )

        return Response({"dueReviews": data, "count": len(data)})


class ScheduledReviewsView(views.APIView):
    def get(self, request, user_id):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        data = ReviewScheduleSerializer(list_scheduled(user_id), many=True).data

        logger.info(
            "scheduled_reviews_api_response",
            user_id=user_id,
            count=len(data),
            status=status.HTTP_200_OK,
        )

        return Response({"scheduledReviews": data, "count": len(data)})


class ReviewDetailView(views.APIView):
    def delete(self, request, user_id, note_id):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        try:
            sched = delete_review(user_id, note_id)
        except ScheduleNotFound:
            logger.info(
                "review_delete_api_response",
                user_id=user_id,
                note_id=note_id,
                status=status.HTTP_404_NOT_FOUND,
            )
            return Response(
                {"message": "Review schedule not found"},
                status=status.HTTP_404_NOT_FOUND,
            )

        logger.info(
            "review_delete_api_response",
            user_id=user_id,
            note_id=note_id,
            status=status.HTTP_200_OK,
        )

        return Response(
            {
                "message": "Review schedule deleted",
                "deletedReview": ReviewScheduleSerializer(sched).data,
            }
        )
