import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from ..domain.errors import InvalidDifficulty

logger = structlog.get_logger()


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, InvalidDifficulty):
        return Response({"message": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception(
            "api_unhandled_error",
            view=type(view).__name__ if view else None,
            error=str(exc),
        )
        return Response(
            {"error": "Storage unavailable, please retry later"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return None
