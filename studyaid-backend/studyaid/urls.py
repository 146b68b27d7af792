from django.urls import include, path

from .views import NotesView, UserNotesView, health

urlpatterns = [
    path("api/health", health, name="health"),
    path("api/notes", NotesView.as_view(), name="notes"),
    path("api/notes/<int:user_id>", UserNotesView.as_view(), name="user-notes"),
    path("api/spaced-repetition/", include("scheduler.api.urls")),
]
