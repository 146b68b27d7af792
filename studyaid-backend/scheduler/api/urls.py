from django.urls import path
from .views import DueReviewsView, ReviewDetailView, ReviewView, ScheduledReviewsView

urlpatterns = [
    path("review", ReviewView.as_view(), name="review"),
    path("due/<int:user_id>", DueReviewsView.as_view(), name="due-reviews"),
    path("scheduled/<int:user_id>", ScheduledReviewsView.as_view(), name="scheduled-reviews"),
    path("<int:user_id>/<int:note_id>", ReviewDetailView.as_view(), name="review-detail"),
]
