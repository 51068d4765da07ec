# apps/trivia_quizzes/urls.py
from django.urls import path
from rest_framework.routers import SimpleRouter
from .views import QuizViewSet, random_play, random_check

router = SimpleRouter()
router.register("", QuizViewSet, basename="quiz")

# random play first, so "randomplay" is never read as a quiz pk
urlpatterns = [
    path("randomplay/", random_play, name="random-play"),
    path("randomcheck/<int:quiz_id>/", random_check, name="random-check"),
] + router.urls
