from django.apps import AppConfig


class TriviaQuizzesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.trivia_quizzes"
    verbose_name = "Trivia Quizzes"
