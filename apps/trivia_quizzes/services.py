# apps/trivia_quizzes/services.py
from __future__ import annotations
import logging
from .models import Quiz

log = logging.getLogger(__name__)

# the only columns the catalog screens may write
EDITABLE_FIELDS = ["question", "answer"]


def create_quiz(question: str, answer: str) -> Quiz:
    quiz = Quiz(question=question, answer=answer)
    quiz.save()
    log.info("[Quiz] created id=%s", quiz.id)
    return quiz


def update_quiz(quiz: Quiz, question: str, answer: str) -> Quiz:
    quiz.question = question
    quiz.answer = answer
    quiz.save(update_fields=EDITABLE_FIELDS + ["updated_at"])
    log.info("[Quiz] updated id=%s", quiz.id)
    return quiz


def delete_quiz(quiz: Quiz) -> None:
    quiz_id = quiz.id
    quiz.delete()
    log.info("[Quiz] deleted id=%s", quiz_id)
