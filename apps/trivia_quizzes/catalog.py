# apps/trivia_quizzes/catalog.py
from __future__ import annotations

import logging

from django.db import DatabaseError

from .exceptions import FailureKind, GameError
from .game import QuizItem
from .models import Quiz

log = logging.getLogger(__name__)


def _to_item(quiz: Quiz) -> QuizItem:
    return QuizItem(id=quiz.id, question=quiz.question, answer=quiz.answer)


class QuizCatalog:
    """Read-only view of the quiz table for the random-play engine."""

    def count(self) -> int:
        try:
            return Quiz.objects.count()
        except DatabaseError as e:
            log.exception("[QuizCatalog] count failed: %s", e)
            raise GameError(FailureKind.CATALOG_UNAVAILABLE, "quiz catalog is unavailable") from e

    def list(self) -> list[QuizItem]:
        try:
            return [_to_item(q) for q in Quiz.objects.order_by("id")]
        except DatabaseError as e:
            log.exception("[QuizCatalog] list failed: %s", e)
            raise GameError(FailureKind.CATALOG_UNAVAILABLE, "quiz catalog is unavailable") from e

    def get_by_id(self, quiz_id: int) -> QuizItem | None:
        try:
            quiz = Quiz.objects.filter(id=quiz_id).first()
        except DatabaseError as e:
            log.exception("[QuizCatalog] get_by_id(%s) failed: %s", quiz_id, e)
            raise GameError(FailureKind.CATALOG_UNAVAILABLE, "quiz catalog is unavailable") from e
        return _to_item(quiz) if quiz else None
