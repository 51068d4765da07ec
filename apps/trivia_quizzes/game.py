# apps/trivia_quizzes/game.py
"""
Random-play engine.

Every operation takes the visitor's current GameSession (or None when no
game is running) and returns ``(new_session_or_None, outcome)``. Nothing in
here reads or writes storage; GameSessionStore threads the state between
requests.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Any, Union

from .exceptions import FailureKind, GameError
from .shuffle import shuffled_order

log = logging.getLogger(__name__)

__all__ = [
    "QuizItem",
    "GameSession",
    "NextQuestion",
    "CheckResult",
    "GameOver",
    "normalize_answer",
    "answers_match",
    "new_game",
    "start_or_resume",
    "evaluate",
]


def normalize_answer(text: str | None) -> str:
    return (text or "").strip().casefold()


def answers_match(submitted: str | None, expected: str | None) -> bool:
    return normalize_answer(submitted) == normalize_answer(expected)


#
# Data model
#
@dataclass(frozen=True)
class QuizItem:
    id: int
    question: str
    answer: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "question": self.question, "answer": self.answer}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "QuizItem":
        return QuizItem(id=int(d["id"]), question=str(d["question"]), answer=str(d["answer"]))


@dataclass(frozen=True)
class GameSession:
    order: tuple[int, ...]
    items: tuple[QuizItem, ...]
    score: int = 0
    awaiting_reload_guard: bool = True

    @property
    def total(self) -> int:
        return len(self.order)

    @property
    def finished(self) -> bool:
        return self.score == self.total

    def item_at(self, position: int) -> QuizItem:
        return self.items[self.order[position]]

    def validate(self) -> "GameSession":
        n = len(self.order)
        if len(self.items) != n:
            raise GameError(
                FailureKind.INVALID_GAME_STATE,
                f"order has {n} entries but {len(self.items)} items were stored",
            )
        if sorted(self.order) != list(range(n)):
            raise GameError(FailureKind.INVALID_GAME_STATE, "order is not a permutation")
        if not 0 <= self.score <= n:
            raise GameError(FailureKind.INVALID_GAME_STATE, f"score {self.score} out of range 0..{n}")
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "order": list(self.order),
            "items": [item.to_dict() for item in self.items],
            "score": self.score,
            "awaiting_reload_guard": self.awaiting_reload_guard,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "GameSession":
        try:
            session = GameSession(
                order=tuple(int(i) for i in d["order"]),
                items=tuple(QuizItem.from_dict(item) for item in d["items"]),
                score=int(d["score"]),
                awaiting_reload_guard=bool(d["awaiting_reload_guard"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise GameError(FailureKind.INVALID_GAME_STATE, f"unreadable game record: {e}") from e
        return session.validate()


#
# Outcomes handed to the presentation layer
#
@dataclass(frozen=True)
class NextQuestion:
    quiz: QuizItem
    score: int
    total: int


@dataclass(frozen=True)
class CheckResult:
    quiz: QuizItem
    submitted_answer: str
    correct: bool
    score: int


@dataclass(frozen=True)
class GameOver:
    score: int
    total: int

    @property
    def empty_catalog(self) -> bool:
        return self.total == 0


Outcome = Union[NextQuestion, CheckResult, GameOver]


#
# Operations
#
def new_game(catalog, rng: random.Random | None = None) -> GameSession | None:
    """
    Snapshot the catalog and shuffle it. Returns None for an empty catalog.
    """
    count = catalog.count()
    items = tuple(catalog.list())
    if count != len(items):
        log.warning("[RandomPlay] catalog count=%s but list returned %s items", count, len(items))
    if not items:
        return None

    order = tuple(shuffled_order(len(items), rng))
    log.info("[RandomPlay] new game with %s questions", len(items))
    return GameSession(order=order, items=items, score=0, awaiting_reload_guard=True)


def start_or_resume(
    session: GameSession | None,
    catalog,
    rng: random.Random | None = None,
) -> tuple[GameSession | None, Outcome]:
    if session is None:
        session = new_game(catalog, rng)
        if session is None:
            return None, GameOver(score=0, total=0)

    if session.finished:
        log.info("[RandomPlay] game over, score=%s/%s", session.score, session.total)
        return None, GameOver(score=session.score, total=session.total)

    # a freshly served question arms the guard for its check
    if not session.awaiting_reload_guard:
        session = replace(session, awaiting_reload_guard=True)
    return session, NextQuestion(
        quiz=session.item_at(session.score),
        score=session.score,
        total=session.total,
    )


def evaluate(
    session: GameSession | None,
    submitted_answer: str,
    quiz_id: int | None = None,
) -> tuple[GameSession | None, CheckResult]:
    """
    Score one answer.

    With the guard armed the answer is for ``order[score]``. With the guard
    spent the request repeats the check that was already committed, so it is
    matched against ``order[score - 1]`` and can no longer change the score.
    A wrong answer ends the game either way.
    """
    if session is None:
        raise GameError(FailureKind.INVALID_GAME_STATE, "no random-play game in progress")

    if session.awaiting_reload_guard:
        if session.finished:
            raise GameError(FailureKind.INVALID_GAME_STATE, "every question has already been answered")
        position = session.score
    else:
        if session.score == 0:
            raise GameError(FailureKind.INVALID_GAME_STATE, "no committed answer to repeat")
        position = session.score - 1

    quiz = session.item_at(position)
    if quiz_id is not None and quiz.id != quiz_id:
        raise GameError(
            FailureKind.INVALID_GAME_STATE,
            f"quiz {quiz_id} is not the current random-play question",
        )

    submitted_answer = submitted_answer or ""
    if not answers_match(submitted_answer, quiz.answer):
        log.info("[RandomPlay] wrong answer on quiz=%s, final score=%s", quiz.id, session.score)
        return None, CheckResult(quiz=quiz, submitted_answer=submitted_answer, correct=False, score=session.score)

    if session.awaiting_reload_guard:
        session = replace(session, score=session.score + 1, awaiting_reload_guard=False)
    return session, CheckResult(quiz=quiz, submitted_answer=submitted_answer, correct=True, score=session.score)
