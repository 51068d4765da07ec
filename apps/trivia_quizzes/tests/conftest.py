import pytest

from apps.trivia_quizzes.exceptions import FailureKind, GameError
from apps.trivia_quizzes.game import QuizItem
from apps.trivia_quizzes.models import Quiz


class FakeCatalog:
    """In-memory catalog; counts calls so tests can check it is read once."""

    def __init__(self, items=(), fail=False):
        self.items = list(items)
        self.fail = fail
        self.calls = 0

    def count(self):
        self.calls += 1
        if self.fail:
            raise GameError(FailureKind.CATALOG_UNAVAILABLE, "catalog down")
        return len(self.items)

    def list(self):
        self.calls += 1
        if self.fail:
            raise GameError(FailureKind.CATALOG_UNAVAILABLE, "catalog down")
        return list(self.items)

    def get_by_id(self, quiz_id):
        return next((i for i in self.items if i.id == quiz_id), None)


@pytest.fixture
def two_items():
    return [
        QuizItem(id=1, question="2+2?", answer="4"),
        QuizItem(id=2, question="Capital of France?", answer="Paris"),
    ]


@pytest.fixture
def catalog(two_items):
    return FakeCatalog(two_items)


@pytest.fixture
def quizzes(db):
    return [
        Quiz.objects.create(question="Capital of Italy?", answer="Rome"),
        Quiz.objects.create(question="Capital of France?", answer="Paris"),
        Quiz.objects.create(question="2+2?", answer="4"),
    ]
