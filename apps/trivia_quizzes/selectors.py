# apps/trivia_quizzes/selectors.py
from __future__ import annotations
import re
from django.db.models import QuerySet
from .models import Quiz

__all__ = ["search_quizzes"]


def search_quizzes(search: str | None = None) -> QuerySet:
    """
    Quizzes whose question contains the search words in the given order.
    Runs of spaces act as wildcards: "capital  france" matches
    "Capital of France?".
    """
    qs = Quiz.objects.order_by("id")
    search = (search or "").strip()
    if not search:
        return qs

    words = re.split(r" +", search)
    pattern = ".*".join(re.escape(w) for w in words)
    return qs.filter(question__iregex=pattern)
