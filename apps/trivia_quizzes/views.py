# apps/trivia_quizzes/views.py
import logging

from django.conf import settings
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from .catalog import QuizCatalog
from .exceptions import FailureKind, GameError
from .game import answers_match, evaluate, start_or_resume
from .models import Quiz
from .selectors import search_quizzes
from .serializers import (
    CheckSerializer,
    PlaySerializer,
    QuizSerializer,
    serialize_outcome,
)
from .services import create_quiz, delete_quiz, update_quiz
from .shuffle import make_rng
from .store import GameSessionStore

log = logging.getLogger(__name__)

_ERROR_STATUS = {
    FailureKind.CATALOG_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    FailureKind.INVALID_GAME_STATE: status.HTTP_409_CONFLICT,
    FailureKind.SESSION_CONFLICT: status.HTTP_409_CONFLICT,
}


class QuizPagination(PageNumberPagination):
    page_query_param = "pageno"

    def get_page_size(self, request):
        return getattr(settings, "QUIZZES_PER_PAGE", 10)

    def get_page_number(self, request, paginator):
        # missing, non-numeric or non-positive pageno means the first page
        try:
            page_number = int(request.query_params.get(self.page_query_param, 1))
        except (TypeError, ValueError):
            return 1
        return page_number if page_number > 0 else 1


#
# Catalog CRUD + single question play/check
#
class QuizViewSet(viewsets.ModelViewSet):
    serializer_class = QuizSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = QuizPagination
    queryset = Quiz.objects.all()

    def get_queryset(self):
        if self.action == "list":
            return search_quizzes(self.request.query_params.get("search", ""))
        return Quiz.objects.all()

    def perform_create(self, serializer):
        data = serializer.validated_data
        serializer.instance = create_quiz(data["question"], data["answer"])

    def perform_update(self, serializer):
        quiz = serializer.instance
        data = serializer.validated_data
        update_quiz(
            quiz,
            data.get("question", quiz.question),
            data.get("answer", quiz.answer),
        )

    def perform_destroy(self, instance):
        delete_quiz(instance)

    @action(detail=True, methods=["get"])
    def play(self, request, pk=None):
        quiz = self.get_object()
        answer = request.query_params.get("answer", "")
        return Response(PlaySerializer({"quiz": quiz, "answer": answer}).data)

    @action(detail=True, methods=["get"])
    def check(self, request, pk=None):
        quiz = self.get_object()
        answer = request.query_params.get("answer", "")
        result = answers_match(answer, quiz.answer)
        return Response(CheckSerializer({"quiz": quiz, "answer": answer, "result": result}).data)


#
# Random play
#
def _visitor_key(request) -> str:
    """Anonymous visitor identity = Django session key (created on demand)."""
    session = request.session
    if not session.session_key:
        session.save()
        # nothing is stored in the session itself; force the cookie out
        session.modified = True
    return session.session_key


def _error_response(exc: GameError) -> Response:
    return Response(
        {"detail": exc.detail, "kind": exc.kind.value},
        status=_ERROR_STATUS.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


@api_view(["GET", "DELETE"])
@permission_classes([permissions.AllowAny])
def random_play(request):
    """
    GET    /api/quizzes/randomplay/  -> next question, or game over
    DELETE /api/quizzes/randomplay/  -> abandon the current game
    """
    store = GameSessionStore()
    visitor_key = _visitor_key(request)

    if request.method == "DELETE":
        store.delete(visitor_key)
        return Response(status=status.HTTP_204_NO_CONTENT)

    catalog = QuizCatalog()
    rng = make_rng(getattr(settings, "RANDOM_PLAY_SEED", None))
    try:
        # a corrupted record is replaced by a fresh game rather than locking the visitor out
        outcome = store.run(
            visitor_key,
            lambda session: start_or_resume(session, catalog, rng),
            discard_unreadable=True,
        )
    except GameError as e:
        log.warning("[RandomPlay] play failed (%s): %s", e.kind.value, e.detail)
        return _error_response(e)
    return Response(serialize_outcome(outcome), status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def random_check(request, quiz_id: int):
    """
    GET /api/quizzes/randomcheck/<quiz_id>/?answer=...

    Reloading this URL after a correct answer does not add the point twice.
    """
    answer = request.query_params.get("answer", "")
    store = GameSessionStore()
    visitor_key = _visitor_key(request)
    try:
        outcome = store.run(visitor_key, lambda session: evaluate(session, answer, quiz_id=quiz_id))
    except GameError as e:
        log.warning("[RandomPlay] check failed (%s): %s", e.kind.value, e.detail)
        return _error_response(e)
    return Response(serialize_outcome(outcome), status=status.HTTP_200_OK)
