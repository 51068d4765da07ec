# apps/trivia_quizzes/store.py
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Callable, TypeVar

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from .exceptions import FailureKind, GameError
from .game import GameSession
from .models import RandomPlayGame

log = logging.getLogger(__name__)

T = TypeVar("T")

# operation(current_session) -> (new_session, outcome)
Operation = Callable[[GameSession | None], tuple[GameSession | None, T]]


class GameSessionStore:
    """
    Per-visitor random-play state, one RandomPlayGame row per visitor key.

    Writes are compare-and-set on ``version`` so two requests racing on the
    same visitor can never both commit a decision taken from the same
    snapshot.
    """

    def __init__(self, max_attempts: int | None = None):
        self.max_attempts = max_attempts or getattr(settings, "RANDOM_PLAY_MAX_ATTEMPTS", 3)

    def get(self, visitor_key: str, for_update: bool = False) -> tuple[GameSession | None, int]:
        """Returns (session, version); version 0 means no game is stored."""
        record = self._record(visitor_key, for_update)
        if record is None:
            return None, 0
        return GameSession.from_dict(record.state), record.version

    def _record(self, visitor_key: str, for_update: bool) -> RandomPlayGame | None:
        qs = RandomPlayGame.objects.filter(visitor_key=visitor_key)
        if for_update:
            qs = qs.select_for_update()
        return qs.first()

    def put(self, visitor_key: str, session: GameSession, expected_version: int) -> bool:
        state = session.to_dict()
        if expected_version == 0:
            try:
                with transaction.atomic():
                    RandomPlayGame.objects.create(visitor_key=visitor_key, state=state, version=1)
            except IntegrityError:
                return False
            return True

        updated = RandomPlayGame.objects.filter(
            visitor_key=visitor_key,
            version=expected_version,
        ).update(state=state, version=F("version") + 1, updated_at=timezone.now())
        return updated == 1

    def delete(self, visitor_key: str, expected_version: int | None = None) -> bool:
        qs = RandomPlayGame.objects.filter(visitor_key=visitor_key)
        if expected_version is not None:
            qs = qs.filter(version=expected_version)
        deleted, _ = qs.delete()
        return deleted > 0

    def run(self, visitor_key: str, operation: Operation, discard_unreadable: bool = False) -> T:
        """
        Read-modify-write critical section for one visitor.

        The row is locked while the operation runs (where the database
        supports it) and the result is committed with compare-and-set. On a
        lost race the operation is re-run against the committed state.

        With ``discard_unreadable`` a corrupted record is handed to the
        operation as "no game" and is replaced (or removed) under its own
        version; otherwise it raises INVALID_GAME_STATE.
        """
        for attempt in range(1, self.max_attempts + 1):
            with transaction.atomic():
                session, version, discarded = self._read(visitor_key, discard_unreadable)
                new_session, outcome = operation(session)
                if discarded and new_session is None:
                    committed = self.delete(visitor_key, expected_version=version)
                else:
                    committed = self._commit(visitor_key, session, new_session, version)
                if committed:
                    return outcome
            log.warning(
                "[GameSessionStore] concurrent update for %s (attempt %s/%s)",
                visitor_key, attempt, self.max_attempts,
            )
        raise GameError(FailureKind.SESSION_CONFLICT, "game was modified concurrently, try again")

    def _read(self, visitor_key: str, discard_unreadable: bool) -> tuple[GameSession | None, int, bool]:
        record = self._record(visitor_key, for_update=True)
        if record is None:
            return None, 0, False
        try:
            return GameSession.from_dict(record.state), record.version, False
        except GameError as e:
            if not discard_unreadable:
                raise
            log.warning("[GameSessionStore] discarding unreadable game for %s: %s", visitor_key, e.detail)
            return None, record.version, True

    def _commit(self, visitor_key, old, new, version) -> bool:
        if new == old:
            return True
        if new is None:
            return self.delete(visitor_key, expected_version=version)
        return self.put(visitor_key, new, version)

    def purge_stale(self, older_than: timedelta) -> int:
        cutoff = timezone.now() - older_than
        deleted, _ = RandomPlayGame.objects.filter(updated_at__lt=cutoff).delete()
        if deleted:
            log.info("[GameSessionStore] purged %s stale games", deleted)
        return deleted
