from enum import Enum


class FailureKind(str, Enum):
    CATALOG_UNAVAILABLE = "catalog_unavailable"
    INVALID_GAME_STATE = "invalid_game_state"
    SESSION_CONFLICT = "session_conflict"


class GameError(Exception):
    """Random-play failure; callers branch on ``kind``."""

    def __init__(self, kind: FailureKind, detail: str = ""):
        self.kind = kind
        self.detail = detail or kind.value
        super().__init__(self.detail)
