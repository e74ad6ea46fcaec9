"""Game state models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .card import Card, CombinationType


class MatchStatus(str, Enum):
    """State of the match."""

    IN_PROGRESS = "in_progress"
    ENDED = "ended"  # Terminal until the session is reset


class TurnRecord(BaseModel):
    """Immutable record of one committed play."""

    model_config = ConfigDict(frozen=True)

    turn: int
    cards: tuple[Card, ...]
    combination: CombinationType
    base_sum: int | float
    multiplier: int | float
    score: int | float


class GameState(BaseModel):
    """Turn counter, score and history of a match."""

    current_turn: int = 1
    total_score: int | float = 0
    status: MatchStatus = MatchStatus.IN_PROGRESS
    history: list[TurnRecord] = Field(default_factory=list)

    @property
    def ended(self) -> bool:
        """Check if the match has reached its terminal state."""
        return self.status == MatchStatus.ENDED

    @property
    def completed_turns(self) -> int:
        return len(self.history)

    def record_turn(self, record: TurnRecord) -> None:
        """Append a committed play and advance the turn counter."""
        self.history.append(record)
        self.total_score += record.score
        self.current_turn += 1

    def end(self) -> bool:
        """Move to the terminal state.

        Returns:
            True if this call performed the transition, False if the
            match had already ended.
        """
        if self.ended:
            return False
        self.status = MatchStatus.ENDED
        return True

    def __str__(self) -> str:
        parts = [f"Turn {self.current_turn}", f"Score {self.total_score}"]
        if self.ended:
            parts.append("[ENDED]")
        return " ".join(parts)


class EventKind(str, Enum):
    """Kind of event emitted by an engine transition."""

    SELECTION_CHANGED = "selection_changed"
    SELECTION_CLEARED = "selection_cleared"
    TURN_COMMITTED = "turn_committed"
    TURN_REJECTED = "turn_rejected"
    MATCH_ENDED = "match_ended"
    SESSION_RESET = "session_reset"


class GameEvent(BaseModel):
    """Something that happened during an engine transition."""

    model_config = ConfigDict(frozen=True)

    kind: EventKind
    detail: dict[str, Any] = Field(default_factory=dict)


class GameSnapshot(BaseModel):
    """Read-only view of a session handed to the presentation layer."""

    model_config = ConfigDict(frozen=True)

    hand: tuple[Card, ...]
    selection: tuple[int, ...]
    total_score: int | float
    current_turn: int
    ended: bool
    deck_remaining: int
    last_record: TurnRecord | None = None
