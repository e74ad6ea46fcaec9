"""Game models."""

from .card import Card, Catalog, CombinationRule, CombinationType
from .game_state import (
    EventKind,
    GameEvent,
    GameSnapshot,
    GameState,
    MatchStatus,
    TurnRecord,
)

__all__ = [
    "Card",
    "Catalog",
    "CombinationRule",
    "CombinationType",
    "EventKind",
    "GameEvent",
    "GameSnapshot",
    "GameState",
    "MatchStatus",
    "TurnRecord",
]
