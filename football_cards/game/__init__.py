"""Game logic."""

from .deck import DeckManager
from .engine import CommitResult, CommitStatus, GameStateMachine, describe_play
from .hand import HandManager
from .scoring import (
    ScoreResult,
    ScoringEngine,
    country_first_policy,
    declared_multiplier_policy,
)
from .session import GameSession
from .validator import TurnValidator, ValidationResult

__all__ = [
    "CommitResult",
    "CommitStatus",
    "DeckManager",
    "GameSession",
    "GameStateMachine",
    "HandManager",
    "ScoreResult",
    "ScoringEngine",
    "TurnValidator",
    "ValidationResult",
    "country_first_policy",
    "declared_multiplier_policy",
    "describe_play",
]
