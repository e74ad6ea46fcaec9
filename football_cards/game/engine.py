"""Turn engine: the game state machine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable

from football_cards.config import Config
from football_cards.models.card import Catalog, CombinationType
from football_cards.models.game_state import (
    EventKind,
    GameEvent,
    GameSnapshot,
    GameState,
    TurnRecord,
)

from .scoring import ScoringEngine
from .session import GameSession
from .validator import TurnValidator

if TYPE_CHECKING:
    from football_cards.logging import GameLogger

logger = logging.getLogger(__name__)

ALREADY_ENDED = "The match has already ended."

Listener = Callable[[GameSnapshot, list[GameEvent]], None]


class CommitStatus(str, Enum):
    """Outcome of a commit attempt."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"  # Failed validation, nothing changed
    ALREADY_ENDED = "already_ended"  # Match over, nothing changed


@dataclass
class CommitResult:
    """Result of GameStateMachine.commit_turn."""

    status: CommitStatus
    snapshot: GameSnapshot
    errors: list[str] = field(default_factory=list)
    record: TurnRecord | None = None
    events: list[GameEvent] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.status == CommitStatus.ACCEPTED

    @property
    def ended(self) -> bool:
        """Check if the match is over after this commit."""
        return self.snapshot.ended


def describe_play(record: TurnRecord) -> str:
    """Format the status line shown after a confirmed play."""
    return (
        f"Play confirmed! {record.base_sum} x {record.multiplier} = {record.score} points."
    )


class GameStateMachine:
    """Runs a match: validates, scores and records turns until the match ends.

    All operations are synchronous and run to completion. Subscribers
    receive a snapshot and the events of each transition; they never touch
    the session directly.
    """

    def __init__(
        self,
        catalog: Catalog,
        config: Config | None = None,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize the state machine and build the first session.

        Args:
            catalog: Validated catalog
            config: Configuration (uses defaults if not provided)
            rng: Random source for deck shuffles
            game_logger: GameLogger instance for match logging
        """
        self.catalog = catalog
        self.config = config or Config()
        self.rules = self.config.rules
        self.rng = rng or random.Random()
        self.game_logger = game_logger

        self.validator = TurnValidator(self.rules)
        self.scorer = ScoringEngine(self.rules.combination_policy)

        self._listeners: list[Listener] = []
        self.session = GameSession.build(self.catalog, self.rules, self.rng)

        logger.info(
            f"Match started: {len(self.session.hand)} cards in hand, "
            f"{self.session.deck.remaining} in deck"
        )
        if self.game_logger:
            self.game_logger.log_session_start(self.catalog, self.snapshot())

    @property
    def state(self) -> GameState:
        return self.session.state

    @property
    def ended(self) -> bool:
        return self.session.state.ended

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a snapshot listener.

        Returns:
            Callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, snapshot: GameSnapshot, events: list[GameEvent]) -> None:
        for listener in list(self._listeners):
            listener(snapshot, events)

    def snapshot(self) -> GameSnapshot:
        """Get a read-only view of the current session."""
        state = self.session.state
        return GameSnapshot(
            hand=self.session.hand.cards,
            selection=self.session.hand.selection,
            total_score=state.total_score,
            current_turn=state.current_turn,
            ended=state.ended,
            deck_remaining=self.session.deck.remaining,
            last_record=state.history[-1] if state.history else None,
        )

    # Intents

    def toggle_selection(self, position: int) -> list[GameEvent]:
        """Select or deselect a hand position. Ignored once the match ended."""
        if self.ended:
            logger.debug(f"Ignoring selection of {position}: match ended")
            return []

        selected = self.session.hand.toggle(position)
        events = [
            GameEvent(
                kind=EventKind.SELECTION_CHANGED,
                detail={"position": position, "selected": selected},
            )
        ]
        self._notify(self.snapshot(), events)
        return events

    def undo_selection(self) -> list[GameEvent]:
        """Clear the pending selection.

        Committed turns are never reverted.
        """
        hand = self.session.hand
        if not hand.selection:
            return []

        hand.clear_selection()
        events = [GameEvent(kind=EventKind.SELECTION_CLEARED)]
        self._notify(self.snapshot(), events)
        return events

    def confirm_play(self) -> CommitResult:
        """Commit the current selection."""
        return self.commit_turn()

    def commit_turn(self, positions: Iterable[int] | None = None) -> CommitResult:
        """Play the cards at the given hand positions.

        Args:
            positions: Hand positions to play. None plays the current selection.

        Returns:
            CommitResult. Rejections leave the session unchanged.
        """
        state = self.session.state
        hand = self.session.hand

        if state.ended:
            return self._reject(CommitStatus.ALREADY_ENDED, [ALREADY_ENDED])

        chosen = sorted(set(hand.selection if positions is None else positions))
        cards = hand.cards_at(chosen)

        validation = self.validator.validate(cards, state.current_turn)
        if not validation.is_valid:
            return self._reject(CommitStatus.REJECTED, validation.errors)

        result = self.scorer.score(cards, self.catalog.combinations)
        record = TurnRecord(
            turn=state.current_turn,
            cards=tuple(cards),
            combination=result.combination,
            base_sum=result.base_sum,
            multiplier=result.multiplier,
            score=result.score,
        )

        hand.commit(chosen)
        drawn = hand.refill(self.session.deck, len(chosen))
        state.record_turn(record)

        logger.info(
            f"Turn {record.turn}: {len(cards)} cards, {self._combination_name(record.combination)}, "
            f"{record.score} points (total {state.total_score})"
        )
        logger.debug(f"Drew {len(drawn)} cards, {self.session.deck.remaining} left in deck")

        events = [
            GameEvent(
                kind=EventKind.TURN_COMMITTED,
                detail={
                    "turn": record.turn,
                    "score": record.score,
                    "combination": record.combination.value,
                    "drawn": len(drawn),
                },
            )
        ]

        if state.current_turn > self.rules.max_turns and state.end():
            logger.info(f"Match ended after {state.completed_turns} turns, final score {state.total_score}")
            events.append(
                GameEvent(
                    kind=EventKind.MATCH_ENDED,
                    detail={"total_score": state.total_score, "turns": state.completed_turns},
                )
            )

        snapshot = self.snapshot()
        if self.game_logger:
            self.game_logger.log_turn(record, snapshot)
            if state.ended:
                self.game_logger.log_match_end(state)

        self._notify(snapshot, events)
        return CommitResult(
            status=CommitStatus.ACCEPTED,
            snapshot=snapshot,
            record=record,
            events=events,
        )

    def reset_session(self) -> list[GameEvent]:
        """Discard the match and start a new one from the same catalog."""
        self.session = GameSession.build(self.catalog, self.rules, self.rng)
        logger.info("Session reset")

        events = [GameEvent(kind=EventKind.SESSION_RESET)]
        snapshot = self.snapshot()
        if self.game_logger:
            self.game_logger.log_session_reset(snapshot)
        self._notify(snapshot, events)
        return events

    def _reject(self, status: CommitStatus, errors: list[str]) -> CommitResult:
        logger.debug(f"Turn {self.session.state.current_turn} rejected ({status.value}): {errors}")
        if self.game_logger:
            self.game_logger.log_rejected(self.session.state.current_turn, status.value, errors)

        events = [
            GameEvent(
                kind=EventKind.TURN_REJECTED,
                detail={"status": status.value, "errors": list(errors)},
            )
        ]
        snapshot = self.snapshot()
        self._notify(snapshot, events)
        return CommitResult(status=status, snapshot=snapshot, errors=list(errors), events=events)

    @staticmethod
    def _combination_name(combination: CombinationType) -> str:
        if combination == CombinationType.NONE:
            return "no combination"
        return f"{combination.value} combination"
