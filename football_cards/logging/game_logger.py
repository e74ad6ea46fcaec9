"""Match logger for turn-by-turn replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from football_cards.models.card import Catalog
from football_cards.models.game_state import GameSnapshot, GameState, TurnRecord

from .formatters import format_cards, format_record


class GameLogConfig(BaseModel):
    """Configuration for match logging."""

    enabled: bool = False
    output_path: str = "match_log.jsonl"


class GameLogger:
    """Logger for match events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize match logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, catalog: Catalog, snapshot: GameSnapshot) -> None:
        """Log match start with the opening hand.

        Args:
            catalog: Catalog the session was built from.
            snapshot: Snapshot right after the opening draw.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "catalog_size": len(catalog.cards),
            "combinations": {
                rule.type.value: rule.multiplier for rule in catalog.combinations
            },
            "hand": format_cards(snapshot.hand),
            "deck_remaining": snapshot.deck_remaining,
        })

    def log_turn(self, record: TurnRecord, snapshot: GameSnapshot) -> None:
        """Log a committed turn.

        Args:
            record: The committed play.
            snapshot: Snapshot after the hand was refilled.
        """
        event: dict[str, Any] = {"type": "turn"}
        event.update(format_record(record))
        event.update({
            "total_score": snapshot.total_score,
            "hand": format_cards(snapshot.hand),
            "deck_remaining": snapshot.deck_remaining,
        })
        self._write(event)

    def log_rejected(self, turn: int, status: str, errors: list[str]) -> None:
        """Log a rejected commit.

        Args:
            turn: Turn number at the time of the attempt.
            status: Rejection status ("rejected" or "already_ended").
            errors: Error messages returned to the player.
        """
        self._write({
            "type": "rejected",
            "turn": turn,
            "status": status,
            "errors": errors,
        })

    def log_match_end(self, state: GameState) -> None:
        """Log match end with the final score."""
        self._write({
            "type": "match_end",
            "turns": state.completed_turns,
            "total_score": state.total_score,
            "scores": [r.score for r in state.history],
        })

    def log_session_reset(self, snapshot: GameSnapshot) -> None:
        """Log a session reset with the new opening hand."""
        self._write({
            "type": "session_reset",
            "timestamp": datetime.now().isoformat(),
            "hand": format_cards(snapshot.hand),
            "deck_remaining": snapshot.deck_remaining,
        })
