"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

from football_cards.game.engine import describe_play
from football_cards.models.game_state import EventKind

if TYPE_CHECKING:
    from football_cards.models.game_state import GameEvent, GameSnapshot, TurnRecord


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game snapshots to stdout."""

    def __init__(self, max_turns: int = 4):
        """Initialize display.

        Args:
            max_turns: Number of turns in a match (for the turn counter)
        """
        self.max_turns = max_turns

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_status(self, snapshot: "GameSnapshot") -> None:
        """Print turn, score and deck counters."""
        turn = min(snapshot.current_turn, self.max_turns)
        print(
            f"\nTurn {turn}/{self.max_turns} | Score: {snapshot.total_score} "
            f"| Deck: {snapshot.deck_remaining}"
        )

    def print_hand(self, snapshot: "GameSnapshot") -> None:
        """Print the hand, marking selected cards."""
        print(f"Hand ({len(snapshot.hand)}):")
        for i, card in enumerate(snapshot.hand):
            mark = "*" if i in snapshot.selection else " "
            rarity = f" <{card.rarity}>" if card.rarity else ""
            print(f" {mark}{i + 1}. {card}{rarity}")

    def print_play(self, record: "TurnRecord") -> None:
        """Print the result of a confirmed play."""
        print(describe_play(record))

    def print_errors(self, errors: list[str]) -> None:
        for error in errors:
            print(f"  ! {error}")

    def print_final_results(self, snapshot: "GameSnapshot") -> None:
        """Print final match results."""
        self.print_separator()
        print("END OF MATCH")
        print(f"Final score: {snapshot.total_score}")
        self.print_separator()

    def print_help(self) -> None:
        print("Commands: <n> toggle card n | c confirm | u undo | r reset | q quit")

    def on_update(self, snapshot: "GameSnapshot", events: list["GameEvent"]) -> None:
        """Render a transition. Subscribed to the engine."""
        for event in events:
            if event.kind == EventKind.TURN_COMMITTED and snapshot.last_record:
                self.print_play(snapshot.last_record)
            elif event.kind == EventKind.TURN_REJECTED:
                self.print_errors(event.detail.get("errors", []))
            elif event.kind == EventKind.SELECTION_CLEARED:
                print("Selection cleared.")
            elif event.kind == EventKind.SESSION_RESET:
                print("New match started.")
            elif event.kind == EventKind.MATCH_ENDED:
                self.print_final_results(snapshot)
                return

        self.print_status(snapshot)
        self.print_hand(snapshot)
