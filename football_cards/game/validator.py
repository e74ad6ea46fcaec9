"""Turn validation for submitted plays."""

from dataclasses import dataclass, field
from typing import Sequence

from football_cards.config import RulesConfig
from football_cards.models.card import Card

NO_CARDS_SELECTED = "No cards selected."


@dataclass
class ValidationResult:
    """Result of turn validation."""

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class TurnValidator:
    """Checks a candidate play against the per-turn card limits.

    Deck membership and duplicate plays are not checked.
    """

    def __init__(self, rules: RulesConfig | None = None):
        """Initialize validator.

        Args:
            rules: Rules configuration (uses defaults if not provided)
        """
        self.rules = rules or RulesConfig()

    def validate(self, cards: Sequence[Card], turn_number: int) -> ValidationResult:
        """Validate a play.

        Args:
            cards: Cards the player wants to play
            turn_number: Current turn number (used in messages)

        Returns:
            ValidationResult
        """
        if not cards:
            return ValidationResult(errors=[NO_CARDS_SELECTED])

        errors = []
        min_cards = self.rules.min_cards_per_turn
        max_cards = self.rules.max_cards_per_turn

        if len(cards) < min_cards:
            errors.append(
                f"Turn {turn_number}: at least {min_cards} cards per turn, got {len(cards)}."
            )
        if len(cards) > max_cards:
            errors.append(
                f"Turn {turn_number}: at most {max_cards} cards per turn, got {len(cards)}."
            )

        return ValidationResult(errors=errors)
