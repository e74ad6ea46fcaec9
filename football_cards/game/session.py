"""Per-match mutable state."""

import logging
import random
from dataclasses import dataclass

from football_cards.config import RulesConfig
from football_cards.models.card import Catalog
from football_cards.models.game_state import GameState

from .deck import DeckManager
from .hand import HandManager

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Deck, hand and game state of one match.

    Owned by a single GameStateMachine and mutated only through it.
    """

    deck: DeckManager
    hand: HandManager
    state: GameState

    @classmethod
    def build(
        cls,
        catalog: Catalog,
        rules: RulesConfig | None = None,
        rng: random.Random | None = None,
    ) -> "GameSession":
        """Build a fresh session: shuffled deck, full opening hand, turn 1.

        Args:
            catalog: Validated catalog.
            rules: Rules configuration (uses defaults if not provided).
            rng: Random source for shuffling.

        Returns:
            New GameSession.
        """
        rules = rules or RulesConfig()

        deck = DeckManager.build(catalog, rng)
        deck.shuffle()

        hand = HandManager(capacity=rules.hand_size)
        hand.refill(deck)

        logger.debug(f"Session built: hand {len(hand)}, deck {deck.remaining}")
        return cls(deck=deck, hand=hand, state=GameState())
