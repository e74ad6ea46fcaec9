"""Deck building, shuffling and bounded draws."""

import logging
import random

from football_cards.models.card import Card, Catalog

logger = logging.getLogger(__name__)


class DeckManager:
    """Shuffled, depleting source of cards for one session.

    Cards are drawn from the end of the deck. The deck is never refilled,
    so ``drawn + remaining`` always equals ``initial_size``.
    """

    def __init__(self, cards: list[Card], rng: random.Random | None = None):
        """Initialize deck.

        Args:
            cards: Cards in deck order (copied).
            rng: Random source used for shuffling.
        """
        self._cards: list[Card] = list(cards)
        self._rng = rng or random.Random()
        self.initial_size = len(self._cards)

    @classmethod
    def build(cls, catalog: Catalog, rng: random.Random | None = None) -> "DeckManager":
        """Create an unshuffled deck holding every catalog card."""
        return cls(list(catalog.cards), rng)

    @property
    def remaining(self) -> int:
        """Number of cards left in the deck."""
        return len(self._cards)

    @property
    def drawn(self) -> int:
        """Number of cards drawn so far."""
        return self.initial_size - len(self._cards)

    def shuffle(self) -> None:
        """Shuffle the deck in place (Fisher-Yates)."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self, count: int, capacity_remaining: int | None = None) -> list[Card]:
        """Draw cards from the end of the deck.

        An exhausted deck is not an error: fewer cards (possibly none) are
        returned.

        Args:
            count: Number of cards requested.
            capacity_remaining: Free slots in the receiving hand, if bounded.

        Returns:
            Drawn cards in draw order.
        """
        limit = min(count, len(self._cards))
        if capacity_remaining is not None:
            limit = min(limit, capacity_remaining)

        drawn = [self._cards.pop() for _ in range(max(limit, 0))]
        if len(drawn) < count:
            logger.debug(f"Drew {len(drawn)}/{count} cards ({self.remaining} left in deck)")
        return drawn

    def to_list(self) -> list[Card]:
        """Get the remaining cards in deck order."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)
