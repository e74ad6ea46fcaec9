"""Player hand and pending selection."""

from typing import Iterable

from football_cards.models.card import Card

from .deck import DeckManager


class HandManager:
    """Holds the live hand and the transient selection of hand positions."""

    def __init__(self, capacity: int = 6):
        """Initialize an empty hand.

        Args:
            capacity: Maximum number of cards held.
        """
        self.capacity = capacity
        self._cards: list[Card] = []
        self._selection: set[int] = set()

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def selection(self) -> tuple[int, ...]:
        """Selected positions in ascending order."""
        return tuple(sorted(self._selection))

    @property
    def free_slots(self) -> int:
        return max(self.capacity - len(self._cards), 0)

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self._cards):
            raise ValueError(
                f"Position {position} out of range for hand of {len(self._cards)}"
            )

    def toggle(self, position: int) -> bool:
        """Add or remove a position from the selection.

        Returns:
            True if the position is selected after the call.
        """
        self._check_position(position)
        if position in self._selection:
            self._selection.discard(position)
            return False
        self._selection.add(position)
        return True

    def clear_selection(self) -> None:
        self._selection.clear()

    def cards_at(self, positions: Iterable[int]) -> list[Card]:
        """Get the cards at the given positions, in position order."""
        unique = sorted(set(positions))
        for position in unique:
            self._check_position(position)
        return [self._cards[p] for p in unique]

    def selected_cards(self) -> list[Card]:
        return self.cards_at(self._selection)

    def commit(self, positions: Iterable[int]) -> list[Card]:
        """Remove the cards at the given positions and clear the selection.

        Cards are removed by position, so duplicate card identities in the
        hand do not matter.

        Returns:
            The removed cards, in position order.
        """
        removed_positions = set(positions)
        removed = self.cards_at(removed_positions)
        self._cards = [c for i, c in enumerate(self._cards) if i not in removed_positions]
        self._selection.clear()
        return removed

    def refill(self, deck: DeckManager, count: int | None = None) -> list[Card]:
        """Draw from the deck into free slots.

        Args:
            deck: Deck to draw from.
            count: Number of cards to draw (defaults to all free slots).

        Returns:
            Drawn cards.
        """
        if count is None:
            count = self.free_slots
        drawn = deck.draw(count, capacity_remaining=self.free_slots)
        self._cards.extend(drawn)
        return drawn

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __str__(self) -> str:
        if not self._cards:
            return "[]"
        return "[" + ", ".join(c.name for c in self._cards) + "]"
