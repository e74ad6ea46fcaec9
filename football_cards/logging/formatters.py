"""Formatters for match log output."""

from typing import Iterable

from football_cards.models.card import Card
from football_cards.models.game_state import TurnRecord


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Card id and base value (e.g., "mbappe:9").
    """
    return f"{card.id}:{card.base_value}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string.

    Args:
        cards: Cards to format.

    Returns:
        Comma-separated card strings (e.g., "mbappe:9,haaland:9").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_record(record: TurnRecord) -> dict[str, object]:
    """Format a turn record to a JSON-ready dict."""
    return {
        "turn": record.turn,
        "cards": format_cards(record.cards),
        "combination": record.combination.value,
        "base_sum": record.base_sum,
        "multiplier": record.multiplier,
        "score": record.score,
    }
