"""Card and rule builders shared by tests."""

import random

from football_cards.models.card import Card, CombinationRule, CombinationType


class NoShuffleRandom(random.Random):
    """Random source whose Fisher-Yates swaps are all no-ops.

    Keeps the deck in catalog order, so draws come from the end of the
    catalog's card list.
    """

    def randint(self, a, b):
        return b


def make_card(card_id, base_value, country=None, club=None, **extra):
    """Create a card with unique country/club unless given."""
    return Card(
        id=card_id,
        name=extra.pop("name", card_id.title()),
        country=country or f"country-{card_id}",
        club=club or f"club-{card_id}",
        base_value=base_value,
        **extra,
    )


COUNTRY_RULE = CombinationRule(type=CombinationType.COUNTRY, required_players=2, multiplier=3)
CLUB_RULE = CombinationRule(type=CombinationType.CLUB, required_players=2, multiplier=2)
