"""Shared fixtures for tests."""

import pytest

from football_cards.models.card import Catalog
from helpers import CLUB_RULE, COUNTRY_RULE, NoShuffleRandom, make_card


@pytest.fixture
def rules():
    return (COUNTRY_RULE, CLUB_RULE)


@pytest.fixture
def no_shuffle():
    return NoShuffleRandom()


@pytest.fixture
def small_catalog():
    """Twelve cards with no shared country or club."""
    cards = tuple(make_card(f"c{i}", i) for i in range(1, 13))
    return Catalog(cards=cards, combinations=(COUNTRY_RULE, CLUB_RULE))


@pytest.fixture
def catalog_data():
    """Raw catalog document as decoded from JSON."""
    return {
        "cards": [
            {"id": "mbappe", "name": "Kylian Mbappe", "country": "France", "club": "Real Madrid", "base_value": 9, "rarity": "epic"},
            {"id": "vinicius", "name": "Vinicius Junior", "country": "Brazil", "club": "Real Madrid", "base_value": 11},
            {"id": "haaland", "name": "Erling Haaland", "country": "Norway", "club": "Manchester City", "base_value": 9},
        ],
        "combinations": [
            {"type": "country", "required_players": 2, "multiplier": 3},
            {"type": "club", "required_players": 2, "multiplier": 2},
        ],
    }
