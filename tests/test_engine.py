"""Tests for the game state machine."""

import pytest

from helpers import CLUB_RULE, COUNTRY_RULE, make_card
from football_cards.config import Config, RulesConfig
from football_cards.game.engine import (
    ALREADY_ENDED,
    CommitStatus,
    GameStateMachine,
    describe_play,
)
from football_cards.game.validator import NO_CARDS_SELECTED
from football_cards.models.card import Catalog, CombinationType
from football_cards.models.game_state import EventKind, MatchStatus


def positions(engine, *card_ids):
    """Get hand positions of the given card ids."""
    return [i for i, card in enumerate(engine.snapshot().hand) if card.id in card_ids]


def play_any_two(engine):
    return engine.commit_turn([0, 1])


@pytest.fixture
def engine(small_catalog, no_shuffle):
    return GameStateMachine(small_catalog, rng=no_shuffle)


class TestInitialState:
    """Tests for a freshly built match."""

    def test_initial_state(self, engine):
        snapshot = engine.snapshot()
        assert snapshot.current_turn == 1
        assert snapshot.total_score == 0
        assert not snapshot.ended
        assert len(snapshot.hand) == 6
        assert snapshot.deck_remaining == 6
        assert snapshot.selection == ()
        assert snapshot.last_record is None
        assert engine.state.status == MatchStatus.IN_PROGRESS

    def test_opening_hand_from_deck_end(self, engine):
        assert [c.id for c in engine.snapshot().hand] == ["c12", "c11", "c10", "c9", "c8", "c7"]

    def test_small_catalog_hand(self, no_shuffle):
        catalog = Catalog(cards=(make_card("a", 1), make_card("b", 2)), combinations=(COUNTRY_RULE,))
        engine = GameStateMachine(catalog, rng=no_shuffle)
        assert len(engine.snapshot().hand) == 2
        assert engine.snapshot().deck_remaining == 0


class TestCommitTurn:
    """Tests for GameStateMachine.commit_turn."""

    def test_commit_no_combination(self, engine):
        result = engine.commit_turn(positions(engine, "c8", "c7"))

        assert result.accepted
        assert result.record.turn == 1
        assert result.record.base_sum == 15
        assert result.record.combination == CombinationType.NONE
        assert result.record.score == 15

        snapshot = result.snapshot
        assert snapshot.total_score == 15
        assert snapshot.current_turn == 2
        assert len(snapshot.hand) == 6
        assert snapshot.deck_remaining == 4
        assert [c.id for c in snapshot.hand][-2:] == ["c6", "c5"]
        assert snapshot.last_record == result.record

    def test_score_accumulates(self, no_shuffle):
        """Test total 15 followed by a plain 3 + 4 play gives 22."""
        cards = (
            make_card("f1", 1),
            make_card("f2", 2),
            make_card("a3", 3),
            make_card("a4", 4),
            make_card("a7", 7),
            make_card("a8", 8),
            make_card("b10", 10),
            make_card("b11", 11),
        )
        engine = GameStateMachine(Catalog(cards=cards, combinations=(COUNTRY_RULE, CLUB_RULE)), rng=no_shuffle)

        engine.commit_turn(positions(engine, "a7", "a8"))
        assert engine.state.total_score == 15
        turn = engine.state.current_turn

        result = engine.commit_turn(positions(engine, "a3", "a4"))

        assert result.accepted
        assert engine.state.total_score == 22
        assert engine.state.current_turn == turn + 1

    def test_commit_club_combination_via_selection(self, no_shuffle):
        cards = (
            make_card("haaland", 9, country="Norway", club="Manchester City"),
            make_card("mbappe", 9, country="France", club="Real Madrid"),
            make_card("vinicius", 11, country="Brazil", club="Real Madrid"),
            make_card("bellingham", 8, country="England", club="Real Madrid"),
        )
        engine = GameStateMachine(Catalog(cards=cards, combinations=(COUNTRY_RULE, CLUB_RULE)), rng=no_shuffle)
        for position in positions(engine, "mbappe", "vinicius", "bellingham"):
            engine.toggle_selection(position)

        result = engine.confirm_play()

        assert result.accepted
        assert result.record.combination == CombinationType.CLUB
        assert result.record.score == 56
        assert describe_play(result.record) == "Play confirmed! 28 x 2 = 56 points."
        assert engine.snapshot().selection == ()

    def test_rejected_leaves_state_unchanged(self, engine):
        before = engine.snapshot()

        result = engine.commit_turn([0])

        assert result.status == CommitStatus.REJECTED
        assert not result.accepted
        assert "at least 2" in result.errors[0]
        assert result.record is None
        assert engine.snapshot() == before
        assert engine.state.history == []

    def test_rejected_keeps_selection(self, engine):
        engine.toggle_selection(2)
        result = engine.confirm_play()
        assert result.status == CommitStatus.REJECTED
        assert engine.snapshot().selection == (2,)

    def test_empty_selection(self, engine):
        result = engine.confirm_play()
        assert result.status == CommitStatus.REJECTED
        assert result.errors == [NO_CARDS_SELECTED]
        assert result.events[0].kind == EventKind.TURN_REJECTED

    def test_too_many_cards(self, engine):
        result = engine.commit_turn(range(6))
        assert result.status == CommitStatus.REJECTED
        assert "at most 5" in result.errors[0]

    def test_out_of_range_position(self, engine):
        with pytest.raises(ValueError):
            engine.commit_turn([0, 9])
        assert engine.state.current_turn == 1

    def test_total_matches_history(self, engine):
        for _ in range(3):
            play_any_two(engine)
            assert engine.state.total_score == sum(r.score for r in engine.state.history)
            assert len(engine.snapshot().hand) <= 6


class TestDeckExhaustion:
    """Tests for hand refills when the deck runs out."""

    def test_partial_refill(self, no_shuffle):
        cards = tuple(make_card(f"c{i}", i) for i in range(1, 9))
        engine = GameStateMachine(Catalog(cards=cards, combinations=(COUNTRY_RULE,)), rng=no_shuffle)
        assert engine.snapshot().deck_remaining == 2

        result = engine.commit_turn([0, 1, 2])

        assert result.accepted
        assert result.events[0].detail["drawn"] == 2
        assert len(result.snapshot.hand) == 5
        assert result.snapshot.deck_remaining == 0

        result = engine.commit_turn([0, 1])
        assert result.accepted
        assert result.events[0].detail["drawn"] == 0
        assert len(result.snapshot.hand) == 3

    def test_draw_conservation(self, engine):
        deck = engine.session.deck
        for _ in range(3):
            engine.commit_turn([0, 1, 2])
            assert deck.drawn + deck.remaining == deck.initial_size


class TestMatchEnd:
    """Tests for the end-of-match transition."""

    def test_fourth_commit_ends_match(self, engine):
        for _ in range(3):
            result = play_any_two(engine)
            assert not result.ended

        result = play_any_two(engine)

        assert result.accepted
        assert result.ended
        assert engine.state.status == MatchStatus.ENDED
        assert engine.state.current_turn == 5
        assert [e.kind for e in result.events] == [EventKind.TURN_COMMITTED, EventKind.MATCH_ENDED]

    def test_commit_after_end(self, engine):
        for _ in range(4):
            play_any_two(engine)
        total = engine.state.total_score
        before = engine.snapshot()

        result = play_any_two(engine)

        assert result.status == CommitStatus.ALREADY_ENDED
        assert result.errors == [ALREADY_ENDED]
        assert engine.state.total_score == total
        assert engine.snapshot() == before
        assert len(engine.state.history) == 4

    def test_end_transition_once(self, engine):
        ended_events = []
        engine.subscribe(
            lambda snapshot, events: ended_events.extend(e for e in events if e.kind == EventKind.MATCH_ENDED)
        )
        for _ in range(6):
            play_any_two(engine)

        assert len(ended_events) == 1
        assert engine.state.end() is False

    def test_selection_ignored_after_end(self, engine):
        for _ in range(4):
            play_any_two(engine)
        assert engine.toggle_selection(0) == []
        assert engine.snapshot().selection == ()

    def test_configured_match_length(self, small_catalog, no_shuffle):
        config = Config(rules=RulesConfig(max_turns=2))
        engine = GameStateMachine(small_catalog, config, rng=no_shuffle)
        play_any_two(engine)
        assert play_any_two(engine).ended


class TestUndoAndReset:
    """Tests for undo_selection and reset_session."""

    def test_undo_clears_selection_only(self, engine):
        play_any_two(engine)
        engine.toggle_selection(0)
        engine.toggle_selection(3)

        events = engine.undo_selection()

        assert [e.kind for e in events] == [EventKind.SELECTION_CLEARED]
        assert engine.snapshot().selection == ()
        assert len(engine.state.history) == 1
        assert engine.state.current_turn == 2

    def test_undo_without_selection(self, engine):
        assert engine.undo_selection() == []

    def test_reset_after_end(self, engine, small_catalog):
        for _ in range(4):
            play_any_two(engine)
        assert engine.ended

        events = engine.reset_session()

        snapshot = engine.snapshot()
        assert [e.kind for e in events] == [EventKind.SESSION_RESET]
        assert not snapshot.ended
        assert snapshot.current_turn == 1
        assert snapshot.total_score == 0
        assert engine.state.history == []
        assert len(snapshot.hand) == 6
        assert snapshot.deck_remaining == len(small_catalog.cards) - 6
        assert engine.commit_turn([0, 1]).accepted


class TestSubscribers:
    """Tests for snapshot listeners."""

    def test_listener_receives_transitions(self, engine):
        received = []
        engine.subscribe(lambda snapshot, events: received.append((snapshot, events)))

        engine.toggle_selection(1)
        engine.toggle_selection(4)
        engine.confirm_play()

        assert len(received) == 3
        assert received[0][0].selection == (1,)
        assert received[0][1][0].detail == {"position": 1, "selected": True}
        last_snapshot, last_events = received[-1]
        assert last_events[0].kind == EventKind.TURN_COMMITTED
        assert last_snapshot.current_turn == 2

    def test_unsubscribe(self, engine):
        received = []
        unsubscribe = engine.subscribe(lambda snapshot, events: received.append(events))
        engine.toggle_selection(0)
        unsubscribe()
        engine.toggle_selection(0)
        assert len(received) == 1
