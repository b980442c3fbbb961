"""Pytest fixtures for blackjack table tests."""

import pytest
from random import Random

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.game import BlackjackGame
from blackjack.hand import Hand
from blackjack.prompts import ScriptedInput
from blackjack.rules import RuleSet


def make_hand(*cards: str) -> Hand:
    """Build a hand from card strings like 'AH', '10C'."""
    return Hand([Card.from_string(c) for c in cards])


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.KING, Suit.HEARTS))
    return hand


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def rules():
    """Default ruleset."""
    return RuleSet()


@pytest.fixture
def make_game():
    """Factory for a game over a stacked deck and scripted input."""

    def _make(cards, lines, num_players=1, rules=None):
        source = ScriptedInput(lines)
        game = BlackjackGame(
            num_players,
            source,
            rules=rules,
            shuffle=False,
            deck=Deck.stacked(cards),
        )
        return game, source

    return _make
