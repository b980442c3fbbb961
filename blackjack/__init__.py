"""Blackjack table engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.errors import (
    BlackjackError,
    DeckEmpty,
    InputStreamFailure,
    InvalidBet,
    InvalidInput,
)
from blackjack.hand import Hand, is_blackjack, score
from blackjack.participants import Dealer, Player
from blackjack.rules import RuleSet

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "score",
    "is_blackjack",
    "Dealer",
    "Player",
    "RuleSet",
    "BlackjackError",
    "DeckEmpty",
    "InputStreamFailure",
    "InvalidBet",
    "InvalidInput",
]
