"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from blackjack.cards import Card

SCORE_LIMIT = 21


def score(cards: Iterable[Card], limit: int = SCORE_LIMIT) -> int:
    """
    Calculate the best total for a sequence of cards.

    Every Ace starts at 11 and is downgraded to 1, one at a time, only
    while the total is over the limit.
    """
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        total += card.value

    while total > limit and aces > 0:
        total -= 10
        aces -= 1

    return total


def is_blackjack(cards: Iterable[Card], limit: int = SCORE_LIMIT) -> bool:
    """Check for a natural: exactly two cards totalling 21."""
    cards = list(cards)
    return len(cards) == 2 and score(cards, limit) == limit


@dataclass
class Hand:
    """An ordered blackjack hand."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        """Return the best hand value (see `score`)."""
        return score(self.cards)

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return is_blackjack(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > SCORE_LIMIT

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        return f"{cards_str} ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
