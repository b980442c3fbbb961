"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator

from blackjack.errors import DeckEmpty
from blackjack.logging_utils import get_logger

logger = get_logger(__name__)


class Suit(Enum):
    """Card suits, in deck generation order."""

    HEARTS = "Hearts"
    SPADES = "Spades"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks with blackjack values, in deck generation order."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self.value <= 10:
            return self.value
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


_RANK_MAP = {str(rank): rank for rank in Rank}
_RANK_MAP["T"] = Rank.TEN

_SUIT_MAP = {
    "H": Suit.HEARTS,
    "HEARTS": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "SPADES": Suit.SPADES,
    "♠": Suit.SPADES,
    "D": Suit.DIAMONDS,
    "DIAMONDS": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "CLUBS": Suit.CLUBS,
    "♣": Suit.CLUBS,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}/{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'A/Hearts', '10C', 'Kh' or 'Q♠'."""
        s = s.strip().upper()
        if "/" in s:
            rank_str, _, suit_str = s.partition("/")
        else:
            if len(s) < 2:
                raise ValueError(f"Invalid card string: {s}")
            rank_str, suit_str = s[:-1], s[-1]

        if rank_str not in _RANK_MAP:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_MAP:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_MAP[rank_str], _SUIT_MAP[suit_str])


class Deck:
    """A standard 52-card deck drawn from the top (front)."""

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck in generation order."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    @classmethod
    def stacked(cls, cards: Iterable[Card | str], rng: Random | None = None) -> "Deck":
        """Build a deck whose cards are drawn in exactly the given order."""
        deck = cls(rng=rng)
        deck._cards = [c if isinstance(c, Card) else Card.from_string(c) for c in cards]
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards, suit-major and rank-minor."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """
        Shuffle the deck in place.

        Single Fisher-Yates pass: every position but the last is swapped
        with a uniformly chosen position at or after it.
        """
        cards = self._cards
        last = len(cards) - 1
        for idx in range(last):
            swap = self._rng.randint(idx, last)
            cards[idx], cards[swap] = cards[swap], cards[idx]
        logger.debug("Shuffled %d cards", len(cards))

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise DeckEmpty()
        card = self._cards.pop(0)
        logger.debug("Drew %s, %d left", card, len(self._cards))
        return card

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
