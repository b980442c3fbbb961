"""Players and the dealer seated at the table."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable

from blackjack.cards import Card, Deck
from blackjack.errors import InvalidBet
from blackjack.hand import Hand
from blackjack.prompts import (
    Action,
    InputSource,
    parse_action,
    parse_bid,
    prompt_until,
)
from blackjack.rules import RuleSet, dealer_should_hit

Notifier = Callable[[str], None]


@dataclass
class Participant:
    """Anyone holding a hand: a player or the dealer."""

    hand: Hand = field(default_factory=Hand)

    def add(self, card: Card) -> None:
        """Append a card to the hand."""
        self.hand.add_card(card)

    def initial_hand(self, deck: Deck, number_of_cards: int = 2) -> None:
        """
        Replace the hand with `number_of_cards` fresh cards from `deck`.

        A `DeckEmpty` from the deck propagates as-is; cards drawn before it
        stay in the hand.
        """
        self.hand.clear()
        for _ in range(number_of_cards):
            self.add(deck.draw())

    @property
    def score(self) -> int:
        return self.hand.value

    @property
    def is_blackjack(self) -> bool:
        return self.hand.is_blackjack

    @property
    def is_busted(self) -> bool:
        return self.hand.is_busted


@dataclass
class Dealer(Participant):
    """The house. No wallet, no bet, fixed drawing policy."""

    @property
    def upcard(self) -> Card | None:
        """The dealer card shown to players during their turns (the second one)."""
        if len(self.hand) < 2:
            return None
        return self.hand.cards[1]

    def should_hit(self, rules: RuleSet) -> bool:
        return dealer_should_hit(self.score, rules)


@dataclass
class Player(Participant):
    """A seated player with a wallet and a bet for the current round."""

    wallet: Decimal = Decimal("1000")
    bet: int = 0

    @property
    def can_bet(self) -> bool:
        """Check if the wallet covers the smallest possible bet."""
        return self.wallet >= 1

    def place_bet(self, amount: int) -> None:
        """Move `amount` from the wallet into the current bet."""
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidBet(f"Bet must be a positive whole number, got {amount!r}")
        if amount > self.wallet:
            raise InvalidBet(f"Bet {amount} exceeds wallet {self.wallet}")
        self.bet = amount
        self.wallet -= amount

    def bid(self, source: InputSource, notify: Notifier | None = None) -> int:
        """Ask for a bet until a valid one is given, then place it."""
        wallet = self.wallet
        amount = prompt_until(
            source,
            f"Your Wallet: ${wallet:.2f}. How much would you like to bet? ",
            lambda text: parse_bid(text, wallet),
            "Invalid bet; please input a new value",
            notify,
        )
        self.place_bet(amount)
        return amount

    def action(self, source: InputSource, notify: Notifier | None = None) -> Action:
        """Ask whether to hit or stand."""
        return prompt_until(
            source,
            "Do you want to hit 'h' or stand 's'? ",
            parse_action,
            "Invalid option; please type H to hit or S to stand",
            notify,
        )

    def balance(self, earnings: Decimal, is_push: bool = False) -> Decimal:
        """
        Credit the round's earnings to the wallet.

        Returns the amount reported to the player: the returned bet on a
        push, otherwise the net win (earnings minus the bet).
        """
        self.wallet += earnings
        if is_push:
            return Decimal(self.bet)
        return earnings - self.bet

    def clear_bet(self) -> None:
        """Forget the settled bet between rounds."""
        self.bet = 0
