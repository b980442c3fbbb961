"""Blackjack table rules."""

from dataclasses import dataclass
from decimal import Decimal

from blackjack.hand import SCORE_LIMIT


@dataclass(frozen=True)
class RuleSet:
    """
    Table rules for the single-deck, no-split game.

    There is no doubling, splitting, insurance or surrender; the only
    knobs are the ones the round engine consults.
    """

    # Cards dealt to every hand at the start of a round
    initial_cards: int = 2

    # Dealer stands on this total or higher, soft totals included
    dealer_stands_on: int = 17

    # Blackjack payout (3:2 = 1.5)
    blackjack_payout: Decimal = Decimal("1.5")

    # Table
    starting_wallet: Decimal = Decimal("1000")
    min_players: int = 1
    max_players: int = 5

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.initial_cards < 2:
            raise ValueError("initial_cards must be at least 2")
        if self.dealer_stands_on > SCORE_LIMIT:
            raise ValueError(f"dealer_stands_on cannot exceed {SCORE_LIMIT}")
        if self.blackjack_payout < 1:
            raise ValueError("blackjack_payout must be at least 1.0")
        if not 1 <= self.min_players <= self.max_players:
            raise ValueError("player bounds must satisfy 1 <= min_players <= max_players")
        if self.starting_wallet < 0:
            raise ValueError("starting_wallet cannot be negative")


def dealer_should_hit(score: int, rules: RuleSet) -> bool:
    """Dealer draws while below the stand total; no player input involved."""
    return score < rules.dealer_stands_on
