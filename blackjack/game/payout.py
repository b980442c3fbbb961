"""Settling a player's bet against the dealer."""

from decimal import Decimal
from enum import Enum, auto

from blackjack.hand import SCORE_LIMIT
from blackjack.rules import RuleSet


class Outcome(Enum):
    """Result of one player's hand against the dealer."""

    BLACKJACK = auto()  # natural against a dealer without one
    WIN = auto()
    LOSS = auto()
    PUSH = auto()


def resolve_outcome(
    player_score: int,
    player_blackjack: bool,
    dealer_score: int,
    dealer_blackjack: bool,
    limit: int = SCORE_LIMIT,
) -> Outcome:
    """
    Compare one player against the dealer.

    Checked in order, so exactly one outcome applies:
    player natural beats a dealer without one; a standing player beats a
    busted or lower dealer; a busted player loses to a standing dealer and
    a lower player loses outright. Everything left is a push: both bust,
    equal totals, or both naturals.
    """
    if player_blackjack and not dealer_blackjack:
        return Outcome.BLACKJACK
    if player_score <= limit and (dealer_score > limit or player_score > dealer_score):
        return Outcome.WIN
    if (player_score > limit and dealer_score <= limit) or (
        player_score <= limit and player_score < dealer_score
    ):
        return Outcome.LOSS
    return Outcome.PUSH


def payout_amount(outcome: Outcome, bet: int, rules: RuleSet | None = None) -> Decimal:
    """
    Amount credited back to the wallet. The bet already left it at bid time.

    Returns:
        (1 + blackjack_payout) x bet on a natural, 2 x bet on a win,
        nothing on a loss, the bet itself on a push
    """
    rules = rules or RuleSet()
    stake = Decimal(bet)
    if outcome == Outcome.BLACKJACK:
        return stake * (1 + rules.blackjack_payout)
    if outcome == Outcome.WIN:
        return stake * 2
    if outcome == Outcome.LOSS:
        return Decimal("0")
    return stake
