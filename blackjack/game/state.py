"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: BETTING → INITIAL_DEAL → DEALER_BLACKJACK_CHECK → PLAYER_TURNS →
    DEALER_TURN → PAYOUT → RESULTS → CONTINUE_DECISION → BETTING
    """

    # Players place their bets
    BETTING = auto()

    # Two cards to each player, then the dealer
    INITIAL_DEAL = auto()

    # Dealer natural ends the round early
    DEALER_BLACKJACK_CHECK = auto()

    # Players hit or stand in seat order
    PLAYER_TURNS = auto()

    # Dealer draws to the stand total
    DEALER_TURN = auto()

    # Bets settled against the dealer
    PAYOUT = auto()

    # Wallets reported
    RESULTS = auto()

    # Ask whether to play another round
    CONTINUE_DECISION = auto()

    # Players quit or nobody can bet
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
