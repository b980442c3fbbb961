"""Round engine and state management."""

from blackjack.game.events import GameEvent, EventType
from blackjack.game.payout import Outcome, payout_amount, resolve_outcome
from blackjack.game.state import GameState
from blackjack.game.engine import BlackjackGame

__all__ = [
    "GameEvent",
    "EventType",
    "Outcome",
    "payout_amount",
    "resolve_outcome",
    "GameState",
    "BlackjackGame",
]
