"""Exceptions raised by the blackjack core."""


class BlackjackError(Exception):
    """Base class for all blackjack errors."""


class DeckEmpty(BlackjackError, IndexError):
    """Raised when drawing from a deck with no cards left."""

    def __init__(self, message: str = "Cannot draw from empty deck") -> None:
        super().__init__(message)


class InvalidInput(BlackjackError, ValueError):
    """Raised when a line of player input cannot be understood."""

    def __init__(self, text: str, reason: str = "") -> None:
        self.text = text
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid input {text!r}{detail}")


class InputStreamFailure(BlackjackError, EOFError):
    """Raised when the input source can no longer supply lines."""


class InvalidBet(BlackjackError, ValueError):
    """Raised when a bet is not a positive amount covered by the wallet."""
