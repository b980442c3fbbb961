"""Text front end for the blackjack table."""

from console.io import ConsoleInput
from console.renderer import ConsoleRenderer

__all__ = [
    "ConsoleInput",
    "ConsoleRenderer",
]
