"""Input boundary: line sources, typed parsers and the re-prompt loop."""

import re
from abc import ABC, abstractmethod
from collections import deque
from decimal import Decimal
from enum import Enum
from typing import Callable, Iterable, TypeVar

from blackjack.errors import InputStreamFailure, InvalidInput
from blackjack.logging_utils import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Action(Enum):
    """Player decisions during their turn."""

    HIT = "hit"
    STAND = "stand"


_ACTION_TOKENS = {
    "h": Action.HIT,
    "hit": Action.HIT,
    "s": Action.STAND,
    "stand": Action.STAND,
}

_CONTINUE_TOKENS = {
    "y": True,
    "yes": True,
    "n": False,
    "no": False,
}


class InputSource(ABC):
    """Supplier of raw text lines in response to prompts."""

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """
        Return the next line typed in response to `prompt`.

        Raises:
            InputStreamFailure: if no more input can be read
        """
        ...


class ScriptedInput(InputSource):
    """Input source that replays a fixed list of lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = deque(lines)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise InputStreamFailure(f"Script exhausted at prompt {prompt!r}")
        return self._lines.popleft()

    @property
    def remaining(self) -> int:
        """Return the number of unread lines."""
        return len(self._lines)


def _parse_int(text: str, reason: str) -> int:
    # ASCII digits with an optional sign, no digit separators
    token = text.strip()
    if not _INTEGER.fullmatch(token):
        raise InvalidInput(text, reason)
    return int(token)


def parse_player_count(text: str, min_players: int = 1, max_players: int = 5) -> int:
    """Parse a player count within the table's bounds."""
    count = _parse_int(text, "not a number")
    if not min_players <= count <= max_players:
        raise InvalidInput(text, f"must be between {min_players} and {max_players}")
    return count


def parse_bid(text: str, wallet: Decimal) -> int:
    """Parse a whole, positive bet that the wallet can cover."""
    amount = _parse_int(text, "not a whole number")
    if amount <= 0:
        raise InvalidInput(text, "bet must be positive")
    if amount > wallet:
        raise InvalidInput(text, "bet exceeds wallet")
    return amount


def parse_action(text: str) -> Action:
    """Parse a hit/stand token, case-insensitively."""
    action = _ACTION_TOKENS.get(text.strip().casefold())
    if action is None:
        raise InvalidInput(text, "expected h/hit or s/stand")
    return action


def parse_continue(text: str) -> bool:
    """Parse a yes/no token, case-insensitively."""
    answer = _CONTINUE_TOKENS.get(text.strip().casefold())
    if answer is None:
        raise InvalidInput(text, "expected y/yes or n/no")
    return answer


def prompt_until(
    source: InputSource,
    prompt: str,
    parser: Callable[[str], T],
    retry_message: str,
    notify: Callable[[str], None] | None = None,
) -> T:
    """
    Ask `source` until `parser` accepts the answer.

    There is no retry limit. `InputStreamFailure` from the source is not
    caught.
    """
    while True:
        text = source.read_line(prompt)
        try:
            return parser(text)
        except InvalidInput as exc:
            logger.debug("Rejected input: %s", exc)
            if notify is not None:
                notify(retry_message)
