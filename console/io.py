"""Reading player input from the terminal."""

from typing import Callable

from blackjack.errors import InputStreamFailure
from blackjack.prompts import InputSource


class ConsoleInput(InputSource):
    """Input source backed by `input()`."""

    def __init__(self, reader: Callable[[str], str] = input) -> None:
        self._reader = reader

    def read_line(self, prompt: str) -> str:
        try:
            return self._reader(prompt).strip()
        except EOFError as exc:
            raise InputStreamFailure("Input stream closed") from exc
