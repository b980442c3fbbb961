"""Printing the table from game events."""

from decimal import Decimal
from typing import Callable

from blackjack.game import BlackjackGame, EventType, GameEvent


def _seat(data: dict) -> str:
    return f"Player #{data['player'] + 1}"


def _money(amount: Decimal) -> str:
    return f"{amount:.2f}"


class ConsoleRenderer:
    """
    Output collaborator for the console.

    Purely observational: every method turns one event into lines of text.
    """

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write
        self._handlers: dict[EventType, Callable[[dict], None]] = {
            EventType.GAME_STARTED: self._game_started,
            EventType.BID_REQUESTED: self._bid_requested,
            EventType.PLAYER_SITS_OUT: self._sits_out,
            EventType.DEALER_BLACKJACK: self._dealer_blackjack,
            EventType.TABLE_SHOWN: self._table,
            EventType.PLAYER_BUSTS: self._busts,
            EventType.DEALER_HAND: self._dealer_hand,
            EventType.PLAYER_HAND: self._player_hand,
            EventType.PLAYER_BLACKJACK: self._player_blackjack,
            EventType.PLAYER_WINS: self._wins,
            EventType.PLAYER_LOSES: self._loses,
            EventType.PUSH: self._push,
            EventType.BALANCE_UPDATED: self._balance,
            EventType.WALLET_REPORTED: self._wallet,
            EventType.INVALID_INPUT: self._invalid_input,
            EventType.GAME_ENDED: self._game_ended,
        }

    def attach(self, game: BlackjackGame) -> None:
        """Subscribe to every event the game emits."""
        game.subscribe(self.handle)

    def handle(self, event: GameEvent) -> None:
        handler = self._handlers.get(event.event_type)
        if handler is not None:
            handler(event.data)

    def message(self, text: str) -> None:
        self._write(text)

    def _hand(self, title: str, cards: list[str], score_label: str, score: int) -> None:
        self._write(title)
        for card in cards:
            self._write(card)
        self._write(f"{score_label}: {score}")
        self._write("")

    def _game_started(self, data: dict) -> None:
        self._write(
            f"{data['players']} player(s) have been added with {_money(data['wallet'])} "
            "in the wallet each of them. Let's start the game!"
        )

    def _bid_requested(self, data: dict) -> None:
        self._write("")
        self._write(f"Getting bid for player {data['player'] + 1}")

    def _sits_out(self, data: dict) -> None:
        self._write(f"{_seat(data)} has ${_money(data['wallet'])} and sits this round out")

    def _dealer_blackjack(self, data: dict) -> None:
        self._write("Dealer has a Blackjack!")
        self._hand("Dealer Hand:", data["cards"], "Dealer Total Score", data["score"])

    def _table(self, data: dict) -> None:
        self._write("")
        self._write(_seat(data))
        self._write("")
        self._write("Dealer Hand:")
        self._write(data["dealer_card"])
        self._write("")
        self._write("Your Hand:")
        for card in data["cards"]:
            self._write(card)
        self._write("")

    def _busts(self, data: dict) -> None:
        self._write(f"{_seat(data)} is over 21!")
        self._hand(f"{_seat(data)} Hand:", data["cards"], "Total Score", data["score"])

    def _dealer_hand(self, data: dict) -> None:
        self._hand("Dealer Hand:", data["cards"], "Dealer Total Score", data["score"])

    def _player_hand(self, data: dict) -> None:
        self._hand(f"{_seat(data)} Hand:", data["cards"], "Total Score", data["score"])

    def _player_blackjack(self, data: dict) -> None:
        self._write(f"{_seat(data)} has a Blackjack!")

    def _wins(self, data: dict) -> None:
        self._write(f"{_seat(data)} wins!")

    def _loses(self, data: dict) -> None:
        self._write(f"Dealer defeats {_seat(data)}!")

    def _push(self, data: dict) -> None:
        self._write("It's a push...")

    def _balance(self, data: dict) -> None:
        verb = "won back" if data["is_push"] else "won"
        self._write(f"{_seat(data)} {verb} ${_money(data['amount'])} this round")

    def _wallet(self, data: dict) -> None:
        self._write(f"{_seat(data)} Wallet: ${_money(data['wallet'])}")

    def _invalid_input(self, data: dict) -> None:
        self._write(data["message"])

    def _game_ended(self, data: dict) -> None:
        if data["reason"] == "bankrupt":
            self._write("No player can cover a bet. Game over.")
        else:
            self._write("Thanks for playing!")
