"""Main entry point for the console blackjack table."""

import argparse
import sys
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from random import Random

from blackjack.errors import DeckEmpty, InputStreamFailure
from blackjack.game import BlackjackGame
from blackjack.logging_utils import get_logger, setup_logging
from blackjack.prompts import InputSource, parse_player_count, prompt_until
from blackjack.rules import RuleSet
from config import config
from console.io import ConsoleInput
from console.renderer import ConsoleRenderer

logger = get_logger(__name__)


def wallet_amount(text: str) -> Decimal:
    """Parse a starting wallet: a finite, non-negative amount."""
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {text!r}") from None
    if not amount.is_finite() or amount < 0:
        raise argparse.ArgumentTypeError(f"wallet must be a non-negative amount: {text!r}")
    return amount


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blackjack-table",
        description="Single-deck blackjack for 1-5 players against the dealer.",
    )
    parser.add_argument("--players", type=int, default=config.game.players,
                        help="number of players (asked for when omitted)")
    parser.add_argument("--seed", type=int, default=config.game.seed,
                        help="seed for the shuffle, for reproducible games")
    parser.add_argument("--wallet", type=wallet_amount, default=config.game.starting_wallet,
                        help="starting wallet of every player")
    parser.add_argument("--no-shuffle", dest="shuffle", action="store_false",
                        default=config.game.shuffle,
                        help="deal the deck in its fresh, unshuffled order")
    return parser


def ask_player_count(source: InputSource, rules: RuleSet, renderer: ConsoleRenderer) -> int:
    """Ask until a player count inside the table's bounds is given."""
    return prompt_until(
        source,
        f"How many players ({rules.min_players}-{rules.max_players}) ? ",
        lambda text: parse_player_count(text, rules.min_players, rules.max_players),
        f"Invalid number; please select between {rules.min_players} "
        f"up to {rules.max_players} players",
        renderer.message,
    )


def run(
    argv: list[str] | None = None,
    source: InputSource | None = None,
    renderer: ConsoleRenderer | None = None,
) -> int:
    """
    Play a whole game and return the process exit status.

    Returns:
        0 when the players quit, 1 after a fatal deck or input failure
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        rules = replace(RuleSet(), starting_wallet=args.wallet)
    except ValueError as exc:
        parser.error(str(exc))
    if args.players is not None and not rules.min_players <= args.players <= rules.max_players:
        parser.error(f"--players must be between {rules.min_players} and {rules.max_players}")

    source = source or ConsoleInput()
    renderer = renderer or ConsoleRenderer()

    try:
        if args.players is None:
            num_players = ask_player_count(source, rules, renderer)
        else:
            num_players = args.players

        rng = Random(args.seed) if args.seed is not None else Random()
        game = BlackjackGame(num_players, source, rules=rules, rng=rng, shuffle=args.shuffle)
        renderer.attach(game)
        game.run()
    except DeckEmpty:
        logger.error("The deck ran out of cards, aborting the game")
        return 1
    except InputStreamFailure as exc:
        logger.error("Cannot read player input: %s", exc)
        return 1
    return 0


def main() -> None:
    """Entry point for the console table."""
    setup_logging(config.logging.level)
    try:
        status = run()
    except KeyboardInterrupt:
        status = 130
    sys.exit(status)


if __name__ == "__main__":
    main()
