"""Blackjack round engine with state machine."""

from decimal import Decimal
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Deck
from blackjack.errors import BlackjackError
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.payout import Outcome, payout_amount, resolve_outcome
from blackjack.game.state import GameState
from blackjack.logging_utils import get_logger
from blackjack.participants import Dealer, Participant, Player
from blackjack.prompts import Action, InputSource, parse_continue, prompt_until
from blackjack.rules import RuleSet

logger = get_logger(__name__)

_OUTCOME_EVENTS = {
    Outcome.BLACKJACK: EventType.PLAYER_WINS,
    Outcome.WIN: EventType.PLAYER_WINS,
    Outcome.LOSS: EventType.PLAYER_LOSES,
    Outcome.PUSH: EventType.PUSH,
}


def _cards(participant: Participant) -> list[str]:
    return [str(card) for card in participant.hand]


class BlackjackGame:
    """
    Single-deck blackjack table for 1-5 players against the dealer.

    The engine owns the deck, the dealer and the players. Decisions come
    from an `InputSource`; everything observable goes out as events.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal", "source": "betting", "dest": "initial_deal"},
        {"trigger": "check_dealer", "source": "initial_deal", "dest": "dealer_blackjack_check"},
        {"trigger": "dealer_blackjack", "source": "dealer_blackjack_check", "dest": "payout"},
        {"trigger": "start_player_turns", "source": "dealer_blackjack_check", "dest": "player_turns"},
        {"trigger": "start_dealer_turn", "source": "player_turns", "dest": "dealer_turn"},
        {"trigger": "settle", "source": "dealer_turn", "dest": "payout"},
        {"trigger": "report", "source": "payout", "dest": "results"},
        {"trigger": "ask_continue", "source": "results", "dest": "continue_decision"},
        {"trigger": "new_round", "source": "continue_decision", "dest": "betting"},
        {"trigger": "end_game", "source": "*", "dest": "game_over"},
    ]

    def __init__(
        self,
        num_players: int,
        source: InputSource,
        rules: RuleSet | None = None,
        rng: Random | None = None,
        shuffle: bool = True,
        deck: Deck | None = None,
    ) -> None:
        """
        Seat the players and build the deck.

        Args:
            num_players: Number of players, fixed for the whole game
            source: Where bids, actions and the continue answer come from
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for reproducible shuffles
            shuffle: Shuffle the deck once before the first round
            deck: Use this deck instead of a fresh 52-card one
        """
        self.rules = rules or RuleSet()
        if not self.rules.min_players <= num_players <= self.rules.max_players:
            raise ValueError(
                f"num_players must be between {self.rules.min_players} "
                f"and {self.rules.max_players}"
            )

        self.source = source
        self.deck = deck if deck is not None else Deck(rng=rng)
        self._shuffle = shuffle
        self._started = False

        self.players = [Player(wallet=self.rules.starting_wallet) for _ in range(num_players)]
        self.dealer = Dealer()
        self.seated: list[int] = []
        self.round_number = 0
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="betting",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _notify(self, message: str) -> None:
        self.events.emit_new(EventType.INVALID_INPUT, message=message)

    def start(self) -> None:
        """Shuffle the deck once; later rounds keep drawing from it."""
        if self._started:
            return
        self._started = True
        self.events.emit_new(
            EventType.GAME_STARTED,
            players=len(self.players),
            wallet=self.rules.starting_wallet,
        )
        if self._shuffle:
            self.deck.shuffle()
            self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(self.deck))

    def run(self) -> None:
        """Play rounds until the players quit or nobody can bet."""
        while self.play_round():
            pass

    def play_round(self) -> bool:
        """
        Play one full round, from bets to the continue question.

        Returns:
            True if another round should be played

        Raises:
            DeckEmpty: if the deck runs out mid-round
            InputStreamFailure: if the input source fails
        """
        if self.state != GameState.BETTING:
            raise BlackjackError(f"Cannot start a round in state {self.state}")

        self.start()
        self.round_number += 1
        logger.info("Round %d starting, %d cards in deck", self.round_number, len(self.deck))
        self.events.emit_new(EventType.ROUND_STARTED, round=self.round_number)

        self.seated = self._take_bets()
        if not self.seated:
            logger.info("No player can cover a bet, ending game")
            self.events.emit_new(EventType.GAME_ENDED, reason="bankrupt")
            self.end_game()
            return False

        self.deal()
        self._deal_initial_hands()

        self.check_dealer()
        if self.dealer.is_blackjack:
            self.events.emit_new(
                EventType.DEALER_BLACKJACK,
                cards=_cards(self.dealer),
                score=self.dealer.score,
            )
            self.dealer_blackjack()
        else:
            self.start_player_turns()
            for idx in self.seated:
                if self.players[idx].is_blackjack:
                    continue
                self._play_player(idx)

            self.start_dealer_turn()
            self._play_dealer()
            self.settle()

        self._pay_out()

        self.report()
        self._report_wallets()
        self.events.emit_new(EventType.ROUND_ENDED, round=self.round_number)

        self.ask_continue()
        keep_playing = prompt_until(
            self.source,
            "Do you want to start a new round? 'y' or 'n' ",
            parse_continue,
            "Invalid option; please type Y to continue or N to exit",
            self._notify,
        )
        if keep_playing:
            self.new_round()
        else:
            self.events.emit_new(EventType.GAME_ENDED, reason="quit")
            self.end_game()
        return keep_playing

    def _take_bets(self) -> list[int]:
        """Collect bets in seat order; broke players sit the round out."""
        seated = []
        for idx, player in enumerate(self.players):
            player.hand.clear()
            if not player.can_bet:
                self.events.emit_new(EventType.PLAYER_SITS_OUT, player=idx, wallet=player.wallet)
                continue
            self.events.emit_new(EventType.BID_REQUESTED, player=idx, wallet=player.wallet)
            amount = player.bid(self.source, self._notify)
            self.events.emit_new(EventType.BET_PLACED, player=idx, amount=amount, wallet=player.wallet)
            seated.append(idx)
        return seated

    def _deal_initial_hands(self) -> None:
        """Players first, in seat order, then the dealer."""
        for idx in self.seated:
            player = self.players[idx]
            player.initial_hand(self.deck, self.rules.initial_cards)
            self.events.emit_new(EventType.CARD_DEALT, player=idx, cards=_cards(player))
        self.dealer.initial_hand(self.deck, self.rules.initial_cards)
        self.events.emit_new(EventType.CARD_DEALT, player=None, cards=_cards(self.dealer))

    def _play_player(self, idx: int) -> None:
        """Hit until the player stands or goes over 21."""
        player = self.players[idx]
        while True:
            self.events.emit_new(
                EventType.TABLE_SHOWN,
                player=idx,
                dealer_card=str(self.dealer.upcard),
                cards=_cards(player),
                score=player.score,
            )
            action = player.action(self.source, self._notify)

            if action == Action.STAND:
                self.events.emit_new(EventType.PLAYER_STAND, player=idx, score=player.score)
                return

            card = self.deck.draw()
            player.add(card)
            self.events.emit_new(EventType.PLAYER_HIT, player=idx, card=str(card), score=player.score)

            if player.is_busted:
                self.events.emit_new(
                    EventType.PLAYER_BUSTS,
                    player=idx,
                    cards=_cards(player),
                    score=player.score,
                )
                return

    def _play_dealer(self) -> None:
        """Dealer draws to the stand total. No input is asked for."""
        while self.dealer.should_hit(self.rules):
            card = self.deck.draw()
            self.dealer.add(card)
            self.events.emit_new(EventType.DEALER_HITS, card=str(card), score=self.dealer.score)
        self.events.emit_new(EventType.DEALER_HAND, cards=_cards(self.dealer), score=self.dealer.score)

    def _pay_out(self) -> None:
        """Settle every seated player against the dealer's final hand."""
        dealer_score = self.dealer.score
        dealer_bj = self.dealer.is_blackjack

        for idx in self.seated:
            player = self.players[idx]
            self.events.emit_new(
                EventType.PLAYER_HAND,
                player=idx,
                cards=_cards(player),
                score=player.score,
            )

            outcome = resolve_outcome(player.score, player.is_blackjack, dealer_score, dealer_bj)
            earnings = payout_amount(outcome, player.bet, self.rules)

            if player.is_blackjack:
                self.events.emit_new(EventType.PLAYER_BLACKJACK, player=idx)
            self.events.emit_new(_OUTCOME_EVENTS[outcome], player=idx, outcome=outcome)

            if outcome != Outcome.LOSS:
                is_push = outcome == Outcome.PUSH
                reported = player.balance(earnings, is_push)
                self.events.emit_new(
                    EventType.BALANCE_UPDATED,
                    player=idx,
                    amount=reported,
                    is_push=is_push,
                    wallet=player.wallet,
                )
            logger.info(
                "Player %d %s: bet %d, credited %s, wallet %s",
                idx + 1,
                outcome.name.lower(),
                player.bet,
                earnings,
                player.wallet,
            )
            player.clear_bet()

    def _report_wallets(self) -> None:
        for idx, player in enumerate(self.players):
            self.events.emit_new(EventType.WALLET_REPORTED, player=idx, wallet=player.wallet)

    @property
    def wallets(self) -> list[Decimal]:
        """Current wallet of every player, in seat order."""
        return [player.wallet for player in self.players]
