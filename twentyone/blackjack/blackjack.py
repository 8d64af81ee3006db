"""
This module is used to run a game of Blackjack.

It can be used to play a game in different modes:
- Interactive console mode, where players answer hit/stand questions at the console.
- Simulation mode, where the rounds run automatically with every player standing.
- Logging mode, where table output is appended to a specified file.

For example, running with no mode flag starts an interactive table,
`--simulate --num_games 100` plays a hundred rounds silently and prints the
statistics, and `--log_file` followed by a filename records the table output.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from twentyone.blackjack.actor import Dealer, NoCardToFlipError, Player
from twentyone.blackjack.decision_logger import DecisionLogger, decision_logger
from twentyone.blackjack.display import Outcome
from twentyone.blackjack.rules import InvalidPlayerCountError, Rules
from twentyone.blackjack.state import DealingState, EndRoundState
from twentyone.blackjack.stats import SimulationStats
from twentyone.common.card import Card
from twentyone.common.deck import Deck, OutOfCardsError
from twentyone.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from twentyone.events import EngineEventType, EventBus, EventEmitter

logger = logging.getLogger(__name__)


class BlackjackGame:
    """
    A class to represent a Blackjack table and run its rounds.

    Attributes
    ----------
    players : list
        Players in the order they joined; they act in this order.
    io_interface : IOInterface
        Interface for input and output operations.
    dealer : Dealer
        Dealer for the game.
    rules : Rules
        Object defining table settings.
    deck : Deck
        The draw pile. Populated and shuffled once when the game is created.
    current_state : GameState
        Current phase of the round.
    stats : SimulationStats
        Statistics for the game.
    events : EventEmitter
        Where round events are published.
    """

    def __init__(
        self,
        rules: Optional[Rules] = None,
        io_interface: Optional[IOInterface] = None,
        rng: Optional[random.Random] = None,
        deck: Optional[Deck] = None,
        events: Optional[EventEmitter] = None,
        decisions: Optional[DecisionLogger] = None,
    ):
        self.rules = rules or Rules()
        self.io_interface = io_interface or DummyIOInterface()
        self.events = events or EventBus.get_instance()
        self.decision_logger = decisions or decision_logger
        self.stats = SimulationStats()
        self.players: List[Player] = []
        self.dealer = Dealer(self.io_interface)
        self.dealer.on_decision = self.record_decision
        self.current_state = DealingState()
        if deck is None:
            self.deck = Deck(rng=rng)
            self.shuffle_deck()
        else:
            self.deck = deck

    def set_state(self, state):
        """Change the current state of the game."""
        logger.debug("Changing state to %s", state)
        self.current_state = state
        self.events.emit(EngineEventType.STATE_CHANGED, {"state": str(state)})

    def add_player(self, player: Player):
        """Seat a player. Players can only join between rounds."""
        if not isinstance(self.current_state, DealingState):
            raise InvalidPlayerCountError("Game has already started.")
        if len(self.players) >= self.rules.max_players:
            raise InvalidPlayerCountError(
                f"The table is full ({self.rules.max_players} players)."
            )
        player.on_decision = self.record_decision
        self.players.append(player)
        logger.info("%s has joined the game", player.name)
        self.events.emit(EngineEventType.PLAYER_JOINED, {"player": player.name})

    def shuffle_deck(self):
        """Refill the deck with a full set of cards and shuffle it."""
        self.deck.populate()
        self.deck.shuffle()
        self.events.emit(EngineEventType.SHUFFLE, {"cards_left": self.deck.size})

    def play_round(self):
        """Play a round of the game until it reaches the end state."""
        self.rules.check_player_count(len(self.players))
        if self.rules.repopulate_each_round:
            self.shuffle_deck()
        while not isinstance(self.current_state, EndRoundState):
            self.current_state.handle(self)
        self.current_state.handle(self)
        return self.stats.report()

    def deal_card(self, participant) -> bool:
        """
        Deal one card from the deck to a participant.

        Returns False, after reporting it, when the deck is empty.
        """
        try:
            self.deck.deal(participant.hand)
        except OutOfCardsError as exc:
            self.report_error(exc)
            return False
        card = participant.hand.cards[-1]
        hidden = participant is self.dealer and participant.hand.size == 1
        self.events.emit(
            EngineEventType.CARD_DEALT,
            {"player": participant.name, "card": "XX" if hidden else str(card)},
        )
        return True

    def flip_dealer_card(self) -> Optional[Card]:
        """Flip the dealer's hole card, reporting if there is none."""
        try:
            return self.dealer.flip_first_card()
        except NoCardToFlipError as exc:
            self.report_error(exc)
            return None

    def play_turn(self, participant):
        """Deal additional cards to a participant until they stand or bust."""
        try:
            self.deck.deal_additional(participant)
        except OutOfCardsError as exc:
            self.report_error(exc)

        if participant.is_busted():
            if participant is not self.dealer:
                self.stats.record(Outcome.BUST)
            self.events.emit(
                EngineEventType.HAND_BUSTED,
                {"player": participant.name, "total": participant.total()},
            )

    def record_decision(self, participant, hit: bool):
        """Log a hit/stand decision and publish it."""
        is_dealer = participant is self.dealer
        reason = "dealer hits on 16 or below" if is_dealer else "player choice"
        self.decision_logger.log_decision(participant, hit, reason)
        self.events.emit(
            EngineEventType.DEALER_ACTION if is_dealer else EngineEventType.PLAYER_ACTION,
            {
                "player": participant.name,
                "action": "hit" if hit else "stand",
                "total": participant.total(),
            },
        )

    def resolve(self, player: Player, outcome: Outcome):
        """Announce a player's result and count it."""
        player.announce(outcome)
        self.stats.record(outcome)
        self.decision_logger.log_outcome(
            player.name, outcome, player.total(), self.dealer.total()
        )
        self.events.emit(
            EngineEventType.HAND_RESULT,
            {
                "player": player.name,
                "result": outcome.name.lower(),
                "total": player.total(),
                "dealer_total": self.dealer.total(),
            },
        )

    def report_error(self, exc: Exception):
        """Tell the table about a recoverable problem and carry on."""
        if isinstance(exc, OutOfCardsError):
            self.stats.deck_exhaustions += 1
        logger.warning("%s", exc)
        self.io_interface.output(str(exc))
        self.events.emit(
            EngineEventType.DEALER_ERROR,
            {"error": type(exc).__name__, "message": str(exc)},
        )


def ask_player_names(io_interface: IOInterface, rules: Rules) -> List[str]:
    """Ask how many players there are, then each of their names."""
    count = io_interface.check_numeric_response(rules.player_count_prompt)
    while not rules.is_valid_player_count(count):
        count = io_interface.check_numeric_response(rules.player_count_prompt)

    names = []
    for i in range(count):
        name = io_interface.input("Enter player name: ").strip()
        names.append(name or f"Player{i + 1}")
    return names


def run_table(game: BlackjackGame, io_interface: IOInterface, num_games: int = 0):
    """
    Play rounds until the players decline another, or for exactly num_games
    rounds when num_games is positive.
    """
    rounds = 0
    while True:
        game.play_round()
        rounds += 1
        if num_games > 0:
            if rounds >= num_games:
                break
        elif not io_interface.ask_yes_no("\nDo you want to play again? (Y/N): "):
            break
    return game.stats.report()


def create_io_interface(args) -> IOInterface:
    """Create the IO interface based on the command line arguments."""
    if args.log_file:
        return LoggingIOInterface(args.log_file)
    if args.simulate:
        return DummyIOInterface()
    return ConsoleIOInterface()


def create_rules(args) -> Rules:
    """Create the Rules object based on the command line arguments."""
    return Rules(repopulate_each_round=args.fresh_deck)


def main(argv=None):
    """
    Main function to start the game.

    It handles command-line arguments to determine the mode of operation,
    seats the players, and then plays rounds until the table is done.
    Finally, it prints out the statistics of the rounds played.
    """
    parser = argparse.ArgumentParser(description="Run a Blackjack table.")
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Run rounds automatically with every player standing.",
        default=False,
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Log table output to the specified file instead of the console.",
    )
    parser.add_argument(
        "--players",
        nargs="+",
        metavar="NAME",
        help="Names of the players. If omitted, they are asked for.",
    )
    parser.add_argument(
        "--num_games",
        type=int,
        default=0,
        help="Number of rounds to play. 0 keeps asking whether to play again.",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed the shuffle for a repeatable game"
    )
    parser.add_argument(
        "--fresh-deck",
        dest="fresh_deck",
        action="store_true",
        help="Repopulate and shuffle the deck before every round.",
        default=False,
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    io_interface = create_io_interface(args)
    rules = create_rules(args)

    interactive = not (args.simulate or args.log_file)
    if not interactive and args.num_games <= 0:
        args.num_games = 1

    if args.players:
        names = args.players
    elif interactive:
        io_interface.output("\t\tWelcome to Blackjack!\n")
        names = ask_player_names(io_interface, rules)
        io_interface.output("")
    else:
        names = ["Player1"]

    try:
        rules.check_player_count(len(names))
    except InvalidPlayerCountError as exc:
        parser.error(str(exc))

    game = BlackjackGame(rules, io_interface, rng=random.Random(args.seed))
    for name in names:
        game.add_player(Player(name, io_interface))

    report = run_table(game, io_interface, args.num_games)

    if not interactive:
        for key, value in report.items():
            print(f"{key}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
