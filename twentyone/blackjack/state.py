"""
This module provides the round state machine for a Blackjack game. It uses the
state design pattern: each phase of a round is a GameState whose handle method
does the phase's work, reports it to the interface and moves the game to the
next phase. Phases never branch back.

Classes:

GameState: An abstract base class for game states.
DealingState: Two cards to every player, then the dealer, one pass at a time.
HideHoleCardState: The dealer's first card is turned face down.
InitialRevealState: Every hand is shown, with the dealer's total hidden.
PlayersTurnState: Each player hits until they stand or bust.
DealerRevealState: The dealer's hole card is turned face up.
DealersTurnState: The dealer hits on 16 or below.
ResolveState: Every player still standing is told whether they won, lost or pushed.
CleanupState: All hands are released.
EndRoundState: Terminal state of a round.
"""

from abc import ABC, abstractmethod

from twentyone.blackjack.display import Outcome
from twentyone.events import EngineEventType


class GameState(ABC):
    """
    Abstract base class for game states.
    """

    @abstractmethod
    def handle(self, game) -> None:
        """The method that handles the game state."""

    def __str__(self) -> str:
        return self.__class__.__name__


class DealingState(GameState):
    """
    The game state where the dealer is dealing the cards.
    """

    def handle(self, game):
        """
        Deals the opening cards round-robin, players before the dealer on
        every pass, and changes the game state to HideHoleCardState.
        """
        game.events.emit(
            EngineEventType.ROUND_STARTED,
            {
                "round": game.stats.rounds_played + 1,
                "players": [player.name for player in game.players],
                "cards_left": game.deck.size,
            },
        )
        for _ in range(game.rules.initial_cards):
            for player in game.players:
                game.deal_card(player)
            game.deal_card(game.dealer)
        game.set_state(HideHoleCardState())


class HideHoleCardState(GameState):
    """
    The game state where the dealer's first card is turned face down.
    """

    def handle(self, game):
        if game.flip_dealer_card() is not None:
            game.events.emit(EngineEventType.CARD_HIDDEN, {"player": game.dealer.name})
        game.set_state(InitialRevealState())


class InitialRevealState(GameState):
    """
    The game state where every hand is shown before anyone plays.
    """

    def handle(self, game):
        for player in game.players:
            player.show_hand()
        game.dealer.show_hand()
        game.set_state(PlayersTurnState())


class PlayersTurnState(GameState):
    """
    The game state where it's the players' turn to play.
    """

    def handle(self, game):
        """
        Lets every player, in the order they joined, take cards until they
        stand or bust.
        """
        for player in game.players:
            game.io_interface.output("")
            game.play_turn(player)
        game.set_state(DealerRevealState())


class DealerRevealState(GameState):
    """
    The game state where the dealer turns the hole card face up.
    """

    def handle(self, game):
        card = game.flip_dealer_card()
        if card is not None:
            game.events.emit(
                EngineEventType.CARD_REVEALED,
                {"player": game.dealer.name, "card": str(card)},
            )
        game.io_interface.output("")
        game.dealer.show_hand()
        game.set_state(DealersTurnState())


class DealersTurnState(GameState):
    """
    The game state where it's the dealer's turn to play.
    """

    def handle(self, game):
        game.play_turn(game.dealer)
        game.set_state(ResolveState())


class ResolveState(GameState):
    """
    The game state where every player still in the round learns the result.
    """

    def handle(self, game):
        """
        Busted players already lost when they busted and get nothing here.
        """
        dealer = game.dealer
        dealer_total = dealer.total()

        if dealer.is_busted():
            game.stats.dealer_busts += 1
            game.decision_logger.log_dealer_bust(dealer_total)
            for player in game.players:
                if not player.is_busted():
                    game.resolve(player, Outcome.WIN)
        else:
            for player in game.players:
                if player.is_busted():
                    continue
                player_total = player.total()
                if player_total > dealer_total:
                    game.resolve(player, Outcome.WIN)
                elif player_total < dealer_total:
                    game.resolve(player, Outcome.LOSE)
                else:
                    game.resolve(player, Outcome.PUSH)
        game.set_state(CleanupState())


class CleanupState(GameState):
    """
    The game state where all hands are released at the end of the round.
    """

    def handle(self, game):
        for player in game.players:
            player.clear_hand()
        game.dealer.clear_hand()
        game.stats.rounds_played += 1
        game.decision_logger.end_round()
        game.events.emit(
            EngineEventType.ROUND_ENDED,
            {"round": game.stats.rounds_played, "cards_left": game.deck.size},
        )
        game.set_state(EndRoundState())


class EndRoundState(GameState):
    """
    The terminal state of a round. Handling it readies the game for another.
    """

    def handle(self, game):
        game.set_state(DealingState())
