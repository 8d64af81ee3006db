"""
This module provides the `Participant`, `Player` and `Dealer` classes for a game of Blackjack.

A `Participant` is a name plus an owned `BlackjackHand`, with the queries every
seat at the table shares: the hand total, whether it is busted, and how it is
shown. The two variants differ only in how they decide between hitting and
standing:

- `Player` asks a decision provider, by default the yes/no prompt of its IO
  interface.
- `Dealer` follows the house rule: hit on 16 or below, stand on 17 or more.

Exceptions:
    - `NoCardToFlipError`: Raised when the dealer is asked to flip a card it does not have.
    - `InvalidActionError`: Raised when a participant is built without a way to decide.

This module is part of the `twentyone` package.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from twentyone.blackjack.constants import DEALER_HIT_LIMIT, DEALER_NAME
from twentyone.blackjack.display import Outcome, render, render_outcome
from twentyone.blackjack.hand import BlackjackHand
from twentyone.common.card import Card
from twentyone.common.io_interface import IOInterface


class NoCardToFlipError(Exception):
    """Raised when the dealer is asked to flip a card it does not have."""

    pass


class InvalidActionError(Exception):
    """Raised when a participant cannot make a hit/stand decision."""

    pass


class Participant(ABC):
    """
    Abstract base class for anyone holding a hand at the table.

    :param name: Name shown at the table
    :param io_interface: Where hand displays and announcements are sent
    """

    def __init__(self, name: str, io_interface: IOInterface):
        self.name = name
        self.io_interface = io_interface
        self.hand = BlackjackHand()
        # Called with (participant, hit) after every decision
        self.on_decision: Optional[Callable[["Participant", bool], None]] = None

    @abstractmethod
    def wants_hit(self) -> bool:
        """The variant-specific hit/stand decision."""

    def is_hitting(self) -> bool:
        """Decide whether to take another card."""
        hit = self.wants_hit()
        if self.on_decision is not None:
            self.on_decision(self, hit)
        return hit

    def total(self) -> int:
        return self.hand.total()

    def is_busted(self) -> bool:
        return self.hand.is_busted()

    def add_card(self, card: Card) -> None:
        self.hand.add_card(card)

    def clear_hand(self) -> None:
        """Release every card held."""
        self.hand.clear()

    def show_hand(self) -> None:
        self.io_interface.output(render(self))

    def announce(self, outcome: Outcome) -> None:
        self.io_interface.output(render_outcome(self.name, outcome))

    def bust(self) -> None:
        self.announce(Outcome.BUST)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.hand!r})"


class Player(Participant):
    """A player in a game of Blackjack, whose decisions come from outside."""

    def __init__(
        self,
        name: str,
        io_interface: IOInterface,
        decide: Optional[Callable[[str], bool]] = None,
    ):
        """
        Creates a new player.

        :param decide: Called with the hit prompt, returns True to hit. Falls
                       back to the IO interface's yes/no question.
        """
        super().__init__(name, io_interface)
        if decide is None:
            if not isinstance(io_interface, IOInterface):
                raise InvalidActionError(
                    f"{self.name} must have a decision provider or IOInterface."
                )
            decide = io_interface.ask_yes_no
        self.decide = decide

    @property
    def hit_prompt(self) -> str:
        return f"{self.name}, do you want a hit? (Y/N): "

    def wants_hit(self) -> bool:
        return bool(self.decide(self.hit_prompt))

    def win(self) -> None:
        self.announce(Outcome.WIN)

    def lose(self) -> None:
        self.announce(Outcome.LOSE)

    def push(self) -> None:
        self.announce(Outcome.PUSH)


class Dealer(Participant):
    """The dealer, who plays to a fixed rule and hides its first card."""

    def __init__(self, io_interface: IOInterface, name: str = DEALER_NAME):
        super().__init__(name, io_interface)

    def wants_hit(self) -> bool:
        return self.total() <= DEALER_HIT_LIMIT

    @property
    def hole_card(self) -> Optional[Card]:
        """The first card dealt to the dealer."""
        return self.hand.first_card

    def flip_first_card(self) -> Card:
        """
        Turn the dealer's first card over.

        :raises NoCardToFlipError: If the dealer holds no cards.
        """
        card = self.hole_card
        if card is None:
            raise NoCardToFlipError("No card to flip!")
        card.flip()
        return card
