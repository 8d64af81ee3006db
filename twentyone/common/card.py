"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Clubs, Diamonds, Hearts, and Spades.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Ace through Ten, Jack, Queen, and King. The Ace is 1 structurally; it is
only ever promoted to 11 by hand scoring.

- `Card`: A class representing a playing card. A card has a rank, a suit and a
face-up flag. Rank and suit never change; only the flag does, via `flip`.

This module is part of the `twentyone` package, a Blackjack table engine.
"""

from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def rank_value(self) -> int:
        """The point value of the rank, capped at 10."""
        return min(self.value, 10)

    @property
    def rank_str(self) -> str:
        """A string representation of the rank."""
        if self == Rank.ACE:
            return "A"
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING):
            return self.name[0]
        return str(self.value)

    def __str__(self) -> str:
        return self.rank_str


class Card:
    """
    Class representing a playing card.

    >>> card = Card(Rank.ACE, Suit.SPADES)
    >>> print(card)
    As
    >>> card.flip()
    >>> print(card)
    XX
    """

    __slots__ = ("_rank", "_suit", "face_up")

    def __init__(self, rank: Rank, suit: Suit, face_up: bool = True):
        """
        Initialize a Card instance.

        :param rank: Rank of the card (one of the Rank enums)
        :param suit: Suit of the card (one of the Suit enums)
        :param face_up: Whether the card is dealt face up (default True)
        """
        if not isinstance(rank, Rank):
            raise TypeError(f"Invalid rank: {rank}")
        if not isinstance(suit, Suit):
            raise TypeError(f"Invalid suit: {suit}")
        self._rank = rank
        self._suit = suit
        self.face_up = face_up

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    def flip(self) -> None:
        """Turn the card over."""
        self.face_up = not self.face_up

    def value(self) -> int:
        """
        The point value of the card as seen from the table.

        A face-down card is worth 0. A face-up card is worth its rank capped at
        10, so an Ace counts 1 here.
        """
        if not self.face_up:
            return 0
        return self._rank.rank_value

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self.rank == other.rank and self.suit == other.suit
        return NotImplemented

    def __hash__(self):
        return hash((self._rank, self._suit))

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        if self.face_up:
            return f"Card(Rank.{self._rank.name}, Suit.{self._suit.name})"
        return f"Card(Rank.{self._rank.name}, Suit.{self._suit.name}, face_up=False)"

    def __str__(self) -> str:
        """
        Provide the two-part table token for the card, or XX when face down.

        :return: A string representation of the card.
        """
        if not self.face_up:
            return "XX"
        return f"{self._rank.rank_str}{self._suit.value}"
