"""
This module contains the Deck class, which represents the draw pile.

>>> deck = Deck(seed=7)
>>> deck.size
52
>>> from twentyone.common.hand import Hand
>>> hand = Hand()
>>> deck.deal(hand)
>>> deck.size, hand.size
(51, 1)
"""

import logging
import random
from typing import List, Optional

from twentyone.common.card import Card, Rank, Suit
from twentyone.common.hand import Hand

logger = logging.getLogger(__name__)


class OutOfCardsError(Exception):
    """Raised when a deal is requested from an empty deck."""

    pass


class Deck(Hand):
    """
    A deck of cards. Dealing moves a card out of the deck and into a hand, so a
    card is only ever held by one of them.
    """

    def __init__(
        self,
        cards: Optional[List[Card]] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to stack the deck with (optional).
                      If not provided, the deck is populated with 52 cards.
        :param rng: The random source used for shuffling (optional).
        :param seed: Seed for a fresh random source when no rng is given.
        """
        super().__init__()
        self.rng = rng if rng is not None else random.Random(seed)
        if cards is None:
            self.populate()
        else:
            self._cards.extend(cards)

    def populate(self) -> None:
        """
        Release whatever the deck holds and fill it with one face-up card of
        every rank and suit.

        >>> deck = Deck(cards=[])
        >>> deck.populate()
        >>> len({(c.rank, c.suit) for c in deck.cards})
        52
        """
        self.clear()
        for suit in Suit:
            for rank in Rank:
                self.add_card(Card(rank, suit))

    def shuffle(self) -> "Deck":
        """
        Shuffle the remaining cards in place.
        """
        self.rng.shuffle(self._cards)
        logger.debug("Shuffled %d cards", len(self._cards))
        return self

    def deal(self, hand: Hand) -> None:
        """
        Move the top card of the deck into the given hand.

        :param hand: The hand receiving the card.
        :raises OutOfCardsError: If the deck is empty. Neither the deck nor the
                                 hand is changed.
        """
        if not self._cards:
            raise OutOfCardsError("Out of cards. Unable to deal.")
        hand.add_card(self._cards.pop())

    def deal_additional(self, participant) -> None:
        """
        Keep dealing to a participant for as long as they are not busted and
        still want a hit. The participant's hand is shown after every card and
        a bust is announced as soon as it happens.

        :param participant: An actor exposing is_busted, is_hitting, hand,
                            show_hand and bust.
        :raises OutOfCardsError: If the deck runs dry mid-turn.
        """
        while not participant.is_busted() and participant.is_hitting():
            self.deal(participant.hand)
            participant.show_hand()
            if participant.is_busted():
                participant.bust()

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the deck.
        """
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the deck.

        >>> str(Deck())
        'Deck of 52 cards'
        """
        return f"Deck of {len(self.cards)} cards"
