"""
BlackjackHand implementation with single soft-ace scoring.
"""

from twentyone.blackjack.constants import (
    ACE_VALUE,
    BUST_LIMIT,
    SOFT_ACE_BONUS,
    SOFT_ACE_CEILING,
)
from twentyone.common.hand import Hand


class BlackjackHand(Hand):
    """A hand in the game of Blackjack."""

    # Card.flip() changes values behind the hand's back, so totals are never cached.

    def _hard_total(self) -> int:
        total = 0
        for card in self._cards:
            total += card.value()
        return total

    def _has_ace(self) -> bool:
        return any(card.value() == ACE_VALUE for card in self._cards)

    def total(self) -> int:
        """
        Score the hand.

        An empty hand, or one whose first card is face down, scores 0: its
        total is not yet visible to the table. Otherwise the face-up values are
        summed and a single ace is promoted to 11 when the sum allows it.
        """
        if not self._cards:
            return 0

        if self._cards[0].value() == 0:
            return 0

        total = self._hard_total()
        if self._has_ace() and total <= SOFT_ACE_CEILING:
            total += SOFT_ACE_BONUS
        return total

    def is_busted(self) -> bool:
        return self.total() > BUST_LIMIT

    @property
    def is_soft(self) -> bool:
        """Determine if the hand is soft (an ace is counted as 11)."""
        if not self._cards or self._cards[0].value() == 0:
            return False
        return self._has_ace() and self._hard_total() <= SOFT_ACE_CEILING

    @property
    def first_card(self):
        """The first card dealt to this hand, or None if it is empty."""
        return self._cards[0] if self._cards else None
