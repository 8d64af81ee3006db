"""
Text rendering for the table.

A participant renders as its name, a tab, then each card token followed by a
tab, then the total in parentheses when the total is visible::

    Alice:	As	Kh	(21)
    Dealer:	XX	7d
    Bob:	<empty>

Outcome announcements are separate lines such as ``Alice wins.``.
"""

from enum import Enum

EMPTY_HAND = "<empty>"


class Outcome(Enum):
    WIN = "wins"
    LOSE = "loses"
    PUSH = "pushes"
    BUST = "busts"


def render(participant) -> str:
    """Render a participant's name, cards and visible total."""
    hand = participant.hand
    if hand.is_empty():
        return f"{participant.name}:\t{EMPTY_HAND}"

    text = f"{participant.name}:\t" + "".join(f"{card}\t" for card in hand.cards)
    total = hand.total()
    if total != 0:
        text += f"({total})"
    return text


def render_outcome(name: str, outcome: Outcome) -> str:
    return f"{name} {outcome.value}."
