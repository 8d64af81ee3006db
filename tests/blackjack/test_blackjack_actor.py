import pytest
from unittest.mock import MagicMock

from twentyone.blackjack.actor import (
    Dealer,
    InvalidActionError,
    NoCardToFlipError,
    Player,
)
from twentyone.common.io_interface import TestIOInterface


def deal(participant, cards):
    for card in cards:
        participant.add_card(card)
    return participant


def test_player_initialization():
    io = TestIOInterface()
    player = Player("Alice", io)
    assert player.name == "Alice"
    assert player.hand.is_empty()
    assert player.io_interface is io
    assert player.total() == 0


def test_player_asks_the_io_interface():
    io = TestIOInterface()
    io.add_decision("Alice", True, False)
    player = Player("Alice", io)
    assert player.is_hitting() is True
    assert player.is_hitting() is False
    assert io.prompts == ["Alice, do you want a hit? (Y/N): "] * 2


def test_player_with_decision_provider():
    decide = MagicMock(return_value=True)
    player = Player("Bob", TestIOInterface(), decide=decide)
    assert player.is_hitting()
    decide.assert_called_once_with("Bob, do you want a hit? (Y/N): ")


def test_player_without_way_to_decide():
    with pytest.raises(InvalidActionError):
        Player("Bob", object())


def test_decision_hook_sees_every_decision():
    seen = []
    player = Player("Bob", TestIOInterface(), decide=lambda prompt: False)
    player.on_decision = lambda participant, hit: seen.append((participant.name, hit))
    player.is_hitting()
    assert seen == [("Bob", False)]


def test_player_announcements():
    io = TestIOInterface()
    player = Player("Alice", io)
    player.win()
    player.lose()
    player.push()
    player.bust()
    assert io.sent_messages == [
        "Alice wins.",
        "Alice loses.",
        "Alice pushes.",
        "Alice busts.",
    ]


def test_player_show_hand(cards):
    io = TestIOInterface()
    player = deal(Player("Alice", io), cards("As", "Kh"))
    player.show_hand()
    assert io.sent_messages == ["Alice:\tAs\tKh\t(21)"]
    assert str(player) == "Alice:\tAs\tKh\t(21)"


def test_clear_hand(cards):
    player = deal(Player("Alice", TestIOInterface()), cards("As", "Kh"))
    player.clear_hand()
    assert player.hand.is_empty()


@pytest.mark.parametrize(
    "tokens, hitting",
    [
        (("10c", "6d"), True),
        (("10c", "2d"), True),
        (("10c", "7d"), False),
        (("10c", "9d"), False),
        (("As", "Kd"), False),
        (("As", "6d"), False),
        (("10c", "6d", "9h"), False),
    ],
)
def test_dealer_hits_on_16_or_below(cards, tokens, hitting):
    dealer = deal(Dealer(TestIOInterface()), cards(*tokens))
    assert dealer.is_hitting() is hitting


def test_dealer_stands_on_revealed_17(cards):
    dealer = deal(Dealer(TestIOInterface()), cards("10c", "7d"))
    dealer.flip_first_card()
    assert dealer.total() == 0
    assert str(dealer) == "Dealer:\tXX\t7d\t"

    dealer.flip_first_card()
    assert dealer.total() == 17
    assert not dealer.is_hitting()


def test_dealer_hole_card(cards):
    dealer = deal(Dealer(TestIOInterface()), cards("10c", "7d"))
    assert dealer.hole_card is dealer.hand.cards[0]
    flipped = dealer.flip_first_card()
    assert flipped is dealer.hole_card
    assert not flipped.face_up


def test_dealer_flip_with_no_cards():
    dealer = Dealer(TestIOInterface())
    with pytest.raises(NoCardToFlipError, match="No card to flip!"):
        dealer.flip_first_card()
    assert dealer.hand.is_empty()


def test_dealer_name():
    assert Dealer(TestIOInterface()).name == "Dealer"
    assert Dealer(TestIOInterface(), name="House").name == "House"
