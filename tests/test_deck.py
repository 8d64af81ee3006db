import random

import pytest

from twentyone.blackjack.actor import Dealer, Player
from twentyone.common.card import Card, Rank, Suit
from twentyone.common.deck import Deck, OutOfCardsError
from twentyone.common.hand import Hand
from twentyone.common.io_interface import TestIOInterface


def test_deck_initialization():
    deck = Deck()
    assert isinstance(deck.cards, list)
    assert deck.size == 52


def test_populated_deck_is_complete_and_face_up():
    deck = Deck()
    assert len({(card.rank, card.suit) for card in deck.cards}) == 52
    assert all(card.face_up for card in deck.cards)


def test_deck_initialization_with_custom_cards():
    cards = [
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.ACE, Suit.DIAMONDS),
        Card(Rank.JACK, Suit.CLUBS),
    ]
    deck = Deck(cards)
    assert deck.cards == cards


def test_populate_replaces_remaining_cards():
    deck = Deck(cards=[Card(Rank.TWO, Suit.HEARTS)])
    deck.populate()
    assert deck.size == 52


def test_deck_shuffle_keeps_cards():
    deck = Deck(seed=3)
    original_order = deck.cards.copy()
    deck.shuffle()
    assert deck.cards != original_order
    assert set(deck.cards) == set(original_order)


def test_seeded_shuffles_repeat():
    first = Deck(rng=random.Random(42)).shuffle()
    second = Deck(rng=random.Random(42)).shuffle()
    assert first.cards == second.cards


def test_deal_moves_one_card():
    deck = Deck()
    hand = Hand()
    top = deck.cards[-1]
    deck.deal(hand)
    assert deck.size == 51
    assert hand.size == 1
    assert hand.cards[0] is top
    assert top not in deck.cards


def test_deal_until_empty():
    deck = Deck()
    hand = Hand()
    for _ in range(52):
        deck.deal(hand)
    assert deck.is_empty()
    assert hand.size == 52


def test_deal_from_empty_deck():
    deck = Deck(cards=[])
    hand = Hand()
    with pytest.raises(OutOfCardsError):
        deck.deal(hand)
    assert deck.size == 0
    assert hand.size == 0


def test_deck_repr():
    deck = Deck()
    assert repr(deck) == f"Deck({[repr(card) for card in deck.cards]})"


def test_deck_str():
    deck = Deck()
    assert str(deck) == "Deck of 52 cards"


def test_deal_additional_stops_on_bust(stacked_deck, cards):
    io = TestIOInterface()
    io.add_decision("Alice", True, True)
    player = Player("Alice", io)
    for card in cards("8c", "9d"):
        player.add_card(card)

    stacked_deck("5h").deal_additional(player)

    assert player.total() == 22
    assert io.sent_messages == ["Alice:\t8c\t9d\t5h\t(22)", "Alice busts."]
    # Busted after one card, so the second answer is never asked for
    assert io.decisions["Alice"] == [True]


def test_deal_additional_stops_on_stand(stacked_deck, cards):
    io = TestIOInterface()
    io.add_decision("Alice", True, False)
    player = Player("Alice", io)
    for card in cards("2c", "3d"):
        player.add_card(card)
    deck = stacked_deck("4h", "Kd")

    deck.deal_additional(player)

    assert player.total() == 9
    assert deck.size == 1
    assert io.sent_messages == ["Alice:\t2c\t3d\t4h\t(9)"]


def test_deal_additional_for_dealer(stacked_deck, cards):
    io = TestIOInterface()
    dealer = Dealer(io)
    for card in cards("10c", "2d"):
        dealer.add_card(card)

    stacked_deck("3h", "2s", "5d").deal_additional(dealer)

    assert dealer.total() == 17
    assert not dealer.is_hitting()


def test_deal_additional_on_empty_deck(cards):
    dealer = Dealer(TestIOInterface())
    for card in cards("10c", "2d"):
        dealer.add_card(card)
    with pytest.raises(OutOfCardsError):
        Deck(cards=[]).deal_additional(dealer)
    assert dealer.hand.size == 2
