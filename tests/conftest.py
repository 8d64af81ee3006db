"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures for building cards and stacked decks from
table tokens such as ``"As"`` or ``"10c"``.
"""

import pytest

from twentyone.common.card import Card, Rank, Suit
from twentyone.common.deck import Deck
from twentyone.events import EventBus

RANKS = {rank.rank_str: rank for rank in Rank}
SUITS = {suit.value: suit for suit in Suit}


def parse_card(token: str) -> Card:
    return Card(RANKS[token[:-1]], SUITS[token[-1]])


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


@pytest.fixture
def cards():
    """Build a list of cards from tokens."""

    def _cards(*tokens):
        return [parse_card(token) for token in tokens]

    return _cards


@pytest.fixture
def stacked_deck(cards):
    """Build a deck that deals the given tokens in order."""

    def _stacked(*tokens):
        # deal() takes from the end of the list
        return Deck(cards=list(reversed(cards(*tokens))))

    return _stacked
