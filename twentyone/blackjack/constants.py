"""Blackjack-specific constants and value mappings."""

from twentyone.common.card import Rank

# Highest total a hand may reach without busting
BUST_LIMIT = 21

# The dealer draws on this total or below and stands on anything higher
DEALER_HIT_LIMIT = 16

# Added once when an ace can count 11 without busting the hand
SOFT_ACE_BONUS = 10
SOFT_ACE_CEILING = BUST_LIMIT - SOFT_ACE_BONUS

# Marker value of a face-up ace before promotion
ACE_VALUE = Rank.ACE.rank_value

INITIAL_CARDS = 2

MIN_PLAYERS = 1
MAX_PLAYERS = 7

DEALER_NAME = "Dealer"
