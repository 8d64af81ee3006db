from typing import Callable, Dict, List, Tuple

from twentyone.common.card import Rank, Suit


def calculate_chi_square(
    observed_values: List[float], expected_values: List[float]
) -> float:
    """
    Calculate the chi-square statistic given lists of observed and expected values.

    :param observed_values: A list of observed values
    :param expected_values: A list of expected values
    :return: The calculated chi-square statistic
    :raises ValueError: If the observed_values and expected_values lists do not have the same length
    """
    if len(observed_values) != len(expected_values):
        raise ValueError("Observed and expected value lists must have the same length.")

    return sum((o - e) ** 2 / e for o, e in zip(observed_values, expected_values))


def top_card_counts(deck_factory: Callable, trials: int) -> Dict[Tuple[Rank, Suit], int]:
    """
    Shuffle a fresh deck `trials` times and count which card ends up on top,
    i.e. which card the next deal would hand out.

    :param deck_factory: Returns a populated deck ready to shuffle
    :param trials: Number of shuffles to sample
    """
    counts = {(rank, suit): 0 for suit in Suit for rank in Rank}
    for _ in range(trials):
        deck = deck_factory()
        deck.shuffle()
        top = deck.cards[-1]
        counts[(top.rank, top.suit)] += 1
    return counts
