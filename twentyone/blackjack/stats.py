"""
This module contains the SimulationStats class which is responsible for
tracking the results of the rounds played at a table.
"""

from twentyone.blackjack.display import Outcome


class SimulationStats:
    """
    A class that holds the statistics of the rounds played.
    """

    def __init__(self):
        """
        Initializes the SimulationStats with default values.
        """
        self.rounds_played = 0
        self.player_wins = 0
        self.player_losses = 0
        self.pushes = 0
        self.player_busts = 0
        self.dealer_busts = 0
        self.deck_exhaustions = 0

    def record(self, outcome: Outcome) -> None:
        """Count one player outcome."""
        if outcome == Outcome.WIN:
            self.player_wins += 1
        elif outcome == Outcome.LOSE:
            self.player_losses += 1
        elif outcome == Outcome.PUSH:
            self.pushes += 1
        elif outcome == Outcome.BUST:
            self.player_busts += 1

    def report(self):
        """
        Returns a dictionary containing the current statistics.
        """
        return {
            "rounds_played": self.rounds_played,
            "player_wins": self.player_wins,
            "player_losses": self.player_losses,
            "pushes": self.pushes,
            "player_busts": self.player_busts,
            "dealer_busts": self.dealer_busts,
            "deck_exhaustions": self.deck_exhaustions,
        }
