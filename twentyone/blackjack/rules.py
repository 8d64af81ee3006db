from twentyone.blackjack.constants import INITIAL_CARDS, MAX_PLAYERS, MIN_PLAYERS


class InvalidPlayerCountError(ValueError):
    """Raised when a table is asked to seat too few or too many players."""

    pass


class Rules:
    """
    Table settings for a game.

    The dealer's hit limit is a house rule and deliberately not a setting.
    """

    def __init__(
        self,
        min_players: int = MIN_PLAYERS,
        max_players: int = MAX_PLAYERS,
        initial_cards: int = INITIAL_CARDS,
        repopulate_each_round: bool = False,
    ):
        if min_players < 1:
            raise ValueError("A table needs room for at least one player")
        if max_players < min_players:
            raise ValueError("max_players must not be below min_players")
        if initial_cards < 1:
            raise ValueError("initial_cards must be at least 1")
        self.min_players = min_players
        self.max_players = max_players
        self.initial_cards = initial_cards
        self.repopulate_each_round = repopulate_each_round

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "min_players": self.min_players,
            "max_players": self.max_players,
            "initial_cards": self.initial_cards,
            "repopulate_each_round": self.repopulate_each_round,
        }

    def is_valid_player_count(self, count: int) -> bool:
        return self.min_players <= count <= self.max_players

    def check_player_count(self, count: int) -> None:
        """
        Raise if the table cannot seat this many players.

        Args:
            count (int): Number of players.
        """
        if not self.is_valid_player_count(count):
            raise InvalidPlayerCountError(
                f"Player count must be between {self.min_players} and "
                f"{self.max_players}, got {count}"
            )

    @property
    def player_count_prompt(self) -> str:
        return f"How many players? ({self.min_players} - {self.max_players}): "
