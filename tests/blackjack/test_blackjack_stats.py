from twentyone.blackjack.display import Outcome
from twentyone.blackjack.stats import SimulationStats


def test_initial_stats():
    stats = SimulationStats()
    assert stats.report() == {
        "rounds_played": 0,
        "player_wins": 0,
        "player_losses": 0,
        "pushes": 0,
        "player_busts": 0,
        "dealer_busts": 0,
        "deck_exhaustions": 0,
    }


def test_record_outcomes():
    stats = SimulationStats()
    for outcome in (Outcome.WIN, Outcome.WIN, Outcome.LOSE, Outcome.PUSH, Outcome.BUST):
        stats.record(outcome)

    report = stats.report()
    assert report["player_wins"] == 2
    assert report["player_losses"] == 1
    assert report["pushes"] == 1
    assert report["player_busts"] == 1
