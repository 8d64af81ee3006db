import pytest

from twentyone.blackjack.rules import InvalidPlayerCountError, Rules


def test_default_rules():
    rules = Rules()
    assert rules.to_dict() == {
        "min_players": 1,
        "max_players": 7,
        "initial_cards": 2,
        "repopulate_each_round": False,
    }


@pytest.mark.parametrize("count, valid", [(0, False), (1, True), (7, True), (8, False)])
def test_player_count_bounds(count, valid):
    assert Rules().is_valid_player_count(count) is valid


def test_check_player_count_raises():
    with pytest.raises(InvalidPlayerCountError):
        Rules().check_player_count(8)
    Rules().check_player_count(3)


def test_player_count_prompt():
    assert Rules().player_count_prompt == "How many players? (1 - 7): "


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_players": 0},
        {"min_players": 3, "max_players": 2},
        {"initial_cards": 0},
    ],
)
def test_invalid_rules(kwargs):
    with pytest.raises(ValueError):
        Rules(**kwargs)
