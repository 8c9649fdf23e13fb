import pytest

from gonzocasino.games import (
    BLACK,
    WHITE,
    EvenOdd,
    Game,
    HigherThan13,
    Slots,
    TwoColors,
)


class ScriptedRng:
    """Returns preset values from randint and records the requested ranges."""

    def __init__(self, values):
        self.values = list(values)
        self.ranges = []

    def randint(self, low, high):
        self.ranges.append((low, high))
        value = self.values.pop(0)
        assert low <= value <= high
        return value


def scripted_ask(*replies):
    pending = list(replies)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return pending.pop(0)

    ask.prompts = prompts
    return ask


def collector():
    lines = []
    return lines, lines.append


def test_game_is_abstract():
    with pytest.raises(TypeError):
        Game()


@pytest.mark.parametrize("game_cls", [HigherThan13, TwoColors, Slots, EvenOdd])
def test_rules_text_starts_with_title(game_cls):
    assert game_cls().rules().startswith("REGLAS")


# HigherThan13

def test_higher_than_13_payout_win():
    assert HigherThan13().payout(10, 3, 8) == 2 * 8


@pytest.mark.parametrize("player, casino", [(3, 10), (5, 5)])
def test_higher_than_13_payout_loss(player, casino):
    assert HigherThan13().payout(player, casino, 8) == 0


def test_higher_than_13_surrender_returns_half():
    rng = ScriptedRng([4])
    lines, say = collector()
    result = HigherThan13(rng).play(10, scripted_ask("1"), say)
    assert result == 0.5 * 10
    assert rng.values == []
    assert "Tu numero aleatorio es: 4" in lines


def test_higher_than_13_play_win():
    rng = ScriptedRng([12, 2])
    lines, say = collector()
    result = HigherThan13(rng).play(10, scripted_ask("2"), say)
    assert result == 2 * 10
    assert rng.ranges == [(1, 13), (1, 13)]
    assert "Numero casino: 2" in lines


def test_higher_than_13_reprompts_on_non_number():
    rng = ScriptedRng([1, 13])
    ask = scripted_ask("abc", "2")
    result = HigherThan13(rng).play(10, ask, lambda line: None)
    assert result == 0
    assert len(ask.prompts) == 2


# TwoColors

def test_two_colors_full_match():
    assert TwoColors().payout(3, 3, WHITE, WHITE, 10) == 4 * 10


def test_two_colors_number_match():
    assert TwoColors().payout(3, 3, WHITE, BLACK, 10) == 1.5 * 10


def test_two_colors_color_match_returns_bet():
    assert TwoColors().payout(2, 6, BLACK, BLACK, 10) == 10


def test_two_colors_no_match():
    assert TwoColors().payout(2, 6, WHITE, BLACK, 10) == 0


def test_two_colors_play_adjusts_player_color():
    rng = ScriptedRng([5, 5, BLACK])
    lines, say = collector()
    result = TwoColors(rng).play(10, scripted_ask("2"), say)
    assert result == 4 * 10
    assert rng.ranges == [(1, 7), (1, 7), (0, 1)]
    assert "Color casino: Negro." in lines


def test_two_colors_play_white_choice_against_black():
    rng = ScriptedRng([5, 1, BLACK])
    result = TwoColors(rng).play(10, scripted_ask("1"), lambda line: None)
    assert result == 0


# Slots

def test_slots_triple_pays_seven_times():
    assert Slots().payout((4, 4, 4), 10) == 7 * 10


def test_slots_triple_seven_pays_seven_times():
    assert Slots().payout((7, 7, 7), 10) == 7 * 10


def test_slots_descending_run():
    assert Slots().payout((5, 4, 3), 10) == 1.5 * 10


def test_slots_ascending_run_loses():
    assert Slots().payout((3, 4, 5), 10) == 0


def test_slots_play_uses_three_reels():
    rng = ScriptedRng([6, 5, 4])
    lines, say = collector()
    result = Slots(rng).play(10, scripted_ask(), say)
    assert result == 1.5 * 10
    assert rng.ranges == [(1, 7)] * 3
    assert "Resultado slots: 6 5 4" in lines


# EvenOdd

@pytest.mark.parametrize(
    "choice, number", [(EvenOdd.EVEN, 4), (EvenOdd.ODD, 7)]
)
def test_even_odd_right_guess_doubles(choice, number):
    assert EvenOdd().payout(choice, number, 10) == 2 * 10


@pytest.mark.parametrize(
    "choice, number", [(EvenOdd.EVEN, 7), (EvenOdd.ODD, 4), (5, 4)]
)
def test_even_odd_wrong_guess_loses(choice, number):
    assert EvenOdd().payout(choice, number, 10) == 0


def test_even_odd_play():
    rng = ScriptedRng([10])
    lines, say = collector()
    result = EvenOdd(rng).play(10, scripted_ask("0"), say)
    assert result == 2 * 10
    assert rng.ranges == [(1, 10)]
    assert "El numero generado por el casino es: 10" in lines