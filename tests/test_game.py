import random

import pytest

from ricochet.board import Coord, Robot, Target, create_grid, fill_board
from ricochet.game import (
    Difficulty,
    RoundOutcome,
    choose_round,
    format_scores,
    lowest_bid,
    main,
    play_round,
    prompt_int,
    settle_round,
    setup_game,
    winners,
)


def make_reader(*lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


class Output:
    def __init__(self):
        self.parts = []

    def __call__(self, text):
        self.parts.append(text)

    @property
    def text(self):
        return "".join(self.parts)


def small_board():
    """A 7x7 board: three by three cells, robot 1 top-left, target a top-right."""
    grid = create_grid(7, 7)
    for i in range(7):
        for j in range(7):
            if i % 2 == 0 or j % 2 == 0:
                grid[i][j] = "I"
            if i in (0, 6) or j in (0, 6):
                grid[i][j] = "M"
    grid[1][1] = "1"
    grid[1][5] = "a"
    robots = [Robot("1", Coord(1, 1))]
    targets = [Target("a", Coord(1, 5))]
    return grid, robots, targets


def run_round(bids, moves, player_count=2, difficulty=Difficulty.HARD):
    grid, robots, targets = small_board()
    scores = [0] * player_count
    out = Output()
    waits = []
    outcome = play_round(
        random.Random(0), grid, robots, targets, player_count, difficulty,
        scores, 1, make_reader(*bids, *moves), out, waits.append,
    )
    return outcome, scores, out.text, waits, robots


def test_difficulty_seconds():
    assert [d.seconds for d in Difficulty] == [120, 60, 30, 15]
    assert Difficulty(2) is Difficulty.MEDIUM


def test_prompt_int_retries_until_accepted():
    out = Output()
    value = prompt_int(make_reader("abc", "-2", "7 extra"), out, "? ", lambda n: n > 0, "bad")
    assert value == 7
    assert out.text.count("bad\n") == 2
    assert out.text.count("? ") == 3


def test_prompt_int_eof_propagates():
    with pytest.raises(EOFError):
        prompt_int(make_reader(), Output(), "? ", lambda n: True, "bad")


def test_setup_game_validates_inputs():
    out = Output()
    players, difficulty = setup_game(make_reader("1", "abc", "3", "0", "5", "2"), out)
    assert players == 3
    assert difficulty is Difficulty.MEDIUM
    assert out.text.count("entrer un nombre supérieur à 1\n") == 2
    assert out.text.count("entrez un nombre supérieur à 1 et inférieur à 4") == 2


def test_choose_round_never_picks_covered_target():
    grid, robots, _ = small_board()
    grid[1][3] = "b"
    grid[1][5] = "1"
    robots = [Robot("1", Coord(1, 5))]
    targets = [Target("a", Coord(1, 5)), Target("b", Coord(1, 3))]
    for seed in range(20):
        assert choose_round(random.Random(seed), grid, robots, targets) == (0, 1)


def test_choose_round_on_generated_board():
    rng = random.Random(3)
    grid = create_grid(31, 33)
    robots, targets = fill_board(grid, rng)
    for _ in range(30):
        robot_index, target_index = choose_round(rng, grid, robots, targets)
        assert 0 <= robot_index < len(robots)
        coord = targets[target_index].coord
        assert grid[coord.row][coord.col] == targets[target_index].symbol


def test_lowest_bid_takes_first_minimum():
    assert lowest_bid([3, 1, 1]) == (1, 1)
    assert lowest_bid([2]) == (0, 2)
    with pytest.raises(ValueError):
        lowest_bid([])


def test_settle_round_exact():
    scores = [0, 0, 0]
    assert settle_round(scores, 1, 0, True) is RoundOutcome.EXACT
    assert scores == [0, 2, 0]


def test_settle_round_early():
    scores = [0, 0]
    assert settle_round(scores, 0, 2, True) is RoundOutcome.EARLY
    assert scores == [-1, 0]


def test_settle_round_missed_rewards_others():
    scores = [0, 0, 0]
    assert settle_round(scores, 2, 0, False) is RoundOutcome.MISSED
    assert scores == [1, 1, 0]


def test_settle_round_continues():
    scores = [4, 4]
    assert settle_round(scores, 0, 3, False) is None
    assert scores == [4, 4]


def test_winners_lists_all_tied():
    assert winners([1, 3, 3]) == [2, 3]
    assert winners([5, 0]) == [1]
    with pytest.raises(ValueError):
        winners([])


def test_format_scores():
    assert format_scores([2, -1]) == " Joueur 1 : 2 point\n Joueur 2 : -1 point\n"


def test_play_round_exact_bid():
    outcome, scores, text, waits, robots = run_round(["3", "1"], ["d"])
    assert outcome is RoundOutcome.EXACT
    assert scores == [0, 2]
    assert waits == [Difficulty.HARD.seconds]
    assert robots[0].coord == Coord(1, 5)
    assert "plus petit chemin est en 1 deplacement\n" in text
    assert "Joueur N°2" in text


def test_play_round_early_arrival():
    outcome, scores, text, _, _ = run_round(["2", "5"], ["d"])
    assert outcome is RoundOutcome.EARLY
    assert scores == [-1, 0]
    assert " Joueur 1 : -1 point\n" in text


def test_play_round_missed_target():
    outcome, scores, _, _, robots = run_round(["1", "1"], ["s"])
    assert outcome is RoundOutcome.MISSED
    assert scores == [0, 1]
    assert robots[0].coord == Coord(5, 1)


def test_play_round_rejects_bad_input_and_blocked_moves():
    outcome, scores, text, _, _ = run_round(["0", "x", "1", "4"], ["x", "q", "d"])
    assert outcome is RoundOutcome.EXACT
    assert scores == [2, 0]
    assert "Nombre de déplacement invalide, recommencez\n" in text
    assert "Mauvais déplacment\n" in text
    assert "Vous ne pouvez pas aller dans cette direction\n" in text


def test_play_round_reports_remaining_moves():
    outcome, scores, text, _, _ = run_round(["2", "3"], ["s", "z"])
    assert outcome is RoundOutcome.MISSED
    assert scores == [0, 1]
    assert "DEPLACEMENT RESTANT : 1\n" in text


def test_main_stops_on_end_of_input(monkeypatch, capsys):
    def no_input(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main(["--seed", "1"]) == 1
    assert "Entrez le nombre de joueurs: " in capsys.readouterr().out