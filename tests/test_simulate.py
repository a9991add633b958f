import re

import pytest

from antfarm.simulate import move_ants, render
from antfarm.solver import calculate_turns

_MOVE = re.compile(r"L(\d+)-(.+)")


def _positions(turns):
    history = {}
    for moves in turns:
        for move in moves:
            match = _MOVE.fullmatch(move)
            assert match is not None
            history.setdefault(int(match.group(1)), []).append(match.group(2))
    return history


def test_single_ant_single_path():
    assert list(move_ants([["a", "t"]], 1, [1])) == [["L1-a"], ["L1-t"]]


def test_path_straight_to_end_leaves_a_blank_turn():
    assert list(move_ants([["t"]], 1, [1])) == [["L1-t"], []]


def test_every_ant_follows_its_path_to_the_end():
    paths = [["a", "t"], ["b", "c", "t"]]
    assigned = [3, 2]
    history = _positions(move_ants(paths, 5, assigned))
    assert sorted(history) == [1, 2, 3, 4, 5]
    for rooms in history.values():
        assert rooms in paths


def test_no_two_ants_share_an_inner_room():
    paths = [["a", "t"], ["b", "c", "t"]]
    for moves in move_ants(paths, 6, [3, 3]):
        rooms = [_MOVE.fullmatch(m).group(2) for m in moves]
        inner = [room for room in rooms if room != "t"]
        assert len(inner) == len(set(inner))


def test_turn_count_matches_calculated_turns():
    solution = calculate_turns([["a", "t"], ["b", "t"]], 4)
    turns = list(move_ants(solution.paths, 4, solution.assigned))
    assert len(turns) == solution.turns


def test_assigned_is_not_modified():
    assigned = [2, 1]
    list(move_ants([["a", "t"], ["b", "t"]], 3, assigned))
    assert assigned == [2, 1]


def test_too_few_assigned_ants_raises():
    with pytest.raises(ValueError):
        move_ants([["a", "t"]], 3, [1])


def test_mismatched_assignment_raises():
    with pytest.raises(ValueError):
        move_ants([["a", "t"], ["b", "t"]], 1, [1])


def test_render_echoes_data_then_turns():
    data = "\n1\n##start\ns 0 0\n##end\nt 1 1\ns-t\n\n"
    output = render(data, [["t"]], 1, [1])
    lines = output.split("\n")
    assert output.startswith(data.strip() + "\n\n")
    assert output.endswith("\n")
    assert "L1-t " in lines
    assert all(line.endswith(" ") for line in lines[len(data.strip().split("\n")) + 1:] if line)