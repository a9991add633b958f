"""Turn-by-turn simulation of ants moving along their paths."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Ant:
    ident: int
    path: list[str]
    position: int = 0
    finished: bool = False


def move_ants(
    paths: list[list[str]], ant_number: int, assigned: list[int]
) -> Iterator[list[str]]:
    """Yield the moves of each turn, written as ``L<id>-<room>``.

    ``assigned`` gives how many ants start on each path; it is not modified.
    """
    remaining = list(assigned)
    if len(remaining) != len(paths):
        raise ValueError("one ant count is needed for each path")
    if sum(remaining) < ant_number:
        raise ValueError("fewer ants assigned than there are ants")
    return _turns(paths, ant_number, remaining)


def _turns(
    paths: list[list[str]], ant_number: int, remaining: list[int]
) -> Iterator[list[str]]:
    ants: list[_Ant] = []
    finished = 0
    next_id = 1

    while finished < ant_number:
        moves: list[str] = []

        for ant in ants:
            last = len(ant.path) - 1
            if ant.position < last:
                ant.position += 1
                moves.append(f"L{ant.ident}-{ant.path[ant.position]}")
            if ant.position == last and not ant.finished:
                ant.finished = True
                finished += 1

        for index, path in enumerate(paths):
            if remaining[index] > 0:
                ant = _Ant(next_id, path)
                ants.append(ant)
                moves.append(f"L{ant.ident}-{path[0]}")
                next_id += 1
                remaining[index] -= 1

        yield moves


def render(
    data: str, paths: list[list[str]], ant_number: int, assigned: list[int]
) -> str:
    """Return the farm description followed by a blank line and every turn."""
    lines = [data.strip(), ""]
    lines.extend(
        "".join(f"{move} " for move in moves)
        for moves in move_ants(paths, ant_number, assigned)
    )
    return "\n".join(lines) + "\n"