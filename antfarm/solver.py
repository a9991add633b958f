"""Path finding and ant distribution for a parsed farm."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass

from .farm import Farm

_UNREACHABLE = math.inf


class UnsolvableFarmError(Exception):
    """Raised when no route leads from the start room to the end room."""


@dataclass
class Solution:
    """Chosen paths (start room excluded), ants per path and turns needed."""

    paths: list[list[str]]
    assigned: list[int]
    turns: int


@dataclass(frozen=True)
class _Node:
    name: str
    priority: float
    only_reverse: bool = False


class _PriorityQueue:
    """Queue ordered by priority; equal priorities keep insertion order."""

    def __init__(self) -> None:
        self._keys: list[float] = []
        self._nodes: list[_Node] = []

    def add(self, node: _Node) -> None:
        index = bisect.bisect_right(self._keys, node.priority)
        self._keys.insert(index, node.priority)
        self._nodes.insert(index, node)

    def poll(self) -> _Node:
        self._keys.pop(0)
        return self._nodes.pop(0)

    def __bool__(self) -> bool:
        return bool(self._nodes)


def assign_ants(paths: list[list[str]], ant_number: int) -> list[int]:
    """Give each ant to the path with the lowest load, preferring later paths on ties."""
    lengths = [len(path) for path in paths]
    if not lengths and ant_number > 0:
        raise ValueError("no paths to assign ants to")
    assigned = [0] * len(lengths)
    for _ in range(ant_number):
        target = min(
            range(len(lengths)),
            key=lambda i: (lengths[i] + assigned[i], -i),
        )
        assigned[target] += 1
    return assigned


def calculate_turns(paths: list[list[str]], ant_number: int) -> Solution:
    """Sort paths by length, spread the ants over them and count the turns."""
    ordered = [list(path) for path in sorted(paths, key=len)]
    assigned = assign_ants(ordered, ant_number)
    turns = max(
        (len(path) - 1 + count for path, count in zip(ordered, assigned)),
        default=0,
    )
    turns = max(turns, 0)
    return Solution(ordered, assigned, turns)


def _build_path(parent: dict[str, str], start: str, end: str) -> list[str]:
    path: list[str] = []
    current: str | None = end
    while current is not None:
        path.append(current)
        if current == start:
            break
        current = parent.get(current)
    path.reverse()
    return path


def _dfs(farm: Farm, start: str, end: str) -> list[str] | None:
    current = start
    path = [current]
    visited: set[str] = set()
    while current != end:
        visited.add(current)
        for neighbor in farm.rooms[current].links:
            if neighbor.name in visited:
                continue
            if farm.edge(current, neighbor.name).state != 0:
                continue
            path.append(neighbor.name)
            current = neighbor.name
            break
        else:
            return None
    return path


def _dijkstra(
    farm: Farm, start: str, end: str
) -> tuple[dict[str, float], dict[str, str]]:
    dist: dict[str, float] = {name: _UNREACHABLE for name in farm.rooms}
    dist[start] = 0
    parent: dict[str, str] = {}
    visited: set[str] = set()

    queue = _PriorityQueue()
    queue.add(_Node(start, 0))

    while queue:
        node = queue.poll()
        current = node.name
        if dist[current] < node.priority:
            continue
        visited.add(current)

        for neighbor in farm.rooms[current].links:
            state = farm.edge(current, neighbor.name).state
            if (
                state == 0
                or (node.only_reverse and state != -1)
                or neighbor.name in visited
            ):
                continue
            candidate = dist[current] + state
            if candidate < dist[neighbor.name]:
                parent[neighbor.name] = current
                dist[neighbor.name] = candidate
                only_reverse = state != -1 and neighbor.in_path
                queue.add(_Node(neighbor.name, candidate, only_reverse))

        if current == end:
            break

    return dist, parent


def _find_path(farm: Farm, start: str, end: str) -> list[str] | None:
    dist, parent = _dijkstra(farm, start, end)
    if dist[end] == _UNREACHABLE:
        return None
    return _build_path(parent, start, end)


def _update_graph(farm: Farm, path: list[str]) -> None:
    start = farm.start()
    for i, (current, following) in enumerate(zip(path, path[1:])):
        previous = path[i - 1] if i > 0 else current
        if current == start:
            continue
        current_state = farm.edge(current, following).state
        previous_state = farm.edge(previous, current).state
        farm.rooms[current].in_path = not (previous_state == -1 and current_state == -1)

    for current, following in zip(path, path[1:]):
        forward = farm.edges[(current, following)]
        backward = farm.edges[(following, current)]
        if forward.state == 1:
            forward.state, backward.state = 0, -1
        else:
            forward.state, backward.state = 1, 1


def _merge_paths(farm: Farm, start: str, end: str) -> list[list[str]]:
    merged: list[list[str]] = []
    while (path := _dfs(farm, start, end)) is not None:
        _update_graph(farm, path)
        merged.append(path[1:])
    return merged


def solve(farm: Farm) -> Solution:
    """Find the set of paths that moves all ants in the fewest turns.

    The farm's edge states and room flags are updated along the way.
    """
    start, end = farm.start(), farm.end()
    if start not in farm.rooms or end not in farm.rooms or start == end:
        raise UnsolvableFarmError("this ant farm cannot be solved")

    shortest: list[str] | None = None
    while (path := _find_path(farm, start, end)) is not None:
        if shortest is None:
            shortest = path[1:]
        _update_graph(farm, path)

    if shortest is None:
        raise UnsolvableFarmError("this ant farm cannot be solved")

    merged = _merge_paths(farm, start, end)
    short = calculate_turns([shortest], farm.ant_number)
    if not merged:
        return short
    best = calculate_turns(merged, farm.ant_number)
    return short if short.turns <= best.turns else best