"""Parsing and validation of ant farm descriptions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_FORMAT_HINT = "valid format is:\nnumber_of_ants\nthe_rooms\nthe_links"


class FarmFormatError(ValueError):
    """Raised when a farm description does not follow the expected format."""


@dataclass(frozen=True)
class Position:
    """Coordinates of a room."""

    x: int
    y: int


@dataclass(eq=False)
class Room:
    """A room of the farm and the rooms it is linked to."""

    name: str
    coord: Position
    links: list[Room] = field(default_factory=list, repr=False)
    in_path: bool = False


@dataclass
class Edge:
    """A directed half of a tunnel.

    ``state`` is 1 for an unused tunnel, 0 once a path uses it in this
    direction and -1 for the reverse of a used direction.
    """

    source: str
    target: str
    state: int = 1


@dataclass
class Farm:
    """Ants, rooms and tunnels of a parsed farm."""

    ant_number: int = 0
    rooms: dict[str, Room] = field(default_factory=dict)
    special_rooms: dict[str, str] = field(default_factory=dict)
    tunnels: set[tuple[str, str]] = field(default_factory=set)
    edges: dict[tuple[str, str], Edge] = field(default_factory=dict)

    def edge(self, source: str, target: str) -> Edge:
        """Return the directed edge; a missing one reads as closed (state 0)."""
        found = self.edges.get((source, target))
        return found if found is not None else Edge(source, target, 0)

    def start(self) -> str:
        """Name of the start room."""
        return self.special_rooms["start"]

    def end(self) -> str:
        """Name of the end room."""
        return self.special_rooms["end"]


def _atoi(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(text)
    return value


def _is_comment(line: str) -> bool:
    return line.startswith("#")


class _FarmParser:
    def __init__(self, data: str) -> None:
        self.lines = data.split("\n")
        self.farm = Farm()
        self.found_tunnels = False

    def parse(self) -> Farm:
        first = self._parse_ant_number()
        self._parse_rooms_and_tunnels(first)
        if "start" not in self.farm.special_rooms:
            raise FarmFormatError("no start room found")
        if "end" not in self.farm.special_rooms:
            raise FarmFormatError("no end room found")
        return self.farm

    def _parse_ant_number(self) -> int:
        for index, raw in enumerate(self.lines):
            line = raw.strip()
            if not line or _is_comment(line):
                continue
            try:
                ants = _atoi(line)
            except ValueError:
                ants = 0
            if ants < 1:
                raise FarmFormatError("first line must be a positive number of ants")
            self.farm.ant_number = ants
            return index + 1
        return 0

    def _parse_rooms_and_tunnels(self, first: int) -> None:
        remaining = iter(self.lines[first:])
        for raw in remaining:
            line = raw.strip()
            if not line:
                continue
            if _is_comment(line):
                if line in ("##start", "##end"):
                    self._special_comment(line, next(remaining, None))
                continue
            self._room_or_tunnel(line)

    def _special_comment(self, marker: str, following: str | None) -> None:
        if following is None:
            raise FarmFormatError(f"'{marker}' must not be the last line")
        line = following.strip()
        try:
            self._room_or_tunnel(line)
        except FarmFormatError as exc:
            raise FarmFormatError(
                f"after '{marker}' the next line must be a valid room: {exc}"
            ) from None
        kind = marker[2:]
        if kind in self.farm.special_rooms:
            raise FarmFormatError(f"more than one '{marker}' found")
        self.farm.special_rooms[kind] = line.split()[0]

    def _room_or_tunnel(self, line: str) -> None:
        if not line:
            raise FarmFormatError("line is empty")
        if _is_comment(line):
            raise FarmFormatError("line is a comment")
        if len(line.split(" ")) == 3:
            self._room(line)
        elif "-" in line:
            self._tunnel(line)
        else:
            raise FarmFormatError(
                "if you want to comment, you need to use '#' at the begining "
                f"of the line: {line}"
            )

    def _room(self, line: str) -> None:
        words = line.split(" ")
        if any(word == "" for word in words):
            raise FarmFormatError("space between name and coord must be only one")
        if self.found_tunnels:
            raise FarmFormatError(_FORMAT_HINT)
        name, x_text, y_text = words
        if name.startswith("L"):
            raise FarmFormatError("from room cannot start with 'L'")
        if "-" in name:
            raise FarmFormatError("room name must not contain from '-")
        try:
            x, y = _atoi(x_text), _atoi(y_text)
        except ValueError:
            raise FarmFormatError(f"room coords must be integers: {line}") from None
        if x < 0 or y < 0:
            raise FarmFormatError(f"room coords must be positive: {line}")
        self._add_room(name, x, y)

    def _add_room(self, name: str, x: int, y: int) -> None:
        rooms = self.farm.rooms
        if name in rooms:
            raise FarmFormatError(f"duplicate room: {name}")
        coord = Position(x, y)
        for saved in rooms.values():
            if saved.coord == coord:
                raise FarmFormatError(
                    "two rooms cannot have the same coord: "
                    f"'{saved.name} {saved.coord.x} {saved.coord.y}' and '{name} {x} {y}'"
                )
        rooms[name] = Room(name, coord)

    def _tunnel(self, line: str) -> None:
        if " " in line:
            raise FarmFormatError("tunnel format must not contain spaces")
        parts = line.split("-")
        if len(parts) != 2:
            raise FarmFormatError("a tunnel links exactly two rooms")
        source, target = parts
        if not source or not target:
            raise FarmFormatError("tunnel must link two valid room names")
        if source == target:
            raise FarmFormatError("tunnel cannot link from room to itself")

        farm = self.farm
        room_a = farm.rooms.get(source)
        room_b = farm.rooms.get(target)
        if room_a is None or room_b is None:
            raise FarmFormatError(f"tunnel links non-existing room(s): {line}")
        if (source, target) in farm.tunnels or (target, source) in farm.tunnels:
            raise FarmFormatError(f"duplicate tunnel: {line}")

        farm.tunnels.add((source, target))
        room_a.links.append(room_b)
        room_b.links.append(room_a)
        farm.edges[(source, target)] = Edge(source, target, 1)
        farm.edges[(target, source)] = Edge(target, source, 1)
        self.found_tunnels = True


def parse_farm(data: str) -> Farm:
    """Parse and validate a farm description, raising FarmFormatError on bad input."""
    if not data.strip():
        raise FarmFormatError("the file is empty")
    return _FarmParser(data).parse()


def is_valid_file(name: str) -> bool:
    """Tell whether ``name`` looks like a usable text file name."""
    if not name.endswith(".txt") or name.endswith("."):
        return False
    return name.removesuffix(".txt").strip() != ""