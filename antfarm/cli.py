"""Command line entry point: solve a farm file and print the ants' moves."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .farm import FarmFormatError, is_valid_file, parse_farm
from .simulate import render
from .solver import UnsolvableFarmError, solve


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver on the file named in ``argv`` and print the result."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: antfarm 'fileName.txt'")
        return 1

    file_name = args[0]
    if not is_valid_file(file_name):
        print("only text file are allowed")
        return 1

    try:
        with open(file_name, encoding="utf-8", errors="replace", newline="") as handle:
            data = handle.read()
    except OSError as exc:
        print(exc)
        return 1

    try:
        farm = parse_farm(data)
    except FarmFormatError as exc:
        print(f"ERROR: invalid data format, {exc}")
        return 1

    try:
        solution = solve(farm)
    except UnsolvableFarmError:
        print("ERROR: this ant farm cannot be solved")
        return 1

    sys.stdout.write(render(data, solution.paths, farm.ant_number, solution.assigned))
    return 0


if __name__ == "__main__":
    sys.exit(main())