# antfarm

Reads a text file that describes an ant farm (a number of ants, rooms and the
tunnels between them), finds the set of paths from the start room to the end
room that moves every ant across in the fewest turns, and prints each turn.

## Installing

```
pip install .
```

## Running

```
antfarm farm.txt
```

The command takes exactly one argument. Only file names that end in `.txt`
(and have something before the suffix) are accepted. On success it exits with
status 0; on any error it prints a message to standard output and exits with
status 1.

## Input format

```
3
##start
start 0 0
a 1 0
##end
end 2 0
start-a
a-end
```

- The first line that is not blank and not a comment gives the number of ants,
  which must be a positive integer.
- A room is `name x y`, with one space between the parts. The name must not
  begin with `L` or hold a `-`. The coordinates must be non-negative integers,
  and no two rooms may share them.
- A tunnel is `name1-name2`, with no spaces. Both rooms must already be
  defined. A tunnel may not link a room to itself and may not be given twice.
  All rooms come before the first tunnel.
- The line that follows `##start` or `##end` must be a room. There is exactly
  one start room and one end room.
- Any other line that begins with `#` is a comment.

## Output

The program prints the input (with surrounding whitespace stripped), a blank
line, and then one line per turn. Each move is written as `L<ant>-<room>`
followed by a space. In the example above the output after the blank line is:

```
L1-a 
L1-end L2-a 
L2-end L3-a 
L3-end 
```

If the file is malformed, the program prints `ERROR: invalid data format,`
followed by the reason. If there is no path from start to end, it prints
`ERROR: this ant farm cannot be solved`.

## Using it as a library

```python
from antfarm.farm import parse_farm
from antfarm.solver import solve
from antfarm.simulate import render

with open("farm.txt", encoding="utf-8") as handle:
    text = handle.read()
farm = parse_farm(text)
solution = solve(farm)
print(render(text, solution.paths, farm.ant_number, solution.assigned), end="")
```

- `antfarm.farm.parse_farm` returns a `Farm` (with `rooms`, `edges`,
  `tunnels`, `special_rooms`, `ant_number`, and `start()` / `end()`), or raises
  `FarmFormatError` when the input is malformed. `is_valid_file` is the check
  the command applies to file names.
- `antfarm.solver.solve` returns a `Solution` with `paths` (start room left
  out), `assigned` (ants per path) and `turns`, or raises
  `UnsolvableFarmError` when there is no path from start to end. It updates the
  farm's edge states and room flags as it works, so parse the text again
  before solving a second time. `assign_ants` and `calculate_turns` show how
  the ants are shared out between a given set of paths.
- `antfarm.simulate.move_ants` yields the list of moves for each turn one at a
  time, and `render` builds the whole printed output as a string.