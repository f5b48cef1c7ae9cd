# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. Every instruction that is performed is written out, one
per line, in upper case.

## Instructions

All of them are methods of `pushswap.stack.PushSwap`.

| Method | Written | Effect                                                        |
|--------|---------|---------------------------------------------------------------|
| `sa`   | `SA`    | swap the two top values of `a` (`IndexError` with fewer than two) |
| `sb`   | `SB`    | swap the two top values of `b` (`IndexError` with fewer than two) |
| `pa`   | `PA`    | move the top of `b` onto `a`; nothing happens when `b` is empty |
| `pb`   | `PB`    | move the top of `a` onto `b`; nothing happens when `a` is empty |
| `ra`   | `RA`    | rotate `a` up (top goes to the bottom)                        |
| `rb`   | `RB`    | rotate `b` up                                                 |
| `rr`   | `RR`    | rotate both up, only when each stack holds two values or more |
| `rra`  | `RRA`   | rotate `a` down (bottom goes to the top)                      |
| `rrb`  | `RRB`   | rotate `b` down                                               |
| `rrr`  | `RA`, `RB` | calls `ra` and then `rb`, each written as its own line     |

Rotations of a stack holding fewer than two values do nothing and write
nothing. Instructions go to the `out` stream given to `PushSwap`, or to
standard output when none is given.

## Command line

```
pushswap 3 2 5 1 4
pushswap "3 2 5 1 4"
```

Numbers may be passed as separate arguments or as space-separated words in
one argument. Each must be an integer within the signed 32-bit range;
leading spaces, a sign and leading zeros are accepted. Duplicates are
rejected. On any such error the command writes `ulala` and exits with
status 1; with no arguments it exits with status 0 and prints nothing.

Before sorting the values are replaced by their rank (1 for the smallest).
The command prints both stacks side by side, then the instructions it
performs, then the stacks once more.

## Library

```python
import io
from pushswap.parsing import parse_arguments, normalize
from pushswap.stack import PushSwap
from pushswap.sorting import sort_stacks

out = io.StringIO()
machine = PushSwap(normalize(parse_arguments(["3", "2 5", "1", "4"])), out)
sort_stacks(machine)
print(list(machine.a))
print(out.getvalue())
```

- `pushswap.parsing`: `parse_arguments` raises `ParseError` (a `ValueError`)
  for malformed numbers, values outside the 32-bit range and duplicates;
  `normalize` turns distinct values into ranks; `parse_number`,
  `parse_long`, `is_invalid_number`, `split_words`, `count_words` and
  `skip_spaces` are the pieces it is built from.
- `pushswap.stack`: `Stack`, a stack whose top is its first element, with
  `head`, `tail`, `push_top`, `pop_top`, `swap_top`, `rotate`,
  `reverse_rotate` and `clear`; and `PushSwap`, holding stacks `a` and `b`.
- `pushswap.sorting`: `sort_stacks` sorts the ranks in `a`; it handles two
  and three values directly (`organize_three`) and otherwise moves values
  by the cheapest placement found with `find_b_target` and `find_a_target`.
  `check_if_sorted` tells whether work remains.
- `pushswap.cli`: `main` and `format_stacks`, which renders the two stacks
  side by side.

## What it does not do

There is no checker: nothing reads a list of instructions back and verifies
that they sort a given input. The instruction count is not minimised beyond
what the strategy above produces.

## Tests

```
pip install .[test]
pytest
```