"""Command line entry point: read numbers, show the stacks, sort them."""

from __future__ import annotations

import sys
from itertools import zip_longest
from typing import Iterable, Sequence

from .parsing import ParseError, normalize, parse_arguments
from .sorting import sort_stacks
from .stack import PushSwap

_RULE = "-" * 32


def format_stacks(a: Iterable[int], b: Iterable[int]) -> str:
    """Render stacks a and b side by side, top first."""
    parts = ["\nA\tB\n"]
    for left, right in zip_longest(a, b):
        parts.append("   " if left is None else f"  {left}")
        parts.append("\t   ")
        parts.append("\n" if right is None else f"{right}\n")
    parts.append(f"\n{_RULE}\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers given as arguments and print the instructions used."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stdout.write("ulala")
        return 1
    machine = PushSwap(normalize(values))
    sys.stdout.write(format_stacks(machine.a, machine.b))
    sort_stacks(machine)
    sys.stdout.write(format_stacks(machine.a, machine.b))
    return 0


if __name__ == "__main__":
    sys.exit(main())