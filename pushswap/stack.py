"""The two stacks of the puzzle and the instructions that move values between them."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, Iterator, TextIO


class Stack:
    """A stack of integers whose top is the first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    @property
    def head(self) -> int:
        """The value on top of the stack."""
        if not self._items:
            raise IndexError("head of an empty stack")
        return self._items[0]

    @property
    def tail(self) -> int:
        """The value at the bottom of the stack."""
        if not self._items:
            raise IndexError("tail of an empty stack")
        return self._items[-1]

    def push_top(self, value: int) -> None:
        """Put a value on top of the stack."""
        self._items.appendleft(value)

    def pop_top(self) -> int:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def swap_top(self) -> None:
        """Exchange the two values on top of the stack."""
        if len(self._items) < 2:
            raise IndexError("swap needs at least two values")
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> bool:
        """Move the top value to the bottom; return whether anything moved."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom value to the top; return whether anything moved."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()


class PushSwap:
    """Stacks a and b together with the instructions, each written to ``out``."""

    def __init__(self, values: Iterable[int] = (), out: TextIO | None = None) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self._out = out

    def _emit(self, name: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        stream.write(f"{name}\n")

    def pa(self) -> None:
        """Move the top of b onto a; nothing happens when b is empty."""
        if not len(self.b):
            return
        self.a.push_top(self.b.pop_top())
        self._emit("PA")

    def pb(self) -> None:
        """Move the top of a onto b; nothing happens when a is empty."""
        if not len(self.a):
            return
        self.b.push_top(self.a.pop_top())
        self._emit("PB")

    def sa(self) -> None:
        """Swap the two top values of a."""
        self.a.swap_top()
        self._emit("SA")

    def sb(self) -> None:
        """Swap the two top values of b."""
        self.b.swap_top()
        self._emit("SB")

    def ra(self) -> None:
        """Rotate a upwards; silent when a holds fewer than two values."""
        if self.a.rotate():
            self._emit("RA")

    def rb(self) -> None:
        """Rotate b upwards; silent when b holds fewer than two values."""
        if self.b.rotate():
            self._emit("RB")

    def rr(self) -> None:
        """Rotate both stacks at once; only when each holds two values or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self.a.rotate()
        self.b.rotate()
        self._emit("RR")

    def rra(self) -> None:
        """Rotate a downwards; silent when a holds fewer than two values."""
        if self.a.reverse_rotate():
            self._emit("RRA")

    def rrb(self) -> None:
        """Rotate b downwards; silent when b holds fewer than two values."""
        if self.b.reverse_rotate():
            self._emit("RRB")

    def rrr(self) -> None:
        """Apply ra and then rb, each written as its own instruction."""
        self.ra()
        self.rb()