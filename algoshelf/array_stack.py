"""A fixed-size stack with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import Any, TextIO


class BoundedStack:
    """LIFO stack holding at most ``limit`` values."""

    def __init__(self, limit: int = 100) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if len(self._items) >= self.limit:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def update(self, position: int, value: Any) -> None:
        """Replace the value ``position`` places from the top (1 is the top)."""
        if not 1 <= position <= len(self._items):
            raise IndexError("position outside the stack")
        self._items[-position] = value

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    return int(next(tokens))


MENU = (
    "\n0 or CTRL-C to Exit "
    "\n1. Push"
    "\n2. Pop"
    "\n3. Peek"
    "\n4. Update"
    "\n5. Display"
    "\nEnter your choice? "
)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive stack menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive array stack.")
    parser.add_argument("--limit", type=int, default=100)
    args = parser.parse_args(argv)

    stack = BoundedStack(args.limit)
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print(MENU)
            try:
                choice = _read_int(tokens)
            except ValueError:
                print("\nInvalid choice,\nPlease try again.")
                continue
            if choice == 0:
                return 0
            if choice == 1:
                print("\nEnter the value to be inserted: ", end="")
                try:
                    stack.push(_read_int(tokens))
                except OverflowError:
                    print("\nStack is full")
            elif choice == 2:
                try:
                    print(f"\nPoped item is {stack.pop()} ")
                except IndexError:
                    print("\nStack is empty")
            elif choice == 3:
                try:
                    print(f"\nThe top element is {stack.peek()}")
                except IndexError:
                    print("\nStack is empty")
            elif choice == 4:
                print("\nEnter the position to update? ", end="")
                position = _read_int(tokens)
                print("\nEnter the item to insert? ", end="")
                value = _read_int(tokens)
                try:
                    stack.update(position, value)
                except IndexError:
                    print("\nUnderflow condition ")
            elif choice == 5:
                if not stack:
                    print("\nStack is empty")
                for value in stack:
                    print(value)
            else:
                print("\nInvalid choice,\nPlease try again.")
    except (StopIteration, KeyboardInterrupt):
        return 0


if __name__ == "__main__":
    sys.exit(main())