"""Check whether a string of brackets is balanced."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

_PAIRS = {"{": "}", "(": ")", "[": "]"}


def is_balanced(text: str) -> bool:
    """Return True when every bracket in ``text`` is closed in order.

    Any character that is not an opening bracket is treated as a closer.
    """
    stack: list[str] = []
    for char in text:
        if char in _PAIRS:
            stack.append(char)
            continue
        if not stack or _PAIRS[stack.pop()] != char:
            return False
    return not stack


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read a round count and that many expressions; print YES or NO for each."""
    parser = argparse.ArgumentParser(description="Balanced parenthesis checker.")
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    print("\t\tBalanced parenthesis\n")
    print("\nPlease enter the number of processing rounds? ", end="")
    try:
        rounds = int(next(tokens))
    except (StopIteration, ValueError):
        return 1
    for _ in range(rounds):
        print("\nPlease enter the expression? ", end="")
        try:
            expression = next(tokens)
        except StopIteration:
            break
        print("\nYES" if is_balanced(expression) else "\nNO")
    return 0


if __name__ == "__main__":
    sys.exit(main())