"""Count word frequencies in a text with a binary search tree, in alphabetical order."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(eq=False)
class WordNode:
    """A tree node holding one distinct word and how often it occurred."""

    word: str
    frequency: int = 1
    left: WordNode | None = None
    right: WordNode | None = None


class WordTree:
    """Unbalanced binary search tree keyed by word."""

    def __init__(self) -> None:
        self.root: WordNode | None = None

    def add(self, word: str) -> None:
        """Insert ``word`` or increment its count if already present."""
        if self.root is None:
            self.root = WordNode(word)
            return
        node = self.root
        while True:
            if word > node.word:
                if node.right is None:
                    node.right = WordNode(word)
                    return
                node = node.right
            elif word < node.word:
                if node.left is None:
                    node.left = WordNode(word)
                    return
                node = node.left
            else:
                node.frequency += 1
                return

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield (word, frequency) pairs in alphabetical order."""

        def walk(node: WordNode | None) -> Iterator[tuple[str, int]]:
            if node is not None:
                yield from walk(node.left)
                yield node.word, node.frequency
                yield from walk(node.right)

        return walk(self.root)


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _finish(buffer: list[str]) -> str:
    if not _is_letter(buffer[-1]) and buffer[-1] != "'":
        buffer.pop()
    return "".join(buffer)


def iter_words(text: str) -> Iterator[str]:
    """Yield lower-cased words from ``text``.

    Words are runs of ASCII letters; an apostrophe or hyphen directly after
    a letter is kept inside the word, but a trailing hyphen is dropped.
    """
    buffer: list[str] = []
    for char in text:
        prev_alpha = bool(buffer) and _is_letter(buffer[-1])
        if _is_letter(char):
            buffer.append(char.lower())
            continue
        if char in "'-" and prev_alpha:
            buffer.append(char)
            continue
        if not buffer:
            continue
        yield _finish(buffer)
        buffer = []
    if buffer:
        yield _finish(buffer)


def build_tree(text: str) -> WordTree:
    """Return a tree holding every word of ``text`` with its count."""
    tree = WordTree()
    for word in iter_words(text):
        tree.add(word)
    return tree


def format_report(tree: WordTree) -> str:
    """Return a table of serial number, frequency and word, one line per word."""
    lines = [f"{'S/N':<5} \t {'FREQUENCY':>9} \t WORD \n"]
    lines.extend(
        f"{number:<5} \t {frequency:<9} \t {word} \n"
        for number, (word, frequency) in enumerate(tree.items(), start=1)
    )
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read a text file and append its word frequency table to another file."""
    parser = argparse.ArgumentParser(description="Alphabetical word frequencies.")
    parser.add_argument("input", nargs="?", default="file.txt")
    parser.add_argument("output", nargs="?", default="wordcount.txt")
    args = parser.parse_args(argv)

    try:
        text = Path(args.input).read_text(encoding="utf-8", errors="replace")
        with open(args.output, "a", encoding="utf-8") as out:
            out.write(format_report(build_tree(text)))
    except OSError as error:
        print(f"A problem occurred: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())