"""Classic data structures, small algorithms and console toys: stacks, search trees, a segment tree, word counts, a casino and terminal animations."""

__version__ = "0.1.0"