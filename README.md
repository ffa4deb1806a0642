# algoshelf

A shelf of classic data structures and small algorithms in plain Python,
with no third-party dependencies, plus a handful of interactive console
programs that exercise them.

## Installation

```
pip install algoshelf
```

To run the test suite:

```
pip install "algoshelf[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algoshelf.dynamic_stack` | `DynamicStack`: a stack whose capacity doubles when full and halves when half empty |
| `algoshelf.array_stack` | `BoundedStack`: a stack with a fixed limit, positional `update` and top-to-bottom iteration |
| `algoshelf.parentheses` | `is_balanced`: bracket matching for `()`, `[]` and `{}` |
| `algoshelf.euler` | `degree`, `has_euler_path` for undirected graphs given as an adjacency callable |
| `algoshelf.sorting` | `counting_sort` for non-negative integers |
| `algoshelf.avl_tree` | `AVLTree`, `AVLNode`: self-balancing search tree with sideways `render` |
| `algoshelf.binary_search_tree` | `BinarySearchTree`: unbalanced search tree with `height` |
| `algoshelf.traversals` | `Node`, `in_order`, `pre_order`, `post_order` generators |
| `algoshelf.red_black_tree` | `RedBlackTree`, `RedBlackNode`, `Color`, with `black_heights` for checking balance |
| `algoshelf.segment_tree` | `SegmentTree`: inclusive range queries and point updates over any associative combine |
| `algoshelf.word_frequency` | `WordTree`, `WordNode`, `iter_words`, `build_tree`, `format_report`: alphabetical word counts |
| `algoshelf.threaded_tree` | `ThreadedBinaryTree`: search tree whose two-child deletion promotes the right child |
| `algoshelf.engine` | `EngineData`, `read_sensors`, `calculate_fuel_injection`, `calculate_ignition_timing`, `check_engine_status` |
| `algoshelf.casino` | `Casino`, `HighLowGuess`, `spin_slot`: coin flip, high-low and a slot machine |
| `algoshelf.particles` | `Particle`, `initialize_particles`, `update_particles`, `render_particles`, `Bouncer` |

Errors are raised rather than reported: popping or peeking an empty
`DynamicStack` or `BoundedStack` raises `IndexError`, pushing onto a full
`BoundedStack` raises `OverflowError`, deleting a missing value from a
`RedBlackTree` raises `KeyError`, and `counting_sort` raises `ValueError`
for negative numbers. `AVLTree`, `BinarySearchTree` and `ThreadedBinaryTree`
ignore duplicates and leave the tree alone when asked to delete a missing key.

## Examples

A stack that grows and shrinks with its contents:

```python
from algoshelf.dynamic_stack import DynamicStack

stack = DynamicStack(1)
for value in range(1, 13):
    stack.push(value)
print(len(stack), stack.peek())   # 12 12
print(stack.pop())                # 12
```

Balanced brackets:

```python
from algoshelf.parentheses import is_balanced

is_balanced("{[()]}")   # True
is_balanced("{[(])}")   # False
```

Euler paths, with the graph supplied as a function `adjacent(v, w) -> bool`:

```python
from algoshelf.euler import has_euler_path

edges = {frozenset((0, 1)), frozenset((1, 2))}
adjacent = lambda v, w: frozenset((v, w)) in edges
has_euler_path(adjacent, 3, 0, 2)   # True
has_euler_path(adjacent, 3, 0, 1)   # False
```

Range-minimum queries with a segment tree:

```python
from algoshelf.segment_tree import SegmentTree

tree = SegmentTree([1, 0, 3, 5, 7, 2, 11, 6, -2, 8], min, 2**31 - 1)
tree.query(3, 6)    # 2
tree.query(8, 9)    # -2
tree.update(8, 12)
tree.query(8, 9)    # 8
```

A self-balancing tree:

```python
from algoshelf.avl_tree import AVLTree

tree = AVLTree()
for key in (30, 20, 10, 25, 40):
    tree.insert(key)
print(tree.inorder())   # [10, 20, 25, 30, 40]
print(25 in tree)       # True
```

Word frequencies:

```python
from algoshelf.word_frequency import build_tree

tree = build_tree("hey_this, is a. test input \n to a_file")
print(list(tree.items())[:2])   # [('a', 2), ('file', 1)]
```

## Console programs

Each program reads its choices and numbers from standard input, separated
by whitespace, and stops at end of input.

```
algoshelf-stack [--limit N]        # menu-driven bounded stack (default limit 100)
algoshelf-parens                   # a round count, then that many expressions; prints YES or NO
algoshelf-avl                      # insert, delete, search and print an AVL tree
algoshelf-bst                      # binary search tree menu
algoshelf-rbtree                   # red-black tree menu
algoshelf-threaded                 # threaded binary tree menu
algoshelf-wordcount [INPUT] [OUTPUT]
                                   # append the word table for INPUT (default file.txt)
                                   # to OUTPUT (default wordcount.txt)
algoshelf-engine [--cycles N] [--seed S]
                                   # simulated engine monitor, 5 cycles by default
algoshelf-casino [--money N] [--seed S]
                                   # coin flip, high-low, slot machine and player stats
algoshelf-particles [--mode particles|bouncer] [--count N] [--frames N] [--delay SECONDS] [--seed S]
                                   # terminal animation; runs until interrupted unless --frames is given
```

## What it does not do

- There is no blackjack or other card game in the casino; it offers coin
  flip, high-low and the slot machine only.
- The Euler path check looks only at vertex degrees. It has no graph type
  of its own and no command; you supply the adjacency function.
- Nothing is stored between runs: every tree, stack and casino purse lives
  only in memory.