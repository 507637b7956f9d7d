# algodrills

Short implementations of classic data-structure and algorithm exercises:

| Module | What it provides |
| --- | --- |
| `algodrills.binary_tree` | `BinaryTreeNode`, `tree_height` and `render_tree`, which draws a tree as text |
| `algodrills.heap` | `MaxHeap` and `heap_insert`, a max binary heap built from linked tree nodes |
| `algodrills.avl` | `sorted_array_to_avl`, which builds a height-balanced tree from sorted values |
| `algodrills.linked_list` | `ListNode`, `LinkedList` (sorted insert, palindrome check, cycle detection) and `has_cycle` |
| `algodrills.skiplist` | `SkipNode`, `SkipList` and `linear_skip`, which search along an express lane |
| `algodrills.palindrome` | `is_palindrome_number` and a command-line entry point |
| `algodrills.sandpile` | sandpile addition with toppling: `sandpiles_sum`, `topple`, `unstable_cells`, `format_grid` |
| `algodrills.slide_line` | `slide_line` and `Direction`, which slide and merge a line as in 2048, plus a command-line entry point |

The package has no runtime dependencies and needs Python 3.10 or newer.

## Installation

```
pip install algodrills
```

To run the tests, install the `test` extra and run pytest:

```
pip install "algodrills[test]"
pytest
```

## Library usage

### Trees and heaps

```python
from algodrills.avl import sorted_array_to_avl
from algodrills.binary_tree import render_tree, tree_height
from algodrills.heap import MaxHeap, heap_insert

root = sorted_array_to_avl([1, 2, 20, 21, 22, 32, 34, 47])
print(render_tree(root))      # nodes drawn as (001), (002), ... joined by .--- links
print(tree_height(root))      # edges on the longest path from the root to a leaf
print(list(root))             # in-order values: [1, 2, 20, 21, 22, 32, 34, 47]

heap = MaxHeap()
for value in (98, 110, 43):
    heap.insert(value)
print(len(heap))              # 3
print(list(heap))             # level order: [110, 98, 43]
```

`sorted_array_to_avl` returns `None` for an empty sequence, and `render_tree(None)`
returns an empty string.

`heap_insert(root, value)` is the functional form. It takes the current root,
which may be `None`, and returns a tuple `(root, node)`. `node` is the node that
was created; after sifting up it may hold a different value from the one
inserted. `MaxHeap.insert` returns that same node.

### Linked lists

```python
from algodrills.linked_list import LinkedList

numbers = LinkedList([0, 1, 2, 3, 4, 98, 402, 1024])
numbers.insert_sorted(27)
print(list(numbers))          # [0, 1, 2, 3, 4, 27, 98, 402, 1024]

print(LinkedList([1, 17, 972, 17, 1]).is_palindrome())   # True
print(numbers.has_cycle())    # False
```

`append` and `prepend` add a value at either end. `has_cycle(head)` works on any
chain of `ListNode` objects and uses Floyd's slow/fast pointer method. Iterating
over a `LinkedList`, or taking its length, assumes the list has no cycle.

### Skip list search

```python
from algodrills.skiplist import SkipList

skip = SkipList([0, 1, 2, 3, 4, 7, 12, 15, 18, 19, 23, 53, 61, 62, 76, 99])
print(skip.render())          # the full list followed by the express lane
node = skip.search(53, report=print)
print(node.index)             # 11
print(skip.search(999))       # None
```

The express lane stops every `isqrt(len)` nodes. `search` and `linear_skip`
return the first node that holds the value, or `None`. If a `report` callable is
given, it receives one line of text for every node that is inspected.

### Sandpiles

`sandpiles_sum(grid1, grid2, report=None)` returns a new grid holding the stable
sum of two grids of the same shape. The input grids are not changed. In each
round, every cell holding more than 3 grains topples once. Grains pushed past the
edge are lost. Before each round, a copy of the unstable grid goes to `report`.
Grids of different shapes raise `ValueError`.

```python
from algodrills.sandpile import format_grid, sandpiles_sum

grid1 = [[0, 0, 0], [0, 0, 0], [0, 0, 0]]
grid2 = [[3, 3, 3], [3, 3, 3], [3, 3, 3]]
result = sandpiles_sum(grid1, grid2)
print(format_grid(result))    # already stable: "3 3 3" on each row
```

`topple(grid, i, j)` and `unstable_cells(grid)` expose the single steps.

### Sliding a line

```python
from algodrills.slide_line import Direction, slide_line

print(slide_line([2, 2, 0, 0], Direction.LEFT))   # [4, 0, 0, 0]
print(slide_line([2, 2, 2, 0], Direction.RIGHT))  # [0, 0, 2, 4]
```

`slide_line` returns a new list. It slides the non-zero values towards the
direction and merges each pair of equal neighbours once. It also accepts `0` or
`1` in place of a `Direction`. Any other direction raises `ValueError`.

### Palindromic numbers

```python
from algodrills.palindrome import is_palindrome_number

print(is_palindrome_number(12321))   # True
```

Negative numbers raise `ValueError`.

## Command-line tools

Check whether a number reads the same forwards and backwards. The argument is
read as an unsigned 64-bit value:

```
$ algodrills-palindrome 12321
12321 is a palindrome.
$ algodrills-palindrome 123
123 is not a palindrome.
```

Slide and merge a line of numbers to the left (`L`) or right (`R`). Only the
first 32 numbers are used:

```
$ algodrills-slide-line L 2 2 0 0
Line: 2, 2, 0, 0
Slide to the left
Line: 4, 0, 0, 0
```

Both commands print a usage message and exit with status 1 when arguments are
missing. `algodrills-slide-line` also exits with status 1 when the direction is
neither `L` nor `R`.