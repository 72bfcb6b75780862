# algoshelf

A shelf of classic data structures and algorithms in plain Python, with no
runtime dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algoshelf.bst` | `BinarySearchTree` with insert, delete, search, preorder / inorder / postorder and Morris inorder traversals, node count, height and rebalancing; `EmptyTreeError` |
| `algoshelf.binary_tree` | `Node` and the functions `preorder`, `inorder`, `postorder`, `breadth_first`, `depth_first`, plus `demo_tree()` |
| `algoshelf.union_find` | `UnionFind` over `0 .. n-1` and `DisjointSet` over any hashable items, both with union by rank and path compression |
| `algoshelf.stacks` | `ArrayStack` (bounded) and `LinkedStack`; `StackOverflowError`, `StackUnderflowError` |
| `algoshelf.singly_linked_list` | `SinglyLinkedList` with 1-based positions; `EmptyListError` |
| `algoshelf.circular_doubly_linked_list` | `CircularDoublyLinkedList` with 1-based positions and backwards iteration |
| `algoshelf.static_queues` | Fixed-capacity `BoundedQueue`, `CircularQueue`, `BoundedDeque`, `BoundedPriorityQueue`; `QueueFullError`, `QueueEmptyError` |
| `algoshelf.linked_queues` | Unbounded `LinkedQueue` and `LinkedCircularQueue`; `QueueUnderflowError` |
| `algoshelf.graph` | `AdjacencyListGraph` (directed, integer vertices) with `bfs` / `dfs` returning a `TraversalReport` on visiting order, cycles and connectivity |
| `algoshelf.weighted_graphs` | `bellman_ford`, `dijkstra` and `prim_mst` over adjacency matrices; `NegativeCycleError` |
| `algoshelf.dynamic_programming` | `binomial_coefficient`, `knapsack` (0/1) |
| `algoshelf.ciphers` | `ShiftCipher`, `PlayfairCipher`, `HillCipher`, `VigenereCipher`, `VernamCipher`, `RailFenceCipher`, `RowColumnCipher` over lower-case letters |
| `algoshelf.ll1_parser` | `TopDownParser`, a table-driven LL(1) predictive parser; `ParseError`, `parse_production` |
| `algoshelf.scheduling` | `fcfs`, `sjf`, `srtf`, `priority_non_preemptive`, `priority_preemptive`, `round_robin` returning a `Schedule`; `format_report` |

Errors are raised as exceptions: for example, deleting a value that is not in
a `BinarySearchTree` raises `KeyError`, and popping an empty stack raises
`StackUnderflowError`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algoshelf.bst import BinarySearchTree

tree = BinarySearchTree(50)
for value in (30, 70, 20, 40):
    tree.insert(value)
print(tree.inorder())          # [20, 30, 40, 50, 70]
print(40 in tree, tree.height())
tree.balance()
```

Weighted graphs are square matrices; a missing edge is `None` or `math.inf`,
and unreachable vertices come back as `math.inf`.

```python
from algoshelf.weighted_graphs import dijkstra

graph = [
    [0, 4, None],
    [4, 0, 1],
    [None, 1, 0],
]
print(dijkstra(graph, 0))      # [0, 4, 5]
```

```python
from algoshelf.scheduling import Process, round_robin, format_report

schedule = round_robin([Process(1, 0, 5), Process(2, 1, 3)], quantum=2)
print(format_report(schedule))
```

```python
from algoshelf.ll1_parser import TopDownParser

parser = TopDownParser("E", {
    "E": ["TX"],
    "X": ["+TX", "e"],
    "T": ["FY"],
    "Y": ["*FY", "e"],
    "F": ["(E)", "i"],
})
print(parser.parse("i+i*i"))   # True
print(parser.parse("i+"))      # False
```

## LL(1) parser from the command line

```
algoshelf-ll1
```

It reads whitespace-separated tokens from standard input: first the start
symbol, then productions written as `E->TX` (alternatives separated by `|`,
`e` for the empty string), ending with `done`. It prints the grammar, the
FIRST and FOLLOW sets and the parse table, then checks each following input
string, printing the productions applied and whether the string can be
derived, until `done` is read. Upper-case letters are non-terminals; every
other character is a terminal.

## What is not included

The package has no sorting or selection routines, no segment trees, no
traversals or topological sort over adjacency matrices, and no linked
double-ended or priority queues; use the standard library (`sorted`,
`heapq`, `collections.deque`, `graphlib`) for those. Apart from the LL(1)
parser, it offers no command-line programs.