# algobench

Small, dependency-free implementations of classic algorithms, grouped by theme.
Every function takes ordinary Python values and returns its result rather than
printing it. Where no result can be produced, a `ValueError` is raised.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `algobench.trees`

- `BinaryNode(data, left=None, right=None)` and `TreeNode(data, children=[])`
  dataclasses.
- `height(root)`: nodes on the longest root-to-leaf path (0 for `None`).
- `current_level(root, level)`: values at one level, root being level 1.
- `level_order(root)`: all values, level by level.
- `path_sums(root)`: sum of every root-to-leaf path, left to right.
- `read_tree_level_wise(tokens)`: builds a `TreeNode` tree from the root's
  value followed, for each node in breadth-first order, by its child count and
  the children's values. A string is split on whitespace; input that ends too
  early raises `ValueError`.
- `are_identical(root1, root2)`: a loose match. Roots with equal data match at
  once; otherwise the roots must have the same, non-zero number of children and
  their first children must match by the same rule. `None` never matches.
- `find(root, key)`: breadth-first search for the first node holding `key`,
  or `None`.

### `algobench.arrays`

- `find_increasing_triplet(nums)`: a subsequence `a < b < c` found in one
  pass, as a tuple, or `None`.
- `max_profit(prices)`: sum of every rise between consecutive prices.
- `equilibrium_indices(values)`: indices whose left and right sums are equal,
  highest first.
- `merge_into_vacant(x, y)`: merges sorted `y` into the zero cells of sorted
  `x`; the number of zeros must equal `len(y)`, else `ValueError`.
- `trapped_water(heights)`: units of rain water held between bars.
- `find_pair(nums, target)`: first pair in index order summing to `target`,
  or `None`.
- `sort_binary(values)`: counting sort of a 0/1 list; non-zero values become 1.
- `longest_unique_substring(s)`: length of the longest substring without
  repeated characters.

### `algobench.sorting`

`merge_sort(values)`, `merge_sort_4way(values)` and `quick_sort(values)` each
return a new ascending list. Quicksort uses the last element as pivot.

### `algobench.dynamic`

- `matrix_chain_cost(dims)`: fewest scalar multiplications for a matrix chain,
  where matrix `i` is `dims[i - 1]` by `dims[i]`.
- `wine_profit(prices)`: best income selling one bottle a day from either end,
  a bottle sold on day `d` earning its price times `d`.
- `wine_table(prices)`: the bottom-up table for the same problem; the answer is
  `table[0][-1]`.
- `fibonacci(n)`: the `n`-th Fibonacci number, `fibonacci(0) == 0`.
- `fractional_knapsack(capacity, items)`: greatest value from `(price, weight)`
  pairs, splitting the last item taken. Weights must be positive.

### `algobench.graphs`

- `Graph(vertices)`: directed graph with `add_edge(v, w)` and `bfs(start)`,
  which returns vertices in breadth-first order. Unknown vertices raise
  `ValueError`.
- `travelling_salesman(graph, start)`: cheapest round trip through every
  vertex of a square cost matrix, by trying every route.

### `algobench.arithmetic`

- `calculate(op, a, b)` for `+`, `-`, `*`, `/`; division by zero gives an
  infinity or NaN; any other operator raises `ValueError`.
- `factorial(n)` (1 for `n <= 0`), `max_without_comparison(a, b)`,
  `bitwise_add(a, b)` (32-bit signed, wrapping), `to_binary(n)`.
- `floyds_triangle(rows)` and `pascals_triangle(rows)` return lists of rows.

### `algobench.queens`

- `solve(n)`: yields every placement of `n` non-attacking queens as a board of
  `"Q"` and `"0"` cells.
- `count_solutions(n)`, `is_safe(board, row, col)`, `format_board(board)`.

## Examples

```python
from algobench.trees import BinaryNode, level_order, path_sums
from algobench.arrays import max_profit
from algobench.sorting import merge_sort
from algobench.graphs import Graph, travelling_salesman
from algobench.arithmetic import pascals_triangle

root = BinaryNode(1, BinaryNode(2, BinaryNode(4), BinaryNode(5)), BinaryNode(3))
level_order(root)           # [1, 2, 3, 4, 5]

tree = BinaryNode(30,
                  BinaryNode(10, BinaryNode(3), BinaryNode(16)),
                  BinaryNode(50, BinaryNode(40), BinaryNode(60)))
path_sums(tree)             # [43, 56, 120, 140]

max_profit([2, 4, 6, 3, 2, 3, 6])     # 8
merge_sort([19, 12, 13, 24, 35, 26])  # [12, 13, 19, 24, 26, 35]

g = Graph(4)
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.bfs(2)                    # [2, 0, 3, 1]

travelling_salesman([[0, 10, 15, 20],
                     [10, 0, 35, 25],
                     [15, 35, 0, 30],
                     [20, 25, 30, 0]], 0)   # 80

pascals_triangle(4)         # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
```

## What it does not do

The package is a library only. It has no command-line programs, does not
prompt for input, and prints nothing; callers pass values in and format the
results themselves (for boards, `format_board` helps).