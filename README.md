# algonotes

Classic algorithms and data structures in plain Python, with no third-party
dependencies. Everything is a library: import the module you need and call it.

## Modules

- `algonotes.edge` – small records used by the graph code:
  `Edge(u, v)` (ordered by `u`), `VertexWeight(u, w)` and `WeightedEdge(u, v, w)`
  (both ordered by `w`). `INF` (`1_000_000_000`) stands for "unreachable".
- `algonotes.disjoint_set` – `DisjointSet(n)`, a union-find over `0 .. n-1` with
  `find`, `merge` (returns `False` if the two were already joined), `components`
  and a running `count` of sets.
- `algonotes.binary_heap` – `IndexedHeap(n, start=0)`, a binary min-heap holding every
  vertex with a weight (`start` at 0, the rest at `INF`). It offers `top`, `pop`,
  `decrease(VertexWeight(u, w))`, `len()` and truthiness.
- `algonotes.rb_tree` – `RBTree`, a red-black tree of unique values with `insert`,
  `erase` (both return whether anything changed), `search`, `in`, `len()`,
  in-order iteration and `to_list`. `Color` is the node colour enum.
- `algonotes.geometry_struct` – frozen dataclasses `Point`, `Point3D`, `Vector`,
  `Vector3D`, `Line` (`a*x + b*y + c = 0`), `Circle` and `Plane`
  (`a*x + b*y + c*z + d = 0`), with constructors `Vector.between`, `Vector3D.between`,
  `Line.through`, `Line.from_vectors`, `Circle.through`, `Plane.through`, the method
  `Plane.normal`, and the sort keys `key_xy` and `key_yx`.
- `algonotes.geometry_alg` – `cross`, `cross3d`, `dot`, `det`, `intersect` (returns
  `None` for parallel lines), `circle_contains`, `plane_contains`, and the closest-pair
  distance by sweep line (`closest`) or divide and conquer (`closest_recursive`).
  Both return `INF` for fewer than two points.
- `algonotes.convex_hull` – `convex_hull(points, sort_type=SortType.DIVIDE)` returns the
  hull counter-clockwise, by divide and conquer (`SortType.DIVIDE`) or monotone chain
  (`SortType.XY`). Helpers: `orientation`, `position`, `lower_support`, `upper_support`.
- `algonotes.graph_alg` – on adjacency lists: `shortest` (BFS edge counts, `-1` where
  unreachable), `shortest_positive` (Dijkstra) and `shortest_negative` (Bellman-Ford),
  both giving `INF` where unreachable; `all_pairs` (Floyd-Warshall over a distance
  matrix, input untouched); `bfs`, `components`, `region_components`; `mst` (Kruskal,
  returns total weight and chosen edges); and `bridges`.
- `algonotes.sorting` – `bubble_sort`, `insert_sort`, `selection_sort`, `merge_sort`
  and `heap_sort`, each returning a new list, plus the in-place sift-down `heapify`.

## Errors

Bad input raises ordinary exceptions: `IndexError` for out-of-range vertices or
elements and for `top`/`pop` on an empty heap, `ValueError` for collinear points in
`Circle.through`, an unknown mode in `Line.from_vectors`, or an unknown `sort_type`
in `convex_hull`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algonotes.disjoint_set import DisjointSet

ds = DisjointSet(4)
ds.merge(0, 1)
ds.merge(2, 3)
print(ds.components())  # [[0, 1], [2, 3]]
print(ds.count)         # 2
```

```python
from algonotes.rb_tree import RBTree

tree = RBTree()
for value in (5, 1, 9, 3):
    tree.insert(value)
tree.erase(1)
print(list(tree))  # [3, 5, 9]
print(9 in tree)   # True
```

```python
from algonotes.geometry_struct import Point
from algonotes.geometry_alg import closest
from algonotes.convex_hull import convex_hull

points = [Point(0, 0), Point(3, 4), Point(1, 1)]
print(closest(points))  # 1.4142135623730951
print(convex_hull([Point(0, 0), Point(2, 0), Point(1, 1), Point(2, 2), Point(0, 2)]))
```

```python
from algonotes.edge import WeightedEdge
from algonotes.graph_alg import mst, shortest

print(shortest([[1], [2], []], 0))  # [0, 1, 2]

total, chosen = mst([WeightedEdge(0, 1, 4), WeightedEdge(1, 2, 1), WeightedEdge(0, 2, 2)], 3)
print(total)  # 3
```

```python
from algonotes.sorting import heap_sort

print(heap_sort([3, 1, 2]))  # [1, 2, 3]
```

## What it does not do

There is no command-line tool and no input parsing: points, graphs and edges are
built in Python and passed to the functions directly.