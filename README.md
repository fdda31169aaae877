# seagraph

Graph algorithms and the compact data structures they are built on: bitsets,
rank/select, choice dictionaries, packed integer arrays, Dyck words, BFS and
DFS. Pure Python, no dependencies.

## Contents

- `seagraph.bitset`: `Bitset`, a fixed-size bit vector stored in blocks of a
  chosen width (8 bits by default). It supports indexing, whole-block access
  (`get_block`, `set_block`, `get_shifted_block`), `set_all`, `clear`,
  `flip`, `flip_bit` and the in-place operators `&=`, `|=`, `^=`, `-=` as
  well as `~`.
- `seagraph.localtables`: lookup tables over single bytes: `local_rank`,
  `local_select` and `local_dyck_data`, which returns a `LocalDyckData`.
- `seagraph.rankselect`: `RankStructure` and `RankSelect`. Positions and
  counts are 1-based; a query with no answer returns `None`.
- `seagraph.dyck`: `get_match_naive`, `DyckMatchingStructure` and
  `DyckWordLexicon`, which lists every balanced parenthesis word of a given
  even length (a set bit is an opening parenthesis).
- `seagraph.linkedlist`: `LargeDoubleLinkedList`, a circular list of the
  indices `0..size-1` that hands them out while removing them.
- `seagraph.choicedictionary`: `ChoiceDictionary` (with `insert`, `get`,
  `in`, `choice`, `remove` and iteration), `ChoiceDictionaryIterator` and
  `EmptyChoiceDictionaryError`.
- `seagraph.compactarray`: `CompactArray`, which packs small values into
  32-bit groups, and `SimpleSequence`, a plain list-backed reference.
- `seagraph.graph`: `Adjacency`, `Node`, `BasicGraph` (adjacency lists with
  cross indices) and `Compactgraph` (the packed array form).
- `seagraph.graphcreator`: `graph_from_adjacency_matrix` and random graphs:
  `random_fixed`, `random_generated`, `random_imbalanced`,
  `random_undirected` and `random_bipartite`. The random builders take an
  optional `random.Random` (or, for `random_bipartite`, a seed).
- `seagraph.graphio`: `export_gml` and `import_gml` for a small subset of
  GML; malformed input raises `GMLFormatError`.
- `seagraph.bfs`: `BFS`, a breadth-first search you step through with
  `init`, `more`, `next` and `next_component`, or iterate for
  `(vertex, distance)` pairs; `Color` names the vertex colours.
- `seagraph.dfs`: `standard_dfs` and `run_linear_time_inplace_dfs`.
- `seagraph.inplace`: `LinearTimeInplaceDFSRunner`, a DFS that works inside
  a graph array in swapped begin-pointer form and restores it afterwards.
- `seagraph.graphrepresentations`: makes graphs in the packed array form
  (`fast_graph_generation`, `generate_raw_gilbert_graph`,
  `generate_gilbert_graph`) and converts between its variants in place
  (`standard_to_crosspointer`, `standard_to_beginpointer`,
  `swap_representation`, `swapped_beginpointer_to_standard`).
- `seagraph.naivetrail`: `NaiveTrailStructure`, per-vertex bookkeeping of
  used and paired arcs for building Euler trails.
- `seagraph.subgraph`: `SubGraph`, an abstract view with 1-based vertices
  and arcs (`degree`, `head`, `mate`, `g`, `g_inv`, `g_max`, `phi`, `psi`
  and their inverses), and `BaseSubGraph`, a whole `BasicGraph` seen that way.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Examples

### Rank and select

```python
from seagraph.bitset import Bitset
from seagraph.rankselect import RankSelect

bits = Bitset(100)
for i in (21, 40, 65):
    bits[i] = True

rs = RankSelect(bits)
rs.rank(22)    # 1
rs.select(2)   # 41
rs.select(4)   # None
```

### Choice dictionary

```python
from seagraph.choicedictionary import ChoiceDictionary

cd = ChoiceDictionary(100)
for i in (14, 32, 20):
    cd.insert(i)

14 in cd       # True
cd.choice()    # one of the stored indices
list(cd)       # [14, 20, 32]
```

`choice` and `remove` on an empty dictionary raise
`EmptyChoiceDictionaryError`.

### Depth-first search

```python
import random
from seagraph.graphcreator import random_fixed
from seagraph.dfs import standard_dfs

graph = random_fixed(200, 15, random.Random(0))
seen = []
standard_dfs(graph, preprocess=seen.append)
len(seen)      # 200
```

`standard_dfs` takes pre-process, pre-explore, post-explore and post-process
callbacks; any of them may be left out.

### Breadth-first search

```python
from seagraph.bfs import BFS

for vertex, distance in BFS(graph):
    ...
```

### GML

```python
from seagraph.graphio import export_gml, import_gml

export_gml(graph, "graph.gml")
copy = import_gml("graph.gml")
copy.order()   # 200
```

## What the package does not do

- It has no command-line program and no timing or benchmarking harness;
  it is a library only.
- `seagraph.dfs` offers the ordinary stack-based search and the in-place
  search on graph arrays. There are no bit-budgeted DFS variants built on
  segment stacks.
- `seagraph.naivetrail` keeps the arc bookkeeping for one vertex, but the
  package does not build Euler partitions of whole graphs, and there is no
  stack of nested subgraphs beyond `BaseSubGraph`.

## Running the tests

```
pytest
```