"""Graph algorithms (BFS, DFS, in-place DFS) and compact data structures: bitsets, rank/select, choice dictionaries, packed arrays and Dyck words."""

__version__ = "0.1.0"