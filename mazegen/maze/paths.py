"""Shortest-path tree rooted at the maze exit.

Two layouts hold the same parent-pointer forest:

* :class:`Tree` appends entries in the order the search settles them. Cheap to
  build, linear to query.
* :class:`SortedTree` is built once from a finished Tree and keeps entries
  sorted by tile index so any tile's parent and distance is a binary search
  away. It has no mutating methods.
"""
from __future__ import annotations

import heapq
from bisect import bisect_left
from typing import Iterator, List, NamedTuple, Optional

from .errors import NotInTree
from .grid import Grid


class TreeEntry(NamedTuple):
    index: int
    parent: Optional[int]
    distance: int


class Tree:
    """Append-only entry list in discovery order."""

    __slots__ = ("entries",)

    def __init__(self):
        self.entries: List[TreeEntry] = []

    def append(self, index: int, parent: Optional[int], distance: int) -> None:
        self.entries.append(TreeEntry(index, parent, distance))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TreeEntry]:
        return iter(self.entries)

    @property
    def root(self) -> Optional[TreeEntry]:
        return self.entries[0] if self.entries else None

    def search(self, index: int) -> Optional[TreeEntry]:
        for e in self.entries:
            if e.index == index:
                return e
        return None


class SortedTree:
    """Entries sorted by tile index with O(log n) lookup."""

    __slots__ = ("_entries", "_keys", "_root")

    def __init__(self, entries: List[TreeEntry], root: Optional[TreeEntry] = None):
        self._entries = tuple(sorted(entries, key=lambda e: e.index))
        self._keys = tuple(e.index for e in self._entries)
        self._root = root

    @classmethod
    def from_tree(cls, tree: Tree) -> "SortedTree":
        return cls(list(tree.entries), root=tree.root)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TreeEntry]:
        return iter(self._entries)

    def __contains__(self, index) -> bool:
        i = bisect_left(self._keys, index)
        return i < len(self._keys) and self._keys[i] == index

    @property
    def root(self) -> Optional[TreeEntry]:
        return self._root

    def lookup(self, index: int) -> TreeEntry:
        i = bisect_left(self._keys, index)
        if i == len(self._keys) or self._keys[i] != index:
            raise NotInTree(index)
        return self._entries[i]

    def parent(self, index: int) -> Optional[int]:
        return self.lookup(index).parent

    def distance(self, index: int) -> int:
        return self.lookup(index).distance

    def max_distance(self) -> int:
        return max((e.distance for e in self._entries), default=0)

    def path_to_root(self, index: int) -> List[int]:
        """Indices from ``index`` to the root inclusive, following parent links."""
        entry = self.lookup(index)
        path = [entry.index]
        while entry.parent is not None:
            entry = self.lookup(entry.parent)
            path.append(entry.index)
        return path


def build_path_tree(grid: Grid, exit_index: int) -> Tree:
    """Dijkstra from ``exit_index`` over open passages, each step costing 1.

    Tiles are appended to the Tree as they are settled, so the exit comes
    first with distance 0 and no parent. Unreachable tiles never appear.
    """
    grid.tile(exit_index)
    best = {exit_index: 0}
    parents = {exit_index: None}
    visited = set()
    tree = Tree()
    heap = [(0, exit_index)]
    while heap:
        dist, current = heapq.heappop(heap)
        if current in visited:
            continue
        visited.add(current)
        tree.append(current, parents[current], dist)
        for n in grid.open_neighbors(current):
            if n in visited:
                continue
            cand = dist + 1
            if cand < best.get(n, cand + 1):
                best[n] = cand
                parents[n] = current
                heapq.heappush(heap, (cand, n))
    return tree


__all__ = ["TreeEntry", "Tree", "SortedTree", "build_path_tree"]
