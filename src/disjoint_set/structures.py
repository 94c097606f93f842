"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, List, Optional, Protocol, Sequence, TypeVar


class SupportsOrderedHash(Protocol):
    """Element capability: hashable, comparable for equality, totally ordered."""

    def __hash__(self) -> int: ...

    def __eq__(self, other: Any) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=SupportsOrderedHash)


@dataclass
class ClassNode:
    """Parent link and class size for one index."""

    parent: int
    size: int = 1


class DisjointSetStore(Generic[T]):
    """Union-find over arbitrary elements, backed by compact insertion indices.

    Each inserted element gets the next index. Classes are merged by size and
    looked up with path halving. Unknown elements are reported through return
    values (`None` from `find`, `False` from `union`) rather than exceptions.
    """

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._to_index: Dict[T, int] = {}
        self._from_index: List[T] = []
        self._nodes: List[ClassNode] = []
        for element in elements:
            self.insert(element)

    def __len__(self) -> int:
        return len(self._from_index)

    def __contains__(self, x: object) -> bool:
        return x in self._to_index

    def insert(self, x: T) -> None:
        """Add `x` as a singleton class."""

        if x in self._to_index:
            raise ValueError(f"element {x!r} is already in the store")
        index = len(self._nodes)
        self._nodes.append(ClassNode(parent=index))
        self._to_index[x] = index
        self._from_index.append(x)

    def find(self, x: T) -> Optional[T]:
        """Return the representative element of `x`'s class, or None if `x` is unknown."""

        root = self._find_root(x)
        if root is None:
            return None
        return self._from_index[root]

    def union(self, x: T, y: T) -> bool:
        """Merge the classes of `x` and `y`; False when either was never inserted."""

        if x > y:
            return self.union(y, x)

        x_root = self._find_root(x)
        y_root = self._find_root(y)
        if x_root is None or y_root is None:
            return False
        if x_root == y_root:
            return True

        x_size = self._nodes[x_root].size
        y_size = self._nodes[y_root].size
        if x_size < y_size:
            x_root, y_root = y_root, x_root
        self._nodes[y_root].parent = x_root
        self._nodes[x_root].size = x_size + y_size
        return True

    def unions(self, xs: Sequence[T]) -> bool:
        """Union the first element of `xs` with every later one, stopping at the first failure."""

        if len(xs) < 2:
            return True
        head = xs[0]
        for x in xs[1:]:
            if not self.union(head, x):
                return False
        return True

    def connected(self, x: T, y: T) -> bool:
        root = self._find_root(x)
        return root is not None and root == self._find_root(y)

    def class_size(self, x: T) -> Optional[int]:
        """Return the number of elements in `x`'s class, or None if `x` is unknown."""

        root = self._find_root(x)
        if root is None:
            return None
        return self._nodes[root].size

    def _find_root(self, x: T) -> Optional[int]:
        index = self._to_index.get(x)
        if index is None:
            return None
        return self._find_index(index)

    def _find_index(self, index: int) -> int:
        nodes = self._nodes
        while nodes[index].parent != index:
            # point at the grandparent, then step there
            grandparent = nodes[nodes[index].parent].parent
            nodes[index].parent = grandparent
            index = grandparent
        return index


__all__ = ["ClassNode", "DisjointSetStore", "SupportsOrderedHash"]
