# node.py
# Labeled tree vertex used by the Trie.
# Every insertion creates fresh nodes, so one character may map to several
# children (they are never merged). Identity is the `index` assigned by the
# owning Trie at creation time.

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """
    A single vertex.
    children: char -> ordered list of child nodes (insertion order kept)
    values: values terminated at this vertex
    index: unique id inside one Trie, used only for dedup during search
    """

    __slots__ = ("_children", "_values", "_index")

    def __init__(self, index: int) -> None:
        self._children: Dict[str, List[Node[T]]] = {}
        self._values: List[T] = []
        self._index = index

    # read access -----------------------------------------------------
    @property
    def index(self) -> int:
        return self._index

    @property
    def values(self) -> Tuple[T, ...]:
        return tuple(self._values)

    @property
    def children(self) -> Mapping[str, List[Node[T]]]:
        """Read-only view of the child map."""
        return MappingProxyType(self._children)

    @property
    def is_terminal(self) -> bool:
        return bool(self._values)

    def child_list(self, ch: str) -> Optional[List[Node[T]]]:
        """Children under `ch`, or None when nothing was ever linked there."""
        return self._children.get(ch)

    # mutation (engine only) -------------------------------------------
    def set_child_list(self, ch: str, nodes: List[Node[T]]) -> None:
        self._children[ch] = nodes

    def append_child(self, ch: str, node: Node[T]) -> None:
        """Append `node` under `ch`, creating the list on first use."""
        lst = self._children.get(ch)
        if lst is None:
            self._children[ch] = [node]
        else:
            lst.append(node)

    def add_value(self, value: T) -> None:
        # no uniqueness check, repeated inserts accumulate
        self._values.append(value)

    # teardown ---------------------------------------------------------
    def clear(self) -> None:
        """Shallow reset. Children keep their own contents."""
        self._children.clear()
        self._values.clear()

    def dispose(self) -> None:
        """
        Deep teardown of everything reachable through the child lists.
        Uses an explicit stack so long chains cannot hit the recursion limit.
        """
        stack: List[Node[T]] = [self]
        while stack:
            node = stack.pop()
            for nodes in node._children.values():
                stack.extend(nodes)
                nodes.clear()
            node._children.clear()
            node._values.clear()

    def __repr__(self) -> str:
        return f"Node(index={self._index}, values={len(self._values)}, keys={list(self._children)})"
