# trie.py
# Multi-value string index with prefix, substring and leading-consonant lookup.
#
# Unlike a classic trie, paths are never shared: every insert builds its own
# chain of fresh nodes. Substring search comes from a second map at the top,
# the global index, which links every node of every chain under its character.
# A query can therefore start at any position of any inserted key, then walks
# the chain-local children for the rest of the key and finally collects every
# value below the matched nodes.

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import (
    Dict,
    Generic,
    Iterable,
    List,
    Mapping,
    Optional,
    Set,
    Tuple,
    TypeVar,
    Union,
)

from multitrie.core.node import Node
from multitrie.core.normalizer import normalize_key
from multitrie.core.phonetic import PhoneticAdapter
from multitrie.core.protocols import DecomposerProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")

ROOT_INDEX = -1  # outside the counter range, the root is never an anchor


class TrieDisposedError(RuntimeError):
    """Raised when a disposed Trie is asked to insert."""


@dataclass(frozen=True)
class TrieSettings:
    """
    use_partial_search: also index every character occurrence at the top,
        so a query may match anywhere inside a key (substring search).
        With it off, only prefixes match.
    use_consonant_search: insert the leading-consonant form of keys that
        fully decompose (abbreviation search, e.g. "ㅎㄱ" finds "한글").
    """

    use_partial_search: bool = True
    use_consonant_search: bool = True

    @classmethod
    def default(cls) -> "TrieSettings":
        return cls()


@dataclass(frozen=True)
class Pair(Generic[T]):
    key: str
    value: T


PairLike = Union[Pair[T], Tuple[str, T]]


class Trie(Generic[T]):
    """
    In-memory index of (key, value) pairs.

    Public API:
      - insert(pair) / insert_key(key, value) / insert_many(pairs)
      - find_all(key) -> list of values (fresh list on every call)
      - clear(), dispose()
      - total_count: number of nodes ever created (diagnostics only)

    Not thread safe. Callers sharing one instance across threads must
    serialize access themselves.
    """

    def __init__(
        self,
        settings: Optional[TrieSettings] = None,
        pairs: Iterable[PairLike] = (),
        decomposer: Optional[DecomposerProtocol] = None,
    ) -> None:
        self._settings = settings or TrieSettings.default()
        self._root: Node[T] = Node(ROOT_INDEX)
        # char -> nodes at any depth of any chain (filled only with partial search)
        self._global_index: Dict[str, List[Node[T]]] = {}
        self._next_index = 0
        self._disposed = False
        self._phonetic = PhoneticAdapter(decomposer)
        self.insert_many(pairs)

    @classmethod
    def create_new(cls, settings: Optional[TrieSettings] = None, *pairs: PairLike) -> "Trie[T]":
        return cls(settings, pairs)

    # properties ----------------------------------------------------------
    @property
    def settings(self) -> TrieSettings:
        return self._settings

    @property
    def total_count(self) -> int:
        """Nodes created so far. Survives clear() and dispose()."""
        return self._next_index

    total_node_count = total_count

    @property
    def root(self) -> Node[T]:
        return self._root

    @property
    def global_index(self) -> Mapping[str, List[Node[T]]]:
        return MappingProxyType(self._global_index)

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # insertion -----------------------------------------------------------
    def insert(self, pair: Pair[T]) -> None:
        self.insert_key(pair.key, pair.value)

    def insert_many(self, pairs: Iterable[PairLike]) -> None:
        """Insert in the given order. Accepts Pair objects or (key, value) tuples."""
        for p in pairs:
            if isinstance(p, Pair):
                self.insert_key(p.key, p.value)
            else:
                key, value = p
                self.insert_key(key, value)

    def insert_key(self, key: str, value: T) -> None:
        """
        Insert `value` under the normalized `key`, plus a second independent
        chain for its leading-consonant form when that is enabled and the key
        decomposes.
        """
        if self._disposed:
            raise TrieDisposedError("cannot insert into a disposed Trie")

        key = normalize_key(key)
        if not key:
            # the value would sit on the root where no query can reach it
            logger.debug("ignoring empty key for value %r", value)
            return

        self._insert_chain(key, value)

        if self._settings.use_consonant_search:
            alt = self._phonetic.secondary_key(key)
            if alt is not None:
                self._insert_chain(alt, value)

    def _insert_chain(self, key: str, value: T) -> None:
        partial = self._settings.use_partial_search
        node = self._root
        for ch in key:
            child: Node[T] = Node(self._next_index)
            self._next_index += 1
            node.append_child(ch, child)
            if partial:
                entries = self._global_index.get(ch)
                if entries is None:
                    self._global_index[ch] = [child]
                else:
                    entries.append(child)
            node = child
        node.add_value(value)

    # search ----------------------------------------------------------------
    def find_all(self, key: str) -> List[T]:
        """
        Values of every key that matches `key` (as a prefix, or anywhere when
        the matching chains were built with partial search). Each value is
        returned once, in first-seen order. No match gives an empty list.

        Dedup is a linear scan by equality, so very large result sets cost
        O(n^2); wrap values in a hashable key type if that matters.
        """
        if self._disposed:
            return []
        key = normalize_key(key)
        if not key:
            return []
        anchors = self._find(key)
        if not anchors:
            return []
        return self._collect_values(anchors)

    def __contains__(self, key: str) -> bool:
        return bool(self.find_all(key))

    def _entry_nodes(self, ch: str) -> List[Node[T]]:
        """
        Where a query may start. With partial search the global index already
        holds every occurrence of `ch`, heads included, in insertion order.
        """
        anywhere = self._global_index.get(ch)
        if anywhere:
            return list(anywhere)
        return list(self._root.child_list(ch) or [])

    def _find(self, key: str) -> List[Node[T]]:
        """Nodes matching the last character of `key`, deduped by index."""
        last = len(key) - 1
        result: List[Node[T]] = []
        seen: Set[int] = set()

        # (node, depth): node matched key[depth]
        stack = [(n, 0) for n in reversed(self._entry_nodes(key[0]))]
        while stack:
            node, depth = stack.pop()
            if depth == last:
                if node.index in seen:
                    continue
                seen.add(node.index)
                result.append(node)
                continue
            # continuation is always chain-local, never the global index
            nxt = node.child_list(key[depth + 1])
            if nxt:
                stack.extend((c, depth + 1) for c in reversed(nxt))
        return result

    def _collect_values(self, anchors: List[Node[T]]) -> List[T]:
        """Every value at or below the anchors, pre-order, without duplicates."""
        out: List[T] = []
        visited: Set[int] = set()
        stack = list(reversed(anchors))
        while stack:
            node = stack.pop()
            if node.index in visited:
                continue
            visited.add(node.index)
            for v in node.values:
                if v not in out:
                    out.append(v)
            for nodes in reversed(list(node.children.values())):
                stack.extend(reversed(nodes))
        return out

    # teardown ---------------------------------------------------------------
    def clear(self) -> None:
        """
        Drop all top-level links and the global index. Chains become
        unreachable but are not walked. The Trie stays usable.
        """
        self._root.clear()
        self._global_index.clear()
        logger.debug("trie cleared (%d nodes created so far)", self._next_index)

    def dispose(self) -> None:
        """
        Walk and empty every node, then mark the Trie disposed: searches
        return [] and inserts raise TrieDisposedError.
        """
        if self._disposed:
            return
        self._root.dispose()
        for nodes in self._global_index.values():
            nodes.clear()
        self._global_index.clear()
        self._disposed = True
        logger.debug("trie disposed")

    def __repr__(self) -> str:
        return (
            f"Trie(partial={self._settings.use_partial_search}, "
            f"consonant={self._settings.use_consonant_search}, nodes={self._next_index})"
        )
