"""
multitrie.core

The indexing engine:
 - Node: labeled vertex with per-character child lists and terminal values
 - Trie: insertion (chain-local links + global per-character index) and search
 - normalize_key: whitespace/case canonicalization shared by insert and search
 - PhoneticAdapter: feeds leading-consonant keys back into the Trie
"""

from .node import Node
from .normalizer import normalize_key
from .phonetic import PhoneticAdapter
from .protocols import DecomposerProtocol, PairRecord
from .trie import Pair, Trie, TrieDisposedError, TrieSettings

__all__ = [
    "Node",
    "normalize_key",
    "PhoneticAdapter",
    "DecomposerProtocol",
    "PairRecord",
    "Pair",
    "Trie",
    "TrieDisposedError",
    "TrieSettings",
]
