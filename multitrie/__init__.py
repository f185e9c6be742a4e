"""
multitrie - in-memory multi-value string index.

Supports exact-prefix, substring and leading-consonant (abbreviation)
lookup over (key, value) pairs. See multitrie.core.trie.Trie.
"""

from multitrie.core import (
    Node,
    Pair,
    Trie,
    TrieDisposedError,
    TrieSettings,
    normalize_key,
)
from multitrie.utils.hangul import try_decompose_to_leading_consonants

__all__ = [
    "Node",
    "Pair",
    "Trie",
    "TrieDisposedError",
    "TrieSettings",
    "normalize_key",
    "try_decompose_to_leading_consonants",
]

__version__ = "0.1.0"
