# multitrie/core/phonetic.py
# Adapter between the Trie and the leading-consonant decomposer.

from __future__ import annotations

import logging
from typing import Optional

from multitrie.core.normalizer import normalize_key
from multitrie.core.protocols import DecomposerProtocol

logger = logging.getLogger(__name__)


class PhoneticAdapter:
    """
    Wraps a decomposer and exposes the single thing the Trie needs:
    the secondary key for an already-normalized key, or None.
    """

    def __init__(self, decomposer: Optional[DecomposerProtocol] = None) -> None:
        if decomposer is None:
            from multitrie.utils.hangul import try_decompose_to_leading_consonants
            decomposer = try_decompose_to_leading_consonants
        self.decomposer = decomposer

    def secondary_key(self, key: str) -> Optional[str]:
        if not key:
            return None
        ok, out = self.decomposer(key)
        out = normalize_key(out) if ok else ""
        if not out:
            return None
        logger.debug("phonetic key %r -> %r", key, out)
        return out
