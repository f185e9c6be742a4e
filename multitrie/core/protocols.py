# multitrie/core/protocols.py
"""
Protocol interfaces and typed records shared across multitrie.

The Trie only depends on the decomposer signature, never on a concrete
script implementation, so callers can plug in their own transform.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable
from typing_extensions import TypedDict


class PairRecord(TypedDict):
    """One entry of a JSON pair file: {"key": "...", "value": ...}."""
    key: str
    value: Any


@runtime_checkable
class DecomposerProtocol(Protocol):
    """
    Turns a string into its leading-consonant form.

    Return (True, output) only when every character of `text` belongs to the
    decomposable script. Any other character yields (False, "") with no
    partial output.
    """

    def __call__(self, text: str) -> Tuple[bool, str]:
        ...
