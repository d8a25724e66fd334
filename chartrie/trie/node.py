"""Trie vertex.

A node either stores one or more values (the path leading to it is a key)
or is path-only (``value is None``) and exists because some longer key
passes through it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(eq=False)
class TrieNode:
    """Node in a character trie.

    Nodes compare by identity and their repr lists child characters only,
    so neither walks the subtree.

    Attributes:
        children: Child nodes keyed by a single character.
        value: Values stored under the key spelled by the path to this
            node, in insertion order. None if the node is path-only.
    """
    children: Dict[str, 'TrieNode'] = field(default_factory=dict)
    value: Optional[List[Any]] = None

    def __repr__(self) -> str:
        return f"TrieNode(value={self.value!r}, children={list(self.children)!r})"

    @property
    def has_value(self) -> bool:
        """True if a key ends at this node."""
        return self.value is not None

    @property
    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return not self.children
