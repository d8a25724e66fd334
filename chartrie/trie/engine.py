"""Character trie with multi-value keys and prefix enumeration.

Every edge is labelled by one character of the key. A key may hold several
values; adding to an existing key appends instead of overwriting. Deletion
prunes the branch back up to the nearest node that still carries a value or
another child, so the tree never keeps dead-end paths.
"""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from .node import TrieNode
from .results import ResultCollection, ResultEntry

logger = logging.getLogger(__name__)


class Trie:
    """Prefix tree mapping string keys to lists of values.

    Supports:
    - Add a value under a key (values accumulate per key)
    - Delete a key, pruning branches left empty
    - Check whether a path exists (is_node) or a key is stored (is_member)
    - Enumerate every stored key under a prefix (search)

    Example:
        trie = Trie()
        trie.add("to", 7)
        trie.add("tea", 3)
        trie.add("ten", 12)

        trie.search("te").keys()     # Returns ["tea", "ten"]
        trie.is_node("t")            # Returns True
        trie.is_member("t")          # Returns False
        trie.delete("tea")           # Returns True
    """

    def __init__(self):
        """Initialize an empty trie."""
        self._root = TrieNode()

    def add(self, key: str, value: Any) -> None:
        """Store a value under key.

        Missing nodes along the path are created. If key already holds
        values, value is appended to them.

        Args:
            key: Non-empty key.
            value: Any object, including None.

        Raises:
            TypeError: If key is not a string.
            ValueError: If key is empty.
        """
        if not isinstance(key, str):
            raise TypeError(f"Key must be a string, got {type(key).__name__}")
        if not key:
            raise ValueError("Key must not be empty")

        node = self._traverse(key, create=True)
        if node.value is None:
            node.value = [value]
        else:
            node.value.append(value)

    def delete(self, key: str) -> bool:
        """Delete key and every value stored under it.

        A node that still has children keeps its subtree and only loses its
        values. A childless node is removed together with every ancestor
        that is left without children or values.

        Args:
            key: The key to delete.

        Returns:
            True if a node was found for key, False otherwise.
        """
        if not key:
            return False

        node = self._traverse(key)
        if node is None:
            return False

        if node.children:
            node.value = None
        else:
            self._prune(key)
        return True

    def is_node(self, key: str) -> bool:
        """Check whether a path exists for key.

        Args:
            key: The key or prefix to check.

        Returns:
            True if key is stored or is a prefix of a stored key.
        """
        return self._traverse(key) is not None

    def is_member(self, key: str) -> bool:
        """Check whether key was stored with add().

        Args:
            key: The key to check.

        Returns:
            True if a node exists for key and holds values.
        """
        node = self._traverse(key)
        return node is not None and node.value is not None

    def search(self, prefix: str) -> ResultCollection:
        """Find every stored key starting with prefix.

        Values at a node come before the values of its descendants;
        siblings are visited in the order they were first created.

        Args:
            prefix: Key prefix. The empty string matches every key.

        Returns:
            One ResultEntry per stored value. Empty if nothing matches.
        """
        node = self._traverse(prefix)
        if node is None:
            return ResultCollection()
        return self._collect(node, prefix)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the values stored under key.

        Args:
            key: The key to look up.
            default: Returned when key is not stored.

        Returns:
            A copy of the value list, or default.
        """
        node = self._traverse(key)
        if node is None or node.value is None:
            return default
        return list(node.value)

    def longest_prefix(self, key: str) -> Optional[ResultEntry]:
        """Find the longest stored key that is a prefix of key.

        Args:
            key: The key to match against.

        Returns:
            Entry holding the matched key and its first value, or None
            if no stored key is a prefix of key.
        """
        for end in range(len(key), 0, -1):
            node = self._traverse(key[:end])
            if node is not None and node.value is not None:
                return self._entry(node.value[0], key[:end])
        return None

    def prefixes_of(self, key: str) -> ResultCollection:
        """Find every stored key that is a prefix of key.

        Args:
            key: The key to match against.

        Returns:
            Entries ordered from shortest to longest prefix, one per value.
        """
        results = ResultCollection()
        for end in range(1, len(key) + 1):
            node = self._traverse(key[:end])
            if node is None:
                break
            if node.value is not None:
                for value in node.value:
                    results.add(self._entry(value, key[:end]))
        return results

    def keys(self, prefix: str = '') -> List[str]:
        """Return stored keys under prefix in enumeration order.

        Args:
            prefix: Key prefix. Defaults to every key.

        Returns:
            Each matching key once, regardless of how many values it holds.
        """
        node = self._traverse(prefix)
        if node is None:
            return []
        return [path for _, path in self._walk(node, prefix)]

    def clear(self) -> None:
        """Remove every key."""
        self._root.children.clear()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.is_member(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self.keys())

    def __bool__(self) -> bool:
        return bool(self._root.children)

    def _traverse(self, key: str, create: bool = False) -> Optional[TrieNode]:
        """Walk from the root along key, one character per step.

        Args:
            key: Path to follow. The empty string resolves to the root.
            create: Insert an empty node at every missing step instead of
                giving up.

        Returns:
            Node at the end of the path, or None if the path is missing
            and create is False.
        """
        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                if not create:
                    return None
                child = TrieNode()
                node.children[char] = child
            node = child
        return node

    def _prune(self, key: str) -> None:
        """Detach the node at key and every ancestor left empty by it.

        The node at key must be childless. Each parent is re-resolved from
        the root; the walk stops at the root or at the first parent that
        still has children or values.
        """
        while key:
            parent_key, char = key[:-1], key[-1]
            parent = self._traverse(parent_key)
            del parent.children[char]
            logger.debug("Pruned node %r", key)
            if parent.children or parent.value is not None:
                break
            key = parent_key

    def _collect(self, node: TrieNode, path: str) -> ResultCollection:
        """Enumerate the subtree below node, depth first.

        Args:
            node: Subtree root.
            path: Key spelled by the path from the trie root to node.
        """
        results = ResultCollection()
        for current, current_path in self._walk(node, path):
            for value in current.value:
                results.add(self._entry(value, current_path))
        return results

    @staticmethod
    def _walk(node: TrieNode, path: str) -> Iterator[Tuple[TrieNode, str]]:
        """Yield (node, path) for every node holding values below node.

        Uses an explicit stack so key length is not bounded by the
        recursion limit. A node comes before its descendants; siblings
        come in insertion order.
        """
        stack: List[Tuple[TrieNode, str]] = [(node, path)]
        while stack:
            current, current_path = stack.pop()
            if current.value is not None:
                yield current, current_path
            for char, child in reversed(list(current.children.items())):
                stack.append((child, current_path + char))

    @staticmethod
    def _entry(value: Any, path: str) -> ResultEntry:
        """Wrap a stored value in a fresh ResultEntry.

        A stored ResultEntry keeps its own key; the traversal path is used
        only when that key is None. The stored object itself is not
        modified.
        """
        if isinstance(value, ResultEntry):
            entry = ResultEntry(value.value, value.key)
            if entry.key is None:
                entry.key = path
            return entry
        return ResultEntry(value, path)
