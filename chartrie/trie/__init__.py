"""Character trie with prefix search.

- TrieNode: one vertex, optional list of values plus children by character
- ResultEntry / ResultCollection: what prefix queries return
- Trie: add / delete / is_node / is_member / search

Example:
    from chartrie.trie import Trie

    trie = Trie()
    trie.add("tea", 3)
    trie.add("ten", 12)

    for entry in trie.search("te"):
        print(entry.key, entry.value)
"""

from .node import TrieNode
from .results import ResultEntry, ResultCollection
from .engine import Trie

__all__ = [
    # Data structures
    'TrieNode',
    'ResultEntry',
    'ResultCollection',
    # Main engine
    'Trie',
]
