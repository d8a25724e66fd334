"""Character trie with exact lookup and prefix search."""

from .trie import ResultCollection, ResultEntry, Trie, TrieNode

__all__ = [
    'ResultCollection',
    'ResultEntry',
    'Trie',
    'TrieNode',
]
