"""Load tries from YAML word lists.

Example words.yaml:
    config:
      lowercase: true

    entries:
      to: 7
      tea: [3, 33]
      ted: 4

Usage:
    from chartrie.yaml import load_trie
    trie = load_trie('words.yaml')

CLI:
    python -m chartrie.yaml words.yaml te
"""

from .parser import (
    parse_yaml_file,
    parse_yaml_string,
    WordListConfig,
    WordListParseError,
)
from .converter import build_trie, load_trie
from .runner import main

__all__ = [
    'parse_yaml_file',
    'parse_yaml_string',
    'WordListConfig',
    'WordListParseError',
    'build_trie',
    'load_trie',
    'main',
]
