"""Convert parsed word lists into populated tries."""

from pathlib import Path
from typing import Optional, Union

from chartrie.trie import Trie

from .parser import WordListConfig, parse_yaml_file


def build_trie(config: WordListConfig, trie: Optional[Trie] = None) -> Trie:
    """Add every entry of a word list to a trie.

    Args:
        config: Parsed word list
        trie: Trie to populate. A new one is created if omitted.

    Returns:
        The populated trie

    Example:
        config = parse_yaml_string("entries: {tea: 3, ten: 12}")
        trie = build_trie(config)
        trie.is_member("tea")  # True
    """
    if trie is None:
        trie = Trie()

    lowercase = config.config.get('lowercase', False)
    for key, value in config.entries:
        trie.add(key.lower() if lowercase else key, value)
    return trie


def load_trie(path: Union[str, Path]) -> Trie:
    """Parse a word list file and build a trie from it.

    Args:
        path: Path to the YAML file

    Returns:
        A new trie holding every entry of the file
    """
    return build_trie(parse_yaml_file(path))
