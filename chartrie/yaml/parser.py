"""YAML parsing and validation for trie word lists.

A word list is a YAML mapping with an optional ``config`` section and an
``entries`` section holding the keys to load and their values.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class WordListConfig:
    """Parsed word list.

    Attributes:
        config: Loader options (``lowercase``).
        entries: (key, value) pairs in document order. A key listed with
            several values appears once per value.
    """
    config: Dict[str, Any] = field(default_factory=dict)
    entries: List[Tuple[str, Any]] = field(default_factory=list)


class WordListParseError(Exception):
    """Error parsing or validating a word list."""
    pass


def parse_yaml_file(path: Union[str, Path]) -> WordListConfig:
    """Parse and validate a word list file.

    Args:
        path: Path to the YAML file

    Returns:
        WordListConfig with parsed options and entries

    Raises:
        WordListParseError: If the file is invalid
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    logger.debug("Reading word list %s", path)
    with open(path) as f:
        return parse_yaml_string(f.read())


def parse_yaml_string(content: str) -> WordListConfig:
    """Parse a word list from a string.

    Args:
        content: YAML content as string

    Returns:
        WordListConfig with parsed options and entries
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise WordListParseError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise WordListParseError("YAML root must be a mapping")

    return _validate_yaml_data(data)


def _validate_yaml_data(data: Dict[str, Any]) -> WordListConfig:
    """Validate parsed YAML data structure.

    Raises:
        WordListParseError: If validation fails
    """
    config = data.get('config') or {}
    if not isinstance(config, dict):
        raise WordListParseError("'config' must be a mapping")

    lowercase = config.get('lowercase', False)
    if not isinstance(lowercase, bool):
        raise WordListParseError("'config.lowercase' must be a boolean")

    raw_entries = data.get('entries') or {}
    if isinstance(raw_entries, dict):
        entries = _entries_from_mapping(raw_entries)
    elif isinstance(raw_entries, list):
        entries = _entries_from_list(raw_entries)
    else:
        raise WordListParseError("'entries' must be a mapping or a list")

    logger.debug("Parsed %d entries", len(entries))
    return WordListConfig(config=config, entries=entries)


def _entries_from_mapping(raw: Dict[Any, Any]) -> List[Tuple[str, Any]]:
    """Expand ``key: value`` and ``key: [v1, v2]`` forms.

    An empty value list would store nothing, so it is rejected.
    """
    entries = []
    for key, value in raw.items():
        _validate_key(key, f"entry {key!r}")
        if isinstance(value, list):
            if not value:
                raise WordListParseError(f"entry {key!r}: value list must not be empty")
            entries.extend((key, item) for item in value)
        else:
            entries.append((key, value))
    return entries


def _entries_from_list(raw: List[Any]) -> List[Tuple[str, Any]]:
    """Expand the long form: a list of ``{key: ..., value: ...}`` mappings."""
    entries = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise WordListParseError(f"Entry {i} must be a mapping")
        if 'key' not in item:
            raise WordListParseError(f"Entry {i} missing required field 'key'")
        _validate_key(item['key'], f"Entry {i}")
        entries.append((item['key'], item.get('value')))
    return entries


def _validate_key(key: Any, where: str) -> None:
    if not isinstance(key, str):
        raise WordListParseError(f"{where}: key must be a string")
    if not key:
        raise WordListParseError(f"{where}: key must not be empty")
