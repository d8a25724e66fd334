"""Command line lookups against a YAML word list."""

import logging
import sys
from typing import List, Optional

from .converter import load_trie
from .parser import WordListParseError

logger = logging.getLogger(__name__)

MODES = ('search', 'member', 'node')


def main(args: Optional[List[str]] = None) -> int:
    """CLI entry point for querying a word list.

    Usage:
        python -m chartrie.yaml [options] yaml_file query [query ...]

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    import argparse

    parser = argparse.ArgumentParser(
        description='Query a trie loaded from a YAML word list',
        prog='python -m chartrie.yaml',
    )
    parser.add_argument(
        'yaml_file',
        help='Path to the YAML word list',
    )
    parser.add_argument(
        'queries',
        nargs='+',
        metavar='query',
        help='Prefix or key to look up',
    )
    parser.add_argument(
        '--mode',
        choices=MODES,
        default='search',
        help='search: list keys under the prefix; member: key was stored; '
             'node: path exists (default: search)',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print debug logging',
    )

    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        trie = load_trie(parsed.yaml_file)
    except (FileNotFoundError, WordListParseError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Loaded %d key(s) from %s", len(trie), parsed.yaml_file)

    for query in parsed.queries:
        if parsed.mode == 'search':
            for entry in trie.search(query):
                print(f"{entry.key}\t{entry.value}")
        elif parsed.mode == 'member':
            print(f"{query}\t{str(trie.is_member(query)).lower()}")
        else:
            print(f"{query}\t{str(trie.is_node(query)).lower()}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
