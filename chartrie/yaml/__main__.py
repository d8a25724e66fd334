"""CLI entry point for chartrie.yaml module.

Usage:
    python -m chartrie.yaml [options] yaml_file query [query ...]

Example:
    python -m chartrie.yaml words.yaml te
    python -m chartrie.yaml --mode member words.yaml tea tex
    python -m chartrie.yaml -v words.yaml ""
"""

from .runner import main
import sys

if __name__ == '__main__':
    sys.exit(main())
