"""Result containers returned by trie queries."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional


@dataclass
class ResultEntry:
    """One value paired with the key it was found under.

    The key can be reassigned after construction.
    """
    value: Any
    key: Optional[str] = None


@dataclass
class ResultCollection:
    """Ordered, appendable list of ResultEntry objects.

    Entries keep the order in which they were added. No deduplication is
    done: the same key appears once per stored value.

    Example:
        results = ResultCollection()
        results.add(ResultEntry(3, "tea"))
        results.merge(other)
        for entry in results:
            print(entry.key, entry.value)
    """
    entries: List[ResultEntry] = field(default_factory=list)

    def add(self, entry: ResultEntry) -> None:
        """Append one entry."""
        self.entries.append(entry)

    def merge(self, other: 'ResultCollection') -> None:
        """Append every entry of another collection, keeping its order.

        Args:
            other: Collection to absorb. It is left unchanged.
        """
        self.entries.extend(other.entries)

    def keys(self) -> List[Optional[str]]:
        """Return entry keys in emission order."""
        return [entry.key for entry in self.entries]

    def values(self) -> List[Any]:
        """Return entry values in emission order."""
        return [entry.value for entry in self.entries]

    def as_dict(self) -> Dict[Optional[str], List[Any]]:
        """Group values by key.

        Returns:
            Mapping of key to the list of its values, ordered by the first
            appearance of each key.
        """
        grouped: Dict[Optional[str], List[Any]] = {}
        for entry in self.entries:
            grouped.setdefault(entry.key, []).append(entry.value)
        return grouped

    def __iter__(self) -> Iterator[ResultEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> ResultEntry:
        return self.entries[index]
