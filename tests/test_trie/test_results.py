"""Tests for ResultEntry and ResultCollection."""

from chartrie.trie import ResultCollection, ResultEntry


class TestResultEntry:
    """Tests for ResultEntry."""

    def test_default_key(self):
        """Test entry without a key."""
        entry = ResultEntry(5)
        assert entry.value == 5
        assert entry.key is None

    def test_relabel_key(self):
        """Test that the key can be overwritten."""
        entry = ResultEntry(5, "old")
        entry.key = "new"
        assert entry.key == "new"
        assert entry.value == 5


class TestResultCollection:
    """Tests for ResultCollection."""

    def test_empty(self):
        """Test empty collection."""
        results = ResultCollection()
        assert len(results) == 0
        assert not results
        assert list(results) == []

    def test_add_keeps_order(self):
        """Test that entries iterate in the order they were added."""
        results = ResultCollection()
        results.add(ResultEntry(1, "b"))
        results.add(ResultEntry(2, "a"))

        assert results.keys() == ["b", "a"]
        assert results.values() == [1, 2]
        assert results[0].key == "b"

    def test_no_deduplication(self):
        """Test that identical entries are all kept."""
        results = ResultCollection()
        results.add(ResultEntry(1, "a"))
        results.add(ResultEntry(1, "a"))
        assert len(results) == 2

    def test_merge_appends_in_order(self):
        """Test merging another collection."""
        first = ResultCollection()
        first.add(ResultEntry(1, "a"))
        second = ResultCollection()
        second.add(ResultEntry(2, "b"))
        second.add(ResultEntry(3, "c"))

        first.merge(second)

        assert first.keys() == ["a", "b", "c"]
        assert second.keys() == ["b", "c"]

    def test_merge_empty(self):
        """Test merging an empty collection is a no-op."""
        results = ResultCollection()
        results.add(ResultEntry(1, "a"))
        results.merge(ResultCollection())
        assert len(results) == 1

    def test_as_dict_groups_values(self):
        """Test grouping values by key."""
        results = ResultCollection()
        results.add(ResultEntry(3, "tea"))
        results.add(ResultEntry(4, "ted"))
        results.add(ResultEntry(33, "tea"))

        assert results.as_dict() == {"tea": [3, 33], "ted": [4]}
        assert list(results.as_dict()) == ["tea", "ted"]
