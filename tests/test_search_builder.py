"""Tests for the search specification and its builder methods."""

import pytest
from pydantic import ValidationError

from everyquery import ItemMetadata, Search, SortKey, SortOrder, search, search_regex


class TestDefaults:
    """Test the documented defaults."""

    def test_search_defaults(self):
        """Test that a new search uses the plain defaults."""
        query = search("*.txt")
        assert query.pattern == "*.txt"
        assert not query.regex
        assert not query.case_sensitive
        assert not query.full_path
        assert not query.whole_word
        assert query.sort_key == SortKey.NAME
        assert query.sort_order == SortOrder.ASCENDING
        assert query.requested_metadata == ItemMetadata(0)

    def test_search_regex_sets_flag(self):
        """Test that search_regex only differs in the regex flag."""
        assert search_regex(r"\d+") == Search(pattern=r"\d+", regex=True)


class TestBuilder:
    """Test the builder methods."""

    def test_flags(self):
        """Test each matching flag setter."""
        query = search("foo").match_case(True).match_path(True).match_whole_word(True)
        assert query.case_sensitive
        assert query.full_path
        assert query.whole_word
        assert not query.match_case(False).case_sensitive

    def test_builder_returns_copies(self):
        """Test that the original search is never modified."""
        original = search("foo")
        updated = original.match_case(True).request_metadata(ItemMetadata.SIZE)
        assert original == search("foo")
        assert updated != original

    def test_sort_by_last_write_wins(self):
        """Test that sort_by replaces the previous sort."""
        query = search("*.txt").sort_by(SortKey.SIZE, SortOrder.DESCENDING).sort_by(SortKey.NAME, SortOrder.ASCENDING)
        assert query.sort_key == SortKey.NAME
        assert query.sort_order == SortOrder.ASCENDING

    def test_request_metadata_accumulates(self):
        """Test that repeated requests are combined."""
        twice = search("*.txt").request_metadata(ItemMetadata.SIZE).request_metadata(ItemMetadata.DATE_MODIFIED)
        once = search("*.txt").request_metadata(ItemMetadata.SIZE | ItemMetadata.DATE_MODIFIED)
        assert twice == once
        assert ItemMetadata.SIZE in twice.requested_metadata
        assert ItemMetadata.DATE_MODIFIED in twice.requested_metadata
        assert ItemMetadata.DATE_CREATED not in twice.requested_metadata

    def test_no_validation_of_pattern(self):
        """Test that an invalid regex is accepted when building."""
        assert search_regex("([unclosed").pattern == "([unclosed"


class TestValueSemantics:
    """Test equality, hashing and immutability."""

    def test_equal_searches_hash_equal(self):
        """Test that equal searches can be used as dict keys."""
        a = search("foo").request_metadata(ItemMetadata.SIZE)
        b = search("foo").request_metadata(ItemMetadata.SIZE)
        assert a == b
        assert {a: 1}[b] == 1

    def test_frozen(self):
        """Test that fields cannot be assigned."""
        query = search("foo")
        with pytest.raises(ValidationError):
            query.pattern = "bar"  # type: ignore[misc]


class TestItemMetadataFlags:
    """Test the metadata flag layout."""

    def test_bits_match_everything_request_flags(self):
        """Test that each flag is the Everything request flag value."""
        assert ItemMetadata.SIZE == 0x10
        assert ItemMetadata.DATE_CREATED == 0x20
        assert ItemMetadata.DATE_MODIFIED == 0x40
        assert ItemMetadata.DATE_ACCESSED == 0x80
        assert ItemMetadata.ATTRIBUTES == 0x100
