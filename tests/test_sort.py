"""Tests for the sort mode mapping."""

from itertools import product

import pytest

from everyquery.engine.constants import SortType
from everyquery.query.sort import SortKey, SortOrder, convert_sort_type


class TestConvertSortType:
    """Test the sort key and order mapping."""

    def test_total_and_injective(self):
        """Test that all 18 combinations map to distinct sort modes."""
        modes = [convert_sort_type(key, order) for key, order in product(SortKey, SortOrder)]
        assert len(modes) == 18
        assert len(set(modes)) == 18
        assert all(isinstance(mode, SortType) for mode in modes)

    @pytest.mark.parametrize(
        ("key", "order", "expected"),
        [
            (SortKey.NAME, SortOrder.ASCENDING, 1),
            (SortKey.NAME, SortOrder.DESCENDING, 2),
            (SortKey.TYPE_NAME, SortOrder.ASCENDING, 9),
            (SortKey.SIZE, SortOrder.DESCENDING, 6),
            (SortKey.DATE_MODIFIED, SortOrder.DESCENDING, 14),
            (SortKey.DATE_ACCESSED, SortOrder.ASCENDING, 23),
            (SortKey.ATTRIBUTES, SortOrder.DESCENDING, 16),
        ],
    )
    def test_matches_sdk_codes(self, key: SortKey, order: SortOrder, expected: int):
        """Test selected combinations against the Everything SDK values."""
        assert convert_sort_type(key, order) == expected

    def test_order_flips_within_key(self):
        """Test that descending is always the ascending code plus one."""
        for key in SortKey:
            ascending = convert_sort_type(key, SortOrder.ASCENDING)
            assert convert_sort_type(key, SortOrder.DESCENDING) == ascending + 1
