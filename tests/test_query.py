"""
Tests for filter query validation
"""

import pytest

from csvwatch.core.errors import InvalidQueryError
from csvwatch.core.query import parse_filter_query


class TestParseFilterQuery:
    """Test the parse_filter_query function"""

    def test_absent_query_means_no_filter(self):
        assert parse_filter_query(None) == frozenset()
        assert parse_filter_query('') == frozenset()

    @pytest.mark.parametrize('query, expected', [
        ('A', {'A'}),
        ('a', {'A'}),
        ('abc', {'A', 'B', 'C'}),
        ('AbA', {'A', 'B'}),
        ('zZ', {'Z'}),
    ])
    def test_letters_are_uppercased(self, query, expected):
        assert parse_filter_query(query) == frozenset(expected)

    @pytest.mark.parametrize('query', [
        '1a', 'a1', 'a b', ' ', 'a,b', 'a\n', 'é', '-', 'A_B',
    ])
    def test_rejects_anything_but_ascii_letters(self, query):
        with pytest.raises(InvalidQueryError) as exc_info:
            parse_filter_query(query)

        assert exc_info.value.query == query
        assert str(exc_info.value) == f"Invalid Query: {query}"
