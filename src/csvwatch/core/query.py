"""
Filter query validation
"""

import re
from typing import FrozenSet, Optional

from .errors import InvalidQueryError

VALID_QUERY_PATTERN = re.compile(r'[A-Za-z]+')


def parse_filter_query(query: Optional[str]) -> FrozenSet[str]:
    """Turn the raw ``e`` query parameter into a set of excluded category keys.

    An absent or empty query means no filter. Otherwise every character must
    be an ASCII letter; each one is uppercased into its own key.

    Raises:
        InvalidQueryError: if the query holds anything but ASCII letters
    """
    if not query:
        return frozenset()

    if not VALID_QUERY_PATTERN.fullmatch(query):
        raise InvalidQueryError(query)

    return frozenset(c.upper() for c in query)
