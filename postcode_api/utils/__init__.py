"""
Utility functions and helpers
"""

from .helpers import (
    normalize_keyword,
    build_search_url
)
from .parsing import (
    split_suburb_state,
    parse_postcode_row,
    parse_postcode_table
)

__all__ = [
    "normalize_keyword",
    "build_search_url",
    "split_suburb_state",
    "parse_postcode_row",
    "parse_postcode_table"
]
