"""Sort target resolution shared by the listing reshaper and the list.js script generator."""

from typing import Dict

from sitelisting.consts import SORT_VALUE_SUFFIX
from sitelisting.listing import Listing


def uses_value_binding(listing: Listing, column: str) -> bool:
    """True when the rendered text of `column` cannot be sorted on directly.

    Dates and numbers render as formatted text and linked columns are wrapped in anchor markup,
    so those sort on a separate `data-<column>-value` attribute instead.
    """
    return listing.column_type(column).needs_sort_value() or listing.is_linked(column)


def sort_value_name(column: str) -> str:
    return f"{column}{SORT_VALUE_SUFFIX}"


def compute_sorting_targets(listing: Listing) -> Dict[str, str]:
    """Map every listing column to the identifier a client side sort binds to."""
    return {
        column: sort_value_name(column) if uses_value_binding(listing, column) else column
        for column in listing.columns
    }
