import logging

from sitelisting.grid import column_span
from sitelisting.listing import Listing
from sitelisting.sorting import compute_sorting_targets


logger = logging.getLogger(__name__)


def reshape_listing(listing: Listing) -> Listing:
    """Return a deep copy of `listing` with the values its template needs computed.

    Grid listings get the span of each card; every listing gets the sort target of each column.
    A grid without a column count lays out one card per row.
    """
    reshaped = listing.model_copy(deep=True)
    if reshaped.type.is_grid():
        column_count = reshaped.column_count if reshaped.column_count is not None else 1
        reshaped.card_column_span = column_span(column_count)
    reshaped.column_sort_targets = compute_sorting_targets(reshaped)
    logger.debug("Reshaped listing '%s': span=%s targets=%s", reshaped.id, reshaped.card_column_span, reshaped.column_sort_targets)
    return reshaped
