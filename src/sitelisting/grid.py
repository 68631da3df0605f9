import logging

from sitelisting.consts import GRID_COL_SIZE, GRID_VALID_SPANS
from sitelisting.errors import ListingConfigError


logger = logging.getLogger(__name__)


def column_span(columns: int) -> int:
    """Force a requested grid column count into the span bucket each card occupies.

    The span is the smallest supported bucket that is at least `GRID_COL_SIZE / columns`, so a
    count that does not divide the grid evenly degrades to wider cards (fewer per row) rather
    than a fractional span.

    Raises:
        ListingConfigError: if `columns` is not a positive integer.
    """
    if isinstance(columns, bool) or not isinstance(columns, int) or columns <= 0:
        raise ListingConfigError(f"Grid column count must be a positive integer, got {columns!r}")

    raw_value = GRID_COL_SIZE / columns
    for valid_span in GRID_VALID_SPANS:
        if raw_value <= valid_span:
            logger.debug("Grid of %d columns uses span %d (raw %.2f)", columns, valid_span, raw_value)
            return valid_span
    return GRID_VALID_SPANS[-1]
