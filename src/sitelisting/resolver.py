from __future__ import annotations

import logging

from datetime import date, datetime, time
from typing import Any, Dict

from sitelisting.dates import format_date
from sitelisting.listing import ColumnType, Listing, ListingItem
from sitelisting.text import truncate_text


logger = logging.getLogger(__name__)


def _as_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def date_sort_value(value: Any) -> str | None:
    """Milliseconds since the epoch, the same number a browser `Date` sorts by."""
    if (dt := _as_datetime(value)) is None:
        return None
    return str(round(dt.timestamp() * 1000))


def number_sort_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_item(item: ListingItem, listing: Listing) -> ListingItem:
    """Return a copy of `item` whose sortable values cover its typed and linked columns.

    Date columns sort on their epoch value and number columns on their plain numeric text.
    Linked columns then sort on their raw value, since the rendered value is wrapped in an anchor;
    when a column is both typed and linked the link pass wins.

    The caller's item is left untouched.
    """
    sortable_values: Dict[str, str] = dict(item.sortable_values)

    for col, col_type in listing.column_types.items():
        value = item.get(col)
        if value is None:
            continue
        if col_type == ColumnType.DATE:
            if (sort_value := date_sort_value(value)) is None:
                logger.warning("Listing '%s': value %r of date column '%s' is not a date, leaving it unsortable", listing.id, value, col)
                continue
            sortable_values[col] = sort_value
        elif col_type == ColumnType.NUMBER:
            sortable_values[col] = number_sort_value(value)

    for col in listing.column_links:
        value = item.get(col)
        if value is not None:
            sortable_values[col] = str(value)

    return item.model_copy(update={"sortable_values": sortable_values})


def reshape_item(item: ListingItem, listing: Listing) -> Dict[str, Any]:
    """Resolve `item` and flatten it into the plain record a listing template consumes."""
    resolved = resolve_item(item, listing)
    record = resolved.to_record()

    record["author"] = ", ".join(resolved.author) if resolved.author else None

    if resolved.date:
        record["date"] = format_date(resolved.date, listing.date_format)
    if resolved.filemodified:
        record["filemodified"] = format_date(resolved.filemodified, listing.date_format, with_time=True)

    if resolved.description is not None:
        max_desc_length = listing.max_description_length or -1
        if max_desc_length > 0:
            record["description"] = truncate_text(resolved.description, max_desc_length)

    return record
