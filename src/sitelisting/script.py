"""Generates the script that binds list.js to a rendered listing, enabling sorting, paging and filtering."""

import json

from typing import Any, List

from sitelisting.listing import Listing
from sitelisting.settings import get_settings
from sitelisting.sorting import sort_value_name, uses_value_binding


def page_count(listing: Listing) -> int:
    """Items shown per page. Grids show `row-count` rows of `column-count` cards."""
    column_count = listing.column_count or 0
    row_count = listing.row_count or get_settings().default_row_count
    return row_count * column_count if column_count > 0 else row_count


def value_names(listing: Listing) -> List[Any]:
    """list.js `valueNames`: each column by name, plus a data attribute binding for value-sorted columns."""
    names: List[Any] = []
    for col in listing.columns:
        names.append(col)
        if uses_value_binding(listing, col):
            names.append({"attr": f"data-{sort_value_name(col)}", "name": sort_value_name(col)})
    return names


def template_js_script(id: str, listing: Listing, item_count: int) -> str:
    page_size = page_count(listing)

    page_js = ""
    if item_count > page_size:
        page_js = f"""page: {page_size},
      pagination: true,"""

    return f"""
  window.document.addEventListener("DOMContentLoaded", function (_event) {{
    const options = {{
      valueNames: {json.dumps(value_names(listing))},
      {page_js}
    }};
    const userList = new List({json.dumps(id)}, options);
  }});
  """
