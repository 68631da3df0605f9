"""Listing preparation for generated documents: sortable item values, grid layout and list.js bindings."""

from sitelisting.errors import ListingConfigError, ListingError, ListingRenderError, ListingTargetNotFoundError
from sitelisting.grid import column_span
from sitelisting.handler import TemplateMarkdownHandler
from sitelisting.listing import ColumnType, Listing, ListingItem, ListingType
from sitelisting.payload import UnrenderedPayload
from sitelisting.reshaper import reshape_listing
from sitelisting.resolver import reshape_item, resolve_item
from sitelisting.script import template_js_script
from sitelisting.sorting import compute_sorting_targets, uses_value_binding
from sitelisting.template_renderer import TemplateRenderer
from sitelisting.text import truncate_text


__all__ = [
    "ColumnType",
    "Listing",
    "ListingConfigError",
    "ListingError",
    "ListingItem",
    "ListingRenderError",
    "ListingTargetNotFoundError",
    "ListingType",
    "TemplateMarkdownHandler",
    "TemplateRenderer",
    "UnrenderedPayload",
    "column_span",
    "compute_sorting_targets",
    "reshape_item",
    "reshape_listing",
    "resolve_item",
    "template_js_script",
    "truncate_text",
    "uses_value_binding",
]
