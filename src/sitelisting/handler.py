from __future__ import annotations

import logging

from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from sitelisting.errors import ListingRenderError, ListingTargetNotFoundError
from sitelisting.listing import Listing, ListingItem
from sitelisting.payload import UnrenderedPayload
from sitelisting.reshaper import reshape_listing
from sitelisting.resolver import reshape_item
from sitelisting.settings import ListingSettings, get_settings
from sitelisting.template_renderer import TemplateRenderer


logger = logging.getLogger(__name__)


class TemplateMarkdownHandler:
    """Markdown pipeline handler for a single listing.

    Renders the listing template into markdown up front (providing the reshaped listing and items
    to the template), hands that markdown to the pipeline through `get_unrendered()`, and inserts
    the HTML the pipeline renders from it into the document through `process_rendered()`.

    Usage:
        ```python
        handler = TemplateMarkdownHandler("listing-table.ejs.md", listing, items, renderer=renderer)
        blocks = handler.get_unrendered().model_dump()["blocks"]
        ...
        handler.process_rendered({listing.id: rendered_div}, doc)
        ```
    """

    def __init__(
        self,
        template: str | Path,
        listing: Listing,
        items: Sequence[ListingItem],
        attributes: Mapping[str, str] | None = None,
        *,
        renderer: TemplateRenderer,
        settings: ListingSettings | None = None,
    ):
        self.listing: Listing = listing
        self.attributes: Dict[str, str] = dict(attributes or {})
        self.settings: ListingSettings = settings or get_settings()

        self.records: List[Dict[str, Any]] = [reshape_item(item, listing) for item in items]
        self.template_path: Path = self.settings.resource_path(template)
        self.markdown: str = renderer.render(
            self.template_path,
            {
                "listing": reshape_listing(listing),
                "items": self.records,
            },
            False,
        )
        logger.debug("Rendered listing '%s' from %s (%d items)", listing.id, self.template_path, len(self.records))

    def get_unrendered(self) -> UnrenderedPayload:
        return UnrenderedPayload.create(self.listing.id, self.markdown)

    def find_or_create_target(self, doc: BeautifulSoup) -> Tag:
        """The element the listing renders into; created inside the content container if absent."""
        listing_el = doc.find(id=self.listing.id)
        if isinstance(listing_el, Tag):
            return listing_el

        selector = self.settings.content_selector
        content = doc.select_one(selector)
        if content is None:
            raise ListingTargetNotFoundError(self.listing.id, selector)

        listing_el = doc.new_tag("div", attrs={"id": self.listing.id})
        content.append(listing_el)
        logger.debug("Created target div for listing '%s' in '%s'", self.listing.id, selector)
        return listing_el

    def process_rendered(self, rendered: Mapping[str, Tag], doc: BeautifulSoup) -> Tag:
        rendered_el = rendered.get(self.listing.id)
        if rendered_el is None:
            raise ListingRenderError(f"No rendered output for listing '{self.listing.id}'")

        listing_el = self.find_or_create_target(doc)

        classes = [clz for clz in listing_el.get_attribute_list("class") if clz]
        for clz in self.listing.classes:
            if clz not in classes:
                classes.append(clz)
        if classes:
            listing_el["class"] = classes

        for attr_name, attr_value in self.attributes.items():
            listing_el[attr_name] = attr_value

        listing_el.clear()
        fragment = BeautifulSoup(rendered_el.decode_contents(), "html.parser")
        for child in list(fragment.contents):
            listing_el.append(child.extract())
        return listing_el
