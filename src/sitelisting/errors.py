class ListingError(Exception):
    """Base class for errors raised while preparing or rendering a listing."""


class ListingConfigError(ListingError, ValueError):
    """Raised when a listing configuration cannot be used (e.g. a non-positive grid column count)."""


class ListingRenderError(ListingError):
    """Raised when rendered output for a listing is missing or unusable."""


class ListingTargetNotFoundError(ListingRenderError):
    """Raised when neither a target element nor a content container exists in the document."""

    def __init__(self, listing_id: str, selector: str):
        self.listing_id = listing_id
        self.selector = selector
        super().__init__(f"No element with id '{listing_id}' and no container matching '{selector}' to create one in.")
