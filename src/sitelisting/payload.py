from typing import Any, Dict, Self

from pydantic import BaseModel, Field, model_serializer


class UnrenderedPayload(BaseModel):
    """Markdown blocks awaiting rendering, keyed by the id of the listing that produced them."""
    blocks : Dict[str, str] = Field(default_factory=dict, description="Listing id to unrendered markdown")

    @model_serializer
    def model_serialize(self) -> Dict[str, Any]:
        """Serialize the payload to a dictionary."""
        return {"blocks": dict(self.blocks)}

    @classmethod
    def create(cls, listing_id: str, markdown: str) -> Self:
        return cls(blocks={listing_id: markdown})

    def merge(self, other: "UnrenderedPayload") -> Self:
        """Combine the blocks of two payloads, e.g. for several listings in one document."""
        blocks = dict(self.blocks)
        blocks.update(other.blocks)
        return self.model_validate({"blocks": blocks})
