from __future__ import annotations

import logging

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sitelisting.consts import (
    K_CARD_COLUMN_SPAN, K_COLUMN_COUNT, K_COLUMN_LINKS, K_COLUMN_SORT_TARGETS, K_COLUMN_TYPES, K_DATE_FORMAT,
    K_MAX_DESC_LENGTH, K_ROW_COUNT,
)


logger = logging.getLogger(__name__)


class ListingType(Enum):
    """Layout variant of a listing. `custom` listings render a user supplied template."""
    DEFAULT = "default"
    GRID    = "grid"
    TABLE   = "table"
    CUSTOM  = "custom"

    def is_grid(self) -> bool: return self == self.__class__.GRID


class ColumnType(Enum):
    """Data type of a listing column. Columns without an explicit type are strings."""
    STRING = "string"
    DATE   = "date"
    NUMBER = "number"

    def needs_sort_value(self) -> bool:
        """Dates and numbers render as text that does not sort in value order."""
        return self in (self.__class__.DATE, self.__class__.NUMBER)


class Listing(BaseModel):
    """Configuration for a single listing instance in a document.

    Field names are pythonic; the hyphenated keys used in listing front matter are accepted as
    aliases and produced by `model_dump(by_alias=True)`.
    """
    model_config = ConfigDict(populate_by_name=True)

    id                     : str                      = Field(...,                         description="Identifier of the listing, unique per document; render and script target")
    type                   : ListingType              = Field(default=ListingType.DEFAULT, description="Layout variant")
    columns                : List[str]                = Field(default_factory=list,        description="Ordered column names to display and sort")
    column_types           : Dict[str, ColumnType]    = Field(default_factory=dict,        description="Column name to type; absent columns are strings", alias=K_COLUMN_TYPES)
    column_links           : List[str]                = Field(default_factory=list,        description="Columns whose rendered value is wrapped in a link", alias=K_COLUMN_LINKS)
    column_count           : int | None               = Field(default=None,                description="Number of grid columns", alias=K_COLUMN_COUNT)
    row_count              : int | None               = Field(default=None,                description="Rows per page", alias=K_ROW_COUNT)
    date_format            : str | None               = Field(default=None,                description="Date pattern: tokens such as `MMM d, yyyy`, or a strftime pattern when it contains %", alias=K_DATE_FORMAT)
    max_description_length : int | None               = Field(default=None,                description="Truncate descriptions to this length when positive", alias=K_MAX_DESC_LENGTH)
    classes                : List[str]                = Field(default_factory=list,        description="CSS classes applied to the render target")

    # Computed by reshape_listing()
    card_column_span       : int | None               = Field(default=None,                description="Grid span of each card", alias=K_CARD_COLUMN_SPAN)
    column_sort_targets    : Dict[str, str] | None    = Field(default=None,                description="Column name to the identifier list.js sorts on", alias=K_COLUMN_SORT_TARGETS)

    @model_validator(mode="after")
    def warn_on_unknown_columns(self) -> Self:
        """Links and types for columns that are not displayed are tolerated but almost always a typo."""
        known = set(self.columns)
        for col in self.column_links:
            if col not in known:
                logger.warning("Listing '%s' links column '%s' which is not in its columns", self.id, col)
        for col in self.column_types:
            if col not in known:
                logger.warning("Listing '%s' types column '%s' which is not in its columns", self.id, col)
        return self

    def column_type(self, column: str) -> ColumnType:
        return self.column_types.get(column, ColumnType.STRING)

    def is_linked(self, column: str) -> bool:
        return column in self.column_links

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Self:
        """Build a listing from a front matter style mapping."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Front matter style mapping, omitting unset optional values."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class ListingItem(BaseModel):
    """One content entry of a listing.

    Besides the well known fields below an item carries arbitrary column values as extra fields.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    sortable_values : Dict[str, str]      = Field(default_factory=dict, description="Sort-friendly value per column", alias="sortableValues")
    author          : List[str] | None    = Field(default=None,         description="Authors, rendered comma joined")
    date            : datetime | None     = Field(default=None,         description="Publication date")
    filemodified    : datetime | None     = Field(default=None,         description="File modification time")
    description     : str | None          = Field(default=None,         description="Description text, subject to truncation")

    def get(self, column: str, default: Any = None) -> Any:
        """Value of a column whether it is a declared or an extra field."""
        if column in type(self).model_fields:
            value = getattr(self, column)
            return default if value is None else value
        return (self.model_extra or {}).get(column, default)

    def to_record(self) -> Dict[str, Any]:
        """Shallow plain-dict copy of every field, declared (under their wire keys) and extra."""
        record: Dict[str, Any] = {
            (field.alias or name): getattr(self, name) for name, field in type(self).model_fields.items()
        }
        record.update(self.model_extra or {})
        return record
