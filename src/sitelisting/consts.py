from typing import Tuple


# Listing configuration keys as they appear in listing front matter.
K_ID                     = "id"
K_TYPE                   = "type"
K_COLUMNS                = "columns"
K_COLUMN_TYPES           = "column-types"
K_COLUMN_LINKS           = "column-links"
K_COLUMN_COUNT           = "column-count"
K_ROW_COUNT              = "row-count"
K_COLUMN_SORT_TARGETS    = "column-sort-targets"
K_CLASSES                = "classes"
K_DATE_FORMAT            = "date-format"
K_MAX_DESC_LENGTH        = "max-description-length"
K_CARD_COLUMN_SPAN       = "card-column-span"

# Grid layout: total width in units and the spans a card may occupy.
GRID_COL_SIZE: int = 24
GRID_VALID_SPANS: Tuple[int, ...] = (2, 3, 4, 6, 8, 12, 24)

DEFAULT_ROW_COUNT: int = 50

ELLIPSIS = "…"
SORT_VALUE_SUFFIX = "-value"

DEFAULT_CONTENT_SELECTOR = "#quarto-content main.content"
