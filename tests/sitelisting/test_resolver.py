from datetime import datetime, timezone

import pytest

from sitelisting.listing import Listing, ListingItem
from sitelisting.resolver import reshape_item, resolve_item


class TestResolveItem:
    def test_date_sorts_on_epoch_milliseconds(self):
        listing = Listing.model_validate({"id": "l", "columns": ["date"], "column-types": {"date": "date"}})
        item = ListingItem(date=datetime(2021, 1, 1, tzinfo=timezone.utc))
        assert resolve_item(item, listing).sortable_values == {"date": "1609459200000"}

    def test_date_in_extra_field_and_iso_string(self):
        listing = Listing.model_validate({
            "id": "l",
            "columns": ["published", "updated"],
            "column-types": {"published": "date", "updated": "date"},
        })
        item = ListingItem.model_validate({
            "published": datetime(2021, 1, 1, 0, 0, 1, tzinfo=timezone.utc),
            "updated": "2021-01-02T00:00:00+00:00",
        })
        resolved = resolve_item(item, listing)
        assert resolved.sortable_values == {"published": "1609459201000", "updated": "1609545600000"}

    def test_unparseable_date_is_skipped(self, caplog):
        listing = Listing.model_validate({"id": "l", "columns": ["when"], "column-types": {"when": "date"}})
        item = ListingItem.model_validate({"when": "sometime soon"})
        assert resolve_item(item, listing).sortable_values == {}
        assert "not a date" in caplog.text

    @pytest.mark.parametrize("value, expected", [(3, "3"), (3.0, "3"), (4.5, "4.5"), ("12", "12")])
    def test_number_sorts_on_plain_value(self, value, expected):
        listing = Listing.model_validate({"id": "l", "columns": ["n"], "column-types": {"n": "number"}})
        item = ListingItem.model_validate({"n": value})
        assert resolve_item(item, listing).sortable_values == {"n": expected}

    def test_linked_column_sorts_on_raw_value(self, table_listing, post_item):
        resolved = resolve_item(post_item, table_listing)
        assert resolved.sortable_values["title"] == "Hello World"
        assert resolved.sortable_values["date"] == "1609459200000"
        assert "tags" not in resolved.sortable_values

    def test_link_pass_overrides_type_pass(self):
        listing = Listing.model_validate({
            "id": "l",
            "columns": ["score"],
            "column-types": {"score": "number"},
            "column-links": ["score"],
        })
        item = ListingItem.model_validate({"score": 7.0})
        # the number pass yields "7", the link pass then stores the raw value
        assert resolve_item(item, listing).sortable_values == {"score": "7.0"}

    def test_missing_values_are_skipped(self, table_listing):
        item = ListingItem()
        assert resolve_item(item, table_listing).sortable_values == {}

    def test_existing_sortable_values_are_kept(self, table_listing):
        item = ListingItem.model_validate({"title": "A", "sortableValues": {"custom": "x"}})
        assert resolve_item(item, table_listing).sortable_values == {"custom": "x", "title": "A"}

    def test_input_item_is_not_mutated(self, table_listing, post_item):
        before = post_item.model_dump()
        resolved = resolve_item(post_item, table_listing)
        assert post_item.model_dump() == before
        assert post_item.sortable_values == {}
        assert resolved is not post_item
        assert resolved.get("path") == "posts/hello.html"


class TestReshapeItem:
    def test_record_formatting(self, table_listing, post_item):
        listing = table_listing.model_copy(update={"date_format": "%Y-%m-%d", "max_description_length": 20})
        record = reshape_item(post_item, listing)
        assert record["author"] == "Ada Lovelace, Grace Hopper"
        assert record["date"] == "2021-01-01"
        assert record["filemodified"] == "2021-01-02"
        assert record["description"] == "The quick brown fox…"
        assert record["title"] == "Hello World"
        assert record["sortableValues"] == {"title": "Hello World", "date": "1609459200000"}

    def test_defaults_without_options(self, table_listing, post_item):
        record = reshape_item(post_item, table_listing)
        assert record["date"] == post_item.date.strftime("%x")
        assert record["filemodified"] == post_item.filemodified.strftime("%c")
        assert record["description"] == post_item.description

    @pytest.mark.parametrize("max_length", [None, 0, -5])
    def test_non_positive_length_does_not_truncate(self, table_listing, post_item, max_length):
        listing = table_listing.model_copy(update={"max_description_length": max_length})
        assert reshape_item(post_item, listing)["description"] == post_item.description

    def test_missing_author_and_dates(self, table_listing):
        record = reshape_item(ListingItem.model_validate({"title": "A"}), table_listing)
        assert record["author"] is None
        assert record["date"] is None
        assert record["filemodified"] is None



def test_token_date_format(table_listing, post_item):
    listing = table_listing.model_copy(update={"date_format": "MM/dd/yyyy"})
    record = reshape_item(post_item, listing)
    assert record["date"] == "01/01/2021"
    assert record["filemodified"] == "01/02/2021"
