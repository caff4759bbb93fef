"""Unit tests for collection filters."""

from dataclasses import FrozenInstanceError
from datetime import UTC, datetime
from enum import Enum

import pytest

from chimpkit.pagination import ResourceFilter, SimpleFilter, render_value
from chimpkit.resources import CampaignFilter, ListFilter, MembersFilter


class Status(Enum):
    SENT = "sent"


class TestSimpleFilter:
    """Test payload rendering and page advancing."""

    def test_default_payload(self):
        """Test the default filter requests the first page."""
        assert SimpleFilter().build_payload() == {"count": "50", "offset": "0"}

    def test_none_fields_are_omitted(self):
        """Test unset fields never reach the query string."""
        payload = SimpleFilter(fields="id,name", count=None, offset=None).build_payload()
        assert payload == {"fields": "id,name"}

    def test_build_payload_is_idempotent(self):
        """Test rendering twice gives the same payload and leaves the filter intact."""
        f = ListFilter(count=20, offset=40, email="a@example.com")
        first = f.build_payload()
        second = f.build_payload()
        assert first == second
        assert f == ListFilter(count=20, offset=40, email="a@example.com")

    def test_advance_adds_count_to_offset(self):
        """Test the next page starts right after the current one."""
        f = SimpleFilter(count=25, offset=50)
        advanced = f.advance()
        assert advanced.offset == 75
        assert advanced.count == 25
        assert f.offset == 50

    def test_advance_without_count_uses_api_default(self):
        """Test a filter without count advances by the API's default page size."""
        assert SimpleFilter(count=None, offset=0).advance().offset == 10

    def test_advance_without_offset_starts_at_zero(self):
        """Test a missing offset is treated as zero."""
        assert SimpleFilter(count=5, offset=None).advance().offset == 5

    def test_advance_keeps_subclass_fields(self):
        """Test advancing a subclass keeps its type and filter fields."""
        f = CampaignFilter(status="sent", count=10)
        advanced = f.advance()
        assert isinstance(advanced, CampaignFilter)
        assert advanced.status == "sent"
        assert advanced.build_payload()["offset"] == "10"

    def test_offsets_strictly_increase(self):
        """Test repeated advancing yields strictly increasing offsets."""
        f = MembersFilter(count=3)
        offsets = []
        for _ in range(4):
            f = f.advance()
            offsets.append(f.offset)
        assert offsets == [3, 6, 9, 12]

    def test_filters_are_frozen(self):
        """Test filters cannot be mutated in place."""
        f = SimpleFilter()
        with pytest.raises(FrozenInstanceError):
            f.offset = 10

    def test_satisfies_protocol(self):
        """Test concrete filters satisfy the ResourceFilter protocol."""
        assert isinstance(ListFilter(), ResourceFilter)


class TestRenderValue:
    """Test query value rendering."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "true"),
            (False, "false"),
            (7, "7"),
            (Status.SENT, "sent"),
            (("a", "b"), "a,b"),
            (datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC), "2024-01-02T03:04:05+00:00"),
        ],
    )
    def test_render(self, value, expected):
        """Test each supported value type."""
        assert render_value(value) == expected

    def test_bool_filter_field(self):
        """Test boolean filter fields render as lowercase words."""
        payload = ListFilter(has_ecommerce_store=False).build_payload()
        assert payload["has_ecommerce_store"] == "false"
