"""Tests for shared/serializer.py."""

import pytest

from shared.exceptions import StorageError
from shared.serializer import (
    OWNER_SELECT,
    OwnerNotPopulatedError,
    display_name,
    owner_display_name,
)


class TestOwnerSelect:
    def test_embeds_owner_with_inner_join(self):
        """Reads must embed the owner and drop rows whose owner is missing."""
        assert OWNER_SELECT.startswith("*")
        assert "owner:users!inner(" in OWNER_SELECT
        assert "first_name" in OWNER_SELECT
        assert "last_name" in OWNER_SELECT


class TestOwnerDisplayName:
    def test_display_name(self):
        assert display_name("Alice", "Smith") == "Alice Smith"

    def test_reads_embedded_owner(self):
        row = {"id": "1", "owner": {"first_name": "Alice", "last_name": "Smith"}}
        assert owner_display_name(row) == "Alice Smith"

    def test_accepts_single_item_list(self):
        row = {"id": "1", "owner": [{"first_name": "Bob", "last_name": "Jones"}]}
        assert owner_display_name(row) == "Bob Jones"

    def test_missing_name_parts_are_empty(self):
        row = {"id": "1", "owner": {"first_name": None, "last_name": "Smith"}}
        assert owner_display_name(row) == " Smith"

    @pytest.mark.parametrize("owner", [None, {}, []])
    def test_unpopulated_owner_raises(self, owner):
        """Serializing without the owner is a storage fault, not a crash."""
        row = {"id": "row-1", "owner": owner}
        with pytest.raises(OwnerNotPopulatedError) as exc_info:
            owner_display_name(row)

        assert isinstance(exc_info.value, StorageError)
        assert exc_info.value.details["row_id"] == "row-1"

    def test_absent_owner_key_raises(self):
        with pytest.raises(OwnerNotPopulatedError):
            owner_display_name({"id": "row-1", "user_id": "u-1"})
