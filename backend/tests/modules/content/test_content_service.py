"""Tests for the content service."""

import threading
import uuid
import pytest
from datetime import datetime, timezone
from typing import Any, Optional
from unittest.mock import MagicMock

from modules.content.exceptions import ContentNotFoundError, IdMismatchError
from modules.content.models import ContentItem, ContentKind
from modules.content.repository import ContentRepository
from modules.content.service import ContentService
from modules.users.exceptions import OwnerNotFoundError
from modules.users.models import User
from modules.users.repository import UserRepository
from shared.exceptions import ReferenceNotFound
from shared.validation import MissingFieldError
from tests.conftest import TEST_USER_EMAIL, TEST_USER_ID, create_mock_user_row

ITEM_ID = "22222222-2222-2222-2222-222222222222"


def make_item(kind: ContentKind = ContentKind.STORY, **overrides) -> ContentItem:
    values = {
        "id": ITEM_ID,
        "kind": kind,
        "title": "A",
        "content": "B",
        "owner_id": TEST_USER_ID,
        "owner_name": "Alice Smith",
        "posted": datetime.now(timezone.utc),
    }
    values.update(overrides)
    return ContentItem(**values)


@pytest.fixture
def users() -> MagicMock:
    repo = MagicMock(spec=UserRepository)
    alice = User(**create_mock_user_row())
    repo.get_by_email.side_effect = lambda email: alice if email == TEST_USER_EMAIL else None
    return repo


@pytest.fixture
def items() -> MagicMock:
    repo = MagicMock(spec=ContentRepository)
    repo.kind = ContentKind.STORY
    repo.insert.return_value = ITEM_ID
    repo.get_by_id.return_value = make_item()
    repo.update.return_value = True
    return repo


@pytest.fixture
def service(items, users) -> ContentService:
    return ContentService(items=items, users=users)


class TestListRecent:
    @pytest.mark.asyncio
    async def test_uses_configured_limit(self, service, items):
        items.list_recent.return_value = [make_item()]

        result = await service.list_recent()

        assert len(result) == 1
        items.list_recent.assert_called_once_with(10)

    @pytest.mark.asyncio
    async def test_empty(self, service, items):
        items.list_recent.return_value = []
        assert await service.list_recent() == []


class TestGet:
    @pytest.mark.asyncio
    async def test_found(self, service):
        item = await service.get(ITEM_ID)
        assert item.owner_name == "Alice Smith"

    @pytest.mark.asyncio
    async def test_missing(self, service, items):
        items.get_by_id.return_value = None

        with pytest.raises(ContentNotFoundError) as exc_info:
            await service.get("missing")
        assert exc_info.value.status_code == 404


class TestCreate:
    @pytest.mark.asyncio
    async def test_resolves_owner_and_returns_populated_item(self, service, items):
        item = await service.create({"title": "A", "content": "B", "user": TEST_USER_EMAIL})

        assert item.owner_name == "Alice Smith"
        data = items.insert.call_args.args[0]
        assert data["user_id"] == TEST_USER_ID
        assert data["title"] == "A"
        assert data["content"] == "B"
        assert datetime.fromisoformat(data["posted"]).tzinfo is not None
        assert "updated" not in data
        items.get_by_id.assert_called_once_with(ITEM_ID)

    @pytest.mark.asyncio
    async def test_unknown_owner_writes_nothing(self, service, items):
        with pytest.raises(OwnerNotFoundError) as exc_info:
            await service.create({"title": "A", "content": "B", "user": "ghost@x.com"})

        assert exc_info.value.message == "User not found"
        assert exc_info.value.status_code == 400
        items.insert.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "content", "user"])
    async def test_missing_field(self, service, items, missing):
        payload = {"title": "A", "content": "B", "user": TEST_USER_EMAIL}
        del payload[missing]

        with pytest.raises(MissingFieldError) as exc_info:
            await service.create(payload)

        assert exc_info.value.field == missing
        items.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_null_title_is_present(self, service, items):
        """A key set to null passes the presence check."""
        await service.create({"title": None, "content": "B", "user": TEST_USER_EMAIL})
        assert items.insert.call_args.args[0]["title"] is None

    @pytest.mark.asyncio
    async def test_owner_removed_before_insert(self, service, items):
        """Foreign key rejection is reported as a missing owner."""
        items.insert.side_effect = ReferenceNotFound("insert stories", column="user_id")

        with pytest.raises(OwnerNotFoundError):
            await service.create({"title": "A", "content": "B", "user": TEST_USER_EMAIL})


class TestUpdate:
    @pytest.mark.asyncio
    async def test_changes_only_allowed_fields(self, service, items):
        items.get_by_id.return_value = make_item(title="T", updated=datetime.now(timezone.utc))

        item = await service.update(ITEM_ID, {
            "id": ITEM_ID,
            "title": "T",
            "user": "mallory@x.com",
            "posted": "2000-01-01T00:00:00Z",
        })

        assert item.title == "T"
        item_id, fields = items.update.call_args.args
        assert item_id == ITEM_ID
        assert set(fields) == {"title", "updated"}
        assert datetime.fromisoformat(fields["updated"]).tzinfo is not None

    @pytest.mark.asyncio
    async def test_body_without_changes_still_stamps_updated(self, service, items):
        await service.update(ITEM_ID, {"id": ITEM_ID})

        _, fields = items.update.call_args.args
        assert set(fields) == {"updated"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body_id", ["other", None, 42])
    async def test_id_mismatch_writes_nothing(self, service, items, body_id):
        payload = {"title": "T"}
        if body_id is not None:
            payload["id"] = body_id

        with pytest.raises(IdMismatchError) as exc_info:
            await service.update(ITEM_ID, payload)

        assert exc_info.value.status_code == 400
        assert ITEM_ID in exc_info.value.message
        items.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_item(self, service, items):
        items.update.return_value = False

        with pytest.raises(ContentNotFoundError):
            await service.update("missing", {"id": "missing", "title": "T"})

        items.get_by_id.assert_not_called()


class TestRemove:
    @pytest.mark.asyncio
    async def test_remove(self, service, items):
        await service.remove(ITEM_ID)
        items.delete.assert_called_once_with(ITEM_ID)

    @pytest.mark.asyncio
    async def test_remove_twice(self, service, items):
        """Deleting an already-deleted item is not an error."""
        await service.remove(ITEM_ID)
        await service.remove(ITEM_ID)
        assert items.delete.call_count == 2


class TestWritings:
    @pytest.mark.asyncio
    async def test_missing_writing_names_kind(self, users):
        items = MagicMock(spec=ContentRepository)
        items.kind = ContentKind.WRITING
        items.get_by_id.return_value = None
        service = ContentService(items=items, users=users)

        with pytest.raises(ContentNotFoundError) as exc_info:
            await service.get("missing")
        assert exc_info.value.details["kind"] == "writing"


class InMemoryContentRepository:
    """Dict-backed stand-in for ContentRepository, populating owners from ``users``."""

    def __init__(self, kind: ContentKind, users: dict[str, User]):
        self.kind = kind
        self._users = users
        self._rows: dict[str, dict[str, Any]] = {}

    def list_recent(self, limit: int) -> list[ContentItem]:
        rows = sorted(self._rows.values(), key=lambda r: r["posted"], reverse=True)
        return [self._map(row) for row in rows[:limit]]

    def get_by_id(self, item_id: str) -> Optional[ContentItem]:
        row = self._rows.get(item_id)
        return self._map(row) if row else None

    def exists(self, item_id: str) -> bool:
        return item_id in self._rows

    def insert(self, data: dict[str, Any]) -> str:
        if data["user_id"] not in self._users:
            raise ReferenceNotFound(f"insert {self.kind.value}", column="user_id")
        item_id = str(uuid.uuid4())
        self._rows[item_id] = {"id": item_id, "updated": None, **data}
        return item_id

    def update(self, item_id: str, fields: dict[str, Any]) -> bool:
        if item_id not in self._rows:
            return False
        self._rows[item_id].update(fields)
        return True

    def delete(self, item_id: str) -> None:
        self._rows.pop(item_id, None)

    def _map(self, row: dict[str, Any]) -> ContentItem:
        owner = self._users[row["user_id"]]
        return ContentItem(
            id=row["id"],
            kind=self.kind,
            title=row.get("title") or "",
            content=row.get("content") or "",
            owner_id=owner.id,
            owner_name=owner.display_name,
            posted=row["posted"],
            updated=row.get("updated"),
        )


@pytest.fixture
def stored(users) -> ContentService:
    """Service over an in-memory store holding Alice."""
    alice = User(**create_mock_user_row())
    repo = InMemoryContentRepository(ContentKind.STORY, {alice.id: alice})
    return ContentService(items=repo, users=users)


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_removed_item_is_gone(self, stored):
        created = await stored.create({"title": "A", "content": "B", "user": TEST_USER_EMAIL})
        assert (await stored.get(created.id)).owner_name == "Alice Smith"

        await stored.remove(created.id)

        with pytest.raises(ContentNotFoundError):
            await stored.get(created.id)
        assert await stored.list_recent() == []

    @pytest.mark.asyncio
    async def test_remove_then_update_is_not_found(self, stored):
        created = await stored.create({"title": "A", "content": "B", "user": TEST_USER_EMAIL})
        await stored.remove(created.id)

        with pytest.raises(ContentNotFoundError):
            await stored.update(created.id, {"id": created.id, "title": "T"})

    @pytest.mark.asyncio
    async def test_updated_never_moves_backwards(self, stored):
        created = await stored.create({"title": "A", "content": "B", "user": TEST_USER_EMAIL})
        assert created.updated is None

        first = await stored.update(created.id, {"id": created.id, "title": "T1"})
        second = await stored.update(created.id, {"id": created.id, "content": "C2"})

        assert first.updated is not None
        assert second.updated >= first.updated
        assert second.updated >= second.posted
        assert second.posted == created.posted
        assert (second.title, second.content) == ("T1", "C2")


class TestEventLoop:
    @pytest.mark.asyncio
    async def test_storage_calls_leave_the_loop_thread(self, service, items):
        loop_thread = threading.get_ident()
        seen: list[int] = []
        items.get_by_id.side_effect = lambda item_id: seen.append(threading.get_ident()) or make_item()

        await service.create({"title": "A", "content": "B", "user": TEST_USER_EMAIL})

        assert seen
        assert loop_thread not in seen
