"""
Bookmarker — User Service Unit Tests
====================================

What:  Tests for UserService (list, get by id, create).
How:   Uses mock DB sessions (no real database).

What we test:
    ✅ Documents are flattened: attributes + id + created_at
    ✅ Missing id returns None, not an error
    ✅ Create splits out `id`, generates one when absent, stringifies others
    ✅ Storage failures on every path become DatabaseError
"""

import pytest
from unittest.mock import MagicMock

from bookmarker.exceptions import DatabaseError
from bookmarker.models.user import User
from bookmarker.services.user_service import UserService

from conftest import storage_unavailable


def make_user(pk, user_id, attributes, created_at):
    return User(pk=pk, id=user_id, attributes=attributes, created_at=created_at)


class TestUserServiceList:
    """Tests for list_users."""

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_list_users_empty(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_users(mock_db_session)

        assert result == []

    @pytest.mark.asyncio
    async def test_list_users_flattens_documents(self, mock_db_session, sample_user_data):
        users = [
            make_user(1, "u1", {"name": "Ann"}, sample_user_data["created_at"]),
            make_user(2, "u2", {"name": "Bob", "tags": ["a", "b"]}, sample_user_data["created_at"]),
        ]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = users
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_users(mock_db_session)

        dumped = [doc.model_dump() for doc in result]
        assert [doc["id"] for doc in dumped] == ["u1", "u2"]
        assert dumped[0]["name"] == "Ann"
        assert dumped[1]["tags"] == ["a", "b"]
        assert dumped[1]["created_at"] == sample_user_data["created_at"]

    @pytest.mark.asyncio
    async def test_list_users_storage_failure_raises(self, mock_db_session):
        mock_db_session.execute.side_effect = storage_unavailable

        with pytest.raises(DatabaseError):
            await self.service.list_users(mock_db_session)


class TestUserServiceGet:
    """Tests for get_user."""

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_get_user_found(self, mock_db_session, sample_user_data):
        user = User(**sample_user_data)
        mock_result = MagicMock()
        mock_result.scalars.return_value.first.return_value = user
        mock_db_session.execute.return_value = mock_result

        result = await self.service.get_user(mock_db_session, "u1")

        assert result.id == "u1"
        assert result.model_dump()["email"] == "ann@example.com"

    @pytest.mark.asyncio
    async def test_get_user_missing_returns_none(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.first.return_value = None
        mock_db_session.execute.return_value = mock_result

        result = await self.service.get_user(mock_db_session, "nobody")

        assert result is None

    @pytest.mark.asyncio
    async def test_stored_attribute_cannot_override_created_at(self, mock_db_session, sample_user_data):
        user = make_user(1, "u1", {"name": "Ann", "created_at": "yesterday"}, sample_user_data["created_at"])
        mock_result = MagicMock()
        mock_result.scalars.return_value.first.return_value = user
        mock_db_session.execute.return_value = mock_result

        result = await self.service.get_user(mock_db_session, "u1")

        assert result.created_at == sample_user_data["created_at"]

    @pytest.mark.asyncio
    async def test_get_user_storage_failure_raises(self, mock_db_session):
        mock_db_session.execute.side_effect = storage_unavailable

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get_user(mock_db_session, "u1")

        assert exc_info.value.context["user_id"] == "u1"


class TestUserServiceCreate:
    """Tests for create_user."""

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_create_user_stores_body(self, mock_db_session):
        user_id = await self.service.create_user(
            mock_db_session, {"id": "u1", "name": "Ann", "age": 30}
        )

        assert user_id == "u1"
        stored = mock_db_session.add.call_args.args[0]
        assert isinstance(stored, User)
        assert stored.id == "u1"
        assert stored.attributes == {"name": "Ann", "age": 30}
        mock_db_session.flush.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_user_generates_missing_id(self, mock_db_session):
        user_id = await self.service.create_user(mock_db_session, {"name": "Ann"})

        assert len(user_id) == 32
        assert mock_db_session.add.call_args.args[0].id == user_id

    @pytest.mark.asyncio
    async def test_create_user_null_id_is_generated(self, mock_db_session):
        user_id = await self.service.create_user(mock_db_session, {"id": None})

        assert user_id
        assert mock_db_session.add.call_args.args[0].attributes == {}

    @pytest.mark.asyncio
    async def test_create_user_numeric_id_stored_as_string(self, mock_db_session):
        user_id = await self.service.create_user(mock_db_session, {"id": 42})

        assert user_id == "42"

    @pytest.mark.asyncio
    async def test_create_user_storage_failure_raises(self, mock_db_session):
        mock_db_session.flush.side_effect = storage_unavailable

        with pytest.raises(DatabaseError):
            await self.service.create_user(mock_db_session, {"id": "u1"})

    @pytest.mark.asyncio
    async def test_create_user_commit_failure_raises(self, mock_db_session):
        mock_db_session.commit.side_effect = storage_unavailable

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_user(mock_db_session, {"id": "u1"})

        assert exc_info.value.context["user_id"] == "u1"


class TestUserModel:

    def test_id_column_is_unbounded_text(self):
        from sqlalchemy import Text

        column_type = User.__table__.c.id.type

        assert isinstance(column_type, Text)
        assert column_type.length is None
