"""Tests for user storage through SQLAlchemyAdapter on SQLite."""

import pytest
from sqlalchemy.exc import IntegrityError

from authbridge import AuthAdapterError, ErrorKind, KeyData, UserData
from authbridge.persistence.sqlalchemy import SQLAlchemyAdapter
from tests.shared.fixtures.factories import TEST_USER_ID, TestRecordFactory


class TestSetUser:
    """Creating users with and without an initial key."""

    @pytest.mark.asyncio
    async def test_set_user_without_key(self, adapter):
        created = await adapter.set_user(UserData(id="user-carol"))

        assert created == UserData(id="user-carol")
        assert await adapter.get_user("user-carol") == UserData(id="user-carol")

    @pytest.mark.asyncio
    async def test_set_user_with_key(self, adapter):
        key = KeyData(id="email:carol@example.com", user_id="user-carol", hashed_password="h")

        await adapter.set_user(UserData(id="user-carol"), key)

        found = await adapter.get_key(key.id)
        assert found.user_id == "user-carol"
        assert found.hashed_password == "h"

    @pytest.mark.asyncio
    async def test_key_attached_to_created_user(self, adapter):
        key = KeyData(id="email:carol@example.com", user_id="ignored")

        await adapter.set_user(UserData(id="user-carol"), key)

        found = await adapter.get_key(key.id)
        assert found.user_id == "user-carol"
        assert found.hashed_password is None

    @pytest.mark.asyncio
    async def test_duplicate_key_leaves_no_user(self, adapter):
        await adapter.set_key(TestRecordFactory.email_key("carol@example.com"))

        with pytest.raises(AuthAdapterError) as exc_info:
            await adapter.set_user(
                UserData(id="user-carol"),
                KeyData(id="email:carol@example.com", user_id="user-carol"),
            )

        assert exc_info.value.kind == ErrorKind.DUPLICATE_KEY_ID.value
        assert await adapter.get_user("user-carol") is None
        assert (await adapter.get_key("email:carol@example.com")).user_id == TEST_USER_ID

    @pytest.mark.asyncio
    async def test_duplicate_user_id_without_key_propagates(self, adapter):
        with pytest.raises(IntegrityError):
            await adapter.set_user(UserData(id=TEST_USER_ID))

        # Session is still usable afterwards
        assert await adapter.get_user(TEST_USER_ID) == UserData(id=TEST_USER_ID)

    @pytest.mark.asyncio
    async def test_missing_id_uses_injected_generator(self, db_session):
        adapter = SQLAlchemyAdapter(db_session, id_generator=lambda: "user-generated")

        created = await adapter.set_user(
            UserData(id=None),
            KeyData(id="email:gen@example.com", user_id=""),
        )

        assert created.id == "user-generated"
        assert await adapter.get_user("user-generated") is not None
        assert (await adapter.get_key("email:gen@example.com")).user_id == "user-generated"

    @pytest.mark.asyncio
    async def test_id_in_attributes_raises(self, adapter):
        user = UserData(id="user-carol", attributes={"id": "user-other"})

        with pytest.raises(ValueError, match="'id'"):
            await adapter.set_user(user, TestRecordFactory.email_key("carol@example.com"))

        assert await adapter.get_user("user-carol") is None
        assert await adapter.get_user("user-other") is None
        assert await adapter.get_key("email:carol@example.com") is None


class TestGetUser:
    """Reading users."""

    @pytest.mark.asyncio
    async def test_get_user(self, adapter):
        user = await adapter.get_user(TEST_USER_ID)

        assert user == UserData(id=TEST_USER_ID)
        assert user.to_dict() == {"id": TEST_USER_ID}

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, adapter):
        assert await adapter.get_user("user-missing") is None


class TestUpdateUser:
    """Partial user updates."""

    @pytest.mark.asyncio
    async def test_update_missing_user_is_noop(self, adapter):
        await adapter.update_user("user-missing", {})

        assert await adapter.get_user("user-missing") is None

    @pytest.mark.asyncio
    async def test_update_unknown_attribute_raises(self, adapter):
        with pytest.raises(ValueError, match="username"):
            await adapter.update_user(TEST_USER_ID, {"username": "alice"})


class TestDeleteUser:
    """Deleting users."""

    @pytest.mark.asyncio
    async def test_delete_user_cascades_to_keys_and_sessions(self, adapter):
        await adapter.set_key(TestRecordFactory.email_key())
        await adapter.set_session(TestRecordFactory.session())

        await adapter.delete_user(TEST_USER_ID)

        assert await adapter.get_user(TEST_USER_ID) is None
        assert await adapter.get_keys_by_user_id(TEST_USER_ID) == []
        assert await adapter.get_sessions_by_user_id(TEST_USER_ID) == []

    @pytest.mark.asyncio
    async def test_delete_nonexistent_user_is_safe(self, adapter):
        # Should not raise
        await adapter.delete_user("user-missing")
