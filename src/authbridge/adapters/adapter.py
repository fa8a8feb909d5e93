"""Abstract storage contract consumed by the authentication library.

The authentication library only ever talks to this interface.
Implementations translate each call into operations on a concrete store.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from authbridge.schemas import KeyData, SessionData, UserData


class Adapter(ABC):
    """
    Storage backend for users, keys and sessions.

    Implementations must provide:
    - get/set/update/delete for users, keys and sessions
    - bulk lookup and deletion of keys and sessions by owning user
    - a combined session + owner lookup

    Reads return ``None`` (or an empty list) when nothing matches and
    updates of missing records are no-ops. Writes rejected by the store
    raise the error produced by the error factory the authentication
    library passed in.

    Example implementation:
        class InMemoryAdapter(Adapter):
            def __init__(self, error_factory):
                self._users = {}
                self._error_factory = error_factory

            async def get_user(self, user_id):
                return self._users.get(user_id)
            ...
    """

    @abstractmethod
    async def get_session_and_user(
        self,
        session_id: str,
    ) -> tuple[SessionData | None, UserData | None]:
        """
        Fetch a session together with the user who owns it.

        Parameters
        ----------
        session_id
            The session's identifier

        Returns
        -------
        ``(session, user)`` if the session exists, ``(None, None)`` otherwise
        """

    # User

    @abstractmethod
    async def get_user(self, user_id: str) -> UserData | None:
        """
        Find a user by ID.

        Parameters
        ----------
        user_id
            The user's unique identifier

        Returns
        -------
        User data if found, None otherwise
        """

    @abstractmethod
    async def set_user(self, user: UserData, key: KeyData | None = None) -> UserData:
        """
        Create a user, optionally with its first key.

        When a key is given, the user and the key are written together:
        if the key is rejected, the user is not created either.

        Parameters
        ----------
        user
            The user to create. A missing ``id`` is generated.
        key
            Optional initial key. It is attached to the created user
            regardless of its ``user_id``.

        Returns
        -------
        The created user data
        """

    @abstractmethod
    async def update_user(self, user_id: str, partial_user: Mapping[str, Any]) -> None:
        """
        Assign the given attributes to an existing user.

        Does nothing when the user does not exist.

        Parameters
        ----------
        user_id
            The user's unique identifier
        partial_user
            Attribute names and their new values
        """

    @abstractmethod
    async def delete_user(self, user_id: str) -> None:
        """
        Delete a user.

        Parameters
        ----------
        user_id
            The user's unique identifier
        """

    # Key

    @abstractmethod
    async def get_key(self, key_id: str) -> KeyData | None:
        """
        Find a key by ID.

        Parameters
        ----------
        key_id
            The key's identifier, e.g. ``"email:alice@example.com"``

        Returns
        -------
        Key data if found, None otherwise
        """

    @abstractmethod
    async def get_keys_by_user_id(self, user_id: str) -> list[KeyData]:
        """
        List all keys owned by a user.

        Parameters
        ----------
        user_id
            The owning user's identifier

        Returns
        -------
        The user's keys, in no particular order
        """

    @abstractmethod
    async def set_key(self, key: KeyData) -> None:
        """
        Create a key.

        Parameters
        ----------
        key
            The key to create

        Raises
        ------
        The error factory's ``AUTH_DUPLICATE_KEY_ID`` error when the key id
        is taken or the owning user does not exist.
        """

    @abstractmethod
    async def update_key(self, key_id: str, partial_key: Mapping[str, Any]) -> None:
        """
        Assign the given fields to an existing key.

        Does nothing when the key does not exist.
        """

    @abstractmethod
    async def delete_key(self, key_id: str) -> None:
        """Delete a key. Deleting a missing key is a no-op."""

    @abstractmethod
    async def delete_keys_by_user_id(self, user_id: str) -> None:
        """
        Delete every key owned by a user.

        Raises
        ------
        sqlalchemy.exc.NoResultFound
            When the user owns no keys
        """

    # Session

    @abstractmethod
    async def get_session(self, session_id: str) -> SessionData | None:
        """
        Find a session by ID.

        Parameters
        ----------
        session_id
            The session's identifier

        Returns
        -------
        Session data if found, None otherwise
        """

    @abstractmethod
    async def get_sessions_by_user_id(self, user_id: str) -> list[SessionData]:
        """List all sessions owned by a user, in no particular order."""

    @abstractmethod
    async def set_session(self, session: SessionData) -> None:
        """
        Create a session.

        Parameters
        ----------
        session
            The session to create

        Raises
        ------
        The error factory's ``AUTH_INVALID_USER_ID`` error when the owning
        user does not exist or the session id is taken.
        """

    @abstractmethod
    async def update_session(
        self,
        session_id: str,
        partial_session: Mapping[str, Any],
    ) -> None:
        """
        Assign the given fields to an existing session.

        Does nothing when the session does not exist.
        """

    @abstractmethod
    async def delete_session(self, session_id: str) -> None:
        """Delete a session. Deleting a missing session is a no-op."""

    @abstractmethod
    async def delete_sessions_by_user_id(self, user_id: str) -> None:
        """
        Delete every session owned by a user.

        Raises
        ------
        sqlalchemy.exc.NoResultFound
            When the user owns no sessions
        """
