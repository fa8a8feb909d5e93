"""SQLAlchemy implementation of the Adapter contract.

Translates every storage call from the authentication library into
statements on an ``AsyncSession`` and reshapes the mapped rows into flat
records. Integrity errors raised while committing a key, a session or a
user with its first key are turned into the library's own error kinds.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import IntegrityError, NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from authbridge.adapters import Adapter
from authbridge.exceptions import AuthAdapterError, ErrorFactory, ErrorKind
from authbridge.ids import IdGenerator, generate_id
from authbridge.persistence.sqlalchemy.models import KeyModel, SessionModel, UserModel
from authbridge.schemas import KeyData, SessionData, UserData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdapterModels:
    """Mapped classes the adapter reads and writes.

    Custom classes must expose ``id`` on all three, ``user_id`` on key and
    session, ``hashed_password`` on key and ``active_expires`` /
    ``idle_expires`` on session. Any further user columns are passed
    through as user attributes.
    """

    user: type[Any] = UserModel
    key: type[Any] = KeyModel
    session: type[Any] = SessionModel


DEFAULT_MODELS = AdapterModels()


def _column_keys(model_cls: type[Any]) -> frozenset[str]:
    return frozenset(attr.key for attr in inspect(model_cls).column_attrs)


class SQLAlchemyAdapter(Adapter):
    """
    SQLAlchemy implementation of the Adapter interface.

    Every write ends with exactly one commit on the given session, or a
    rollback if the database rejects it.
    """

    def __init__(
        self,
        session: AsyncSession,
        error_factory: ErrorFactory = AuthAdapterError,
        *,
        models: AdapterModels = DEFAULT_MODELS,
        id_generator: IdGenerator = generate_id,
    ) -> None:
        """Initialize adapter with database session.

        Parameters
        ----------
        session
            SQLAlchemy async session, not shared with other tasks
        error_factory
            Builds the exception raised for a rejected write from its kind
        models
            Mapped classes for users, keys and sessions
        id_generator
            Supplies ids for users created without one
        """
        self._session = session
        self._error_factory = error_factory
        self._models = models
        self._id_generator = id_generator

    async def get_session_and_user(
        self,
        session_id: str,
    ) -> tuple[SessionData | None, UserData | None]:
        session_cls, user_cls = self._models.session, self._models.user
        stmt = (
            select(session_cls, user_cls)
            .select_from(session_cls)
            .join(user_cls, session_cls.user_id == user_cls.id)
            .where(session_cls.id == session_id)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None, None

        session_model, user_model = row
        return self._to_session_data(session_model), self._to_user_data(user_model)

    # User

    async def get_user(self, user_id: str) -> UserData | None:
        model = await self._find_model_by_id(self._models.user, user_id)
        return self._to_user_data(model) if model else None

    async def set_user(self, user: UserData, key: KeyData | None = None) -> UserData:
        if "id" in user.attributes:
            msg = "User attributes must not contain 'id'; pass it as UserData.id"
            raise ValueError(msg)

        user_id = user.id if user.id is not None else self._id_generator()
        user_model = self._models.user(id=user_id, **user.attributes)

        if key is None:
            await self._write(user_model)
            logger.info("Created user: %s", user_id)
        else:
            key_model = self._models.key(
                id=key.id,
                user_id=user_id,
                hashed_password=key.hashed_password,
            )
            await self._write(
                user_model,
                key_model,
                conflict_kind=ErrorKind.DUPLICATE_KEY_ID,
            )
            logger.info("Created user: %s (key: %s)", user_id, key.id)

        return UserData(id=user_id, attributes=dict(user.attributes))

    async def update_user(self, user_id: str, partial_user: Mapping[str, Any]) -> None:
        await self._update(self._models.user, user_id, partial_user)

    async def delete_user(self, user_id: str) -> None:
        await self._delete_by_id(self._models.user, user_id)
        logger.info("Deleted user: %s", user_id)

    # Key

    async def get_key(self, key_id: str) -> KeyData | None:
        model = await self._find_model_by_id(self._models.key, key_id)
        return self._to_key_data(model) if model else None

    async def get_keys_by_user_id(self, user_id: str) -> list[KeyData]:
        models = await self._find_models_by_user_id(self._models.key, user_id)
        return [self._to_key_data(model) for model in models]

    async def set_key(self, key: KeyData) -> None:
        model = self._models.key(
            id=key.id,
            user_id=key.user_id,
            hashed_password=key.hashed_password,
        )
        await self._write(model, conflict_kind=ErrorKind.DUPLICATE_KEY_ID)
        logger.info("Created key %s for user: %s", key.id, key.user_id)

    async def update_key(self, key_id: str, partial_key: Mapping[str, Any]) -> None:
        await self._update(self._models.key, key_id, partial_key)

    async def delete_key(self, key_id: str) -> None:
        await self._delete_by_id(self._models.key, key_id)

    async def delete_keys_by_user_id(self, user_id: str) -> None:
        count = await self._delete_by_user_id(self._models.key, user_id)
        logger.info("Deleted %d keys for user: %s", count, user_id)

    # Session

    async def get_session(self, session_id: str) -> SessionData | None:
        model = await self._find_model_by_id(self._models.session, session_id)
        return self._to_session_data(model) if model else None

    async def get_sessions_by_user_id(self, user_id: str) -> list[SessionData]:
        models = await self._find_models_by_user_id(self._models.session, user_id)
        return [self._to_session_data(model) for model in models]

    async def set_session(self, session: SessionData) -> None:
        model = self._models.session(
            id=session.id,
            user_id=session.user_id,
            active_expires=session.active_expires,
            idle_expires=session.idle_expires,
        )
        await self._write(model, conflict_kind=ErrorKind.INVALID_USER_ID)
        logger.info("Created session %s for user: %s", session.id, session.user_id)

    async def update_session(
        self,
        session_id: str,
        partial_session: Mapping[str, Any],
    ) -> None:
        await self._update(self._models.session, session_id, partial_session)

    async def delete_session(self, session_id: str) -> None:
        await self._delete_by_id(self._models.session, session_id)

    async def delete_sessions_by_user_id(self, user_id: str) -> None:
        count = await self._delete_by_user_id(self._models.session, user_id)
        logger.info("Deleted %d sessions for user: %s", count, user_id)

    # Internal helpers

    async def _find_model_by_id(self, model_cls: type[Any], entity_id: str) -> Any | None:
        stmt = select(model_cls).where(model_cls.id == entity_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _find_models_by_user_id(self, model_cls: type[Any], user_id: str) -> list[Any]:
        stmt = select(model_cls).where(model_cls.user_id == user_id)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def _write(self, *pending: Any, conflict_kind: ErrorKind | None = None) -> None:
        """Add ``pending`` in order and commit once.

        Each model is flushed before the next is added so owners are
        inserted before the rows referencing them.
        """
        try:
            for model in pending:
                self._session.add(model)
                await self._session.flush()
            await self._session.commit()
        except IntegrityError as exc:
            # Keep session usable after a failed flush
            await self._session.rollback()
            if conflict_kind is None:
                raise
            logger.warning(
                "Write rejected by database constraint, raising %s: %s",
                conflict_kind.value,
                getattr(exc, "orig", exc),
            )
            raise self._error_factory(conflict_kind.value) from exc

    async def _update(
        self,
        model_cls: type[Any],
        entity_id: str,
        fields: Mapping[str, Any],
    ) -> None:
        unknown = set(fields) - _column_keys(model_cls)
        if unknown:
            msg = f"Unknown fields for {model_cls.__name__}: {', '.join(sorted(unknown))}"
            raise ValueError(msg)

        model = await self._find_model_by_id(model_cls, entity_id)
        if model is None:
            return

        for name, value in fields.items():
            setattr(model, name, value)

        await self._write()
        logger.debug("Updated %s: %s", model_cls.__name__, entity_id)

    async def _execute_delete(self, stmt: Any) -> Any:
        try:
            return await self._session.execute(stmt)
        except IntegrityError:
            # Keep session usable after a rejected statement
            await self._session.rollback()
            raise

    async def _delete_by_id(self, model_cls: type[Any], entity_id: str) -> None:
        stmt = delete(model_cls).where(model_cls.id == entity_id)
        await self._execute_delete(stmt)
        await self._write()

    async def _delete_by_user_id(self, model_cls: type[Any], user_id: str) -> int:
        stmt = delete(model_cls).where(model_cls.user_id == user_id)
        result = await self._execute_delete(stmt)
        count = result.rowcount  # type: ignore

        if not count:
            await self._session.rollback()
            msg = f"No {model_cls.__name__} rows found for user {user_id}"
            raise NoResultFound(msg)

        await self._write()
        return count

    def _to_user_data(self, model: Any) -> UserData:
        values = {
            attr.key: getattr(model, attr.key) for attr in inspect(model).mapper.column_attrs
        }
        user_id = values.pop("id")
        return UserData(id=user_id, attributes=values)

    def _to_key_data(self, model: Any) -> KeyData:
        return KeyData(
            id=model.id,
            user_id=model.user_id,
            hashed_password=model.hashed_password,
        )

    def _to_session_data(self, model: Any) -> SessionData:
        return SessionData(
            id=model.id,
            user_id=model.user_id,
            active_expires=model.active_expires,
            idle_expires=model.idle_expires,
        )


def sqlalchemy_adapter(
    session: AsyncSession,
    models: AdapterModels | None = None,
    id_generator: IdGenerator | None = None,
) -> Callable[[ErrorFactory], SQLAlchemyAdapter]:
    """Bind a session now and take the library's error factory later.

    Examples
    --------
    adapter = sqlalchemy_adapter(session)(LibraryError)
    """

    def build(error_factory: ErrorFactory) -> SQLAlchemyAdapter:
        return SQLAlchemyAdapter(
            session,
            error_factory,
            models=models or DEFAULT_MODELS,
            id_generator=id_generator or generate_id,
        )

    return build
