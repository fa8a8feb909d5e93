"""SQLAlchemy implementation for authbridge persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserModel, KeyModel, SessionModel: default mapped classes
- SQLAlchemyAdapter: Adapter implementation on an AsyncSession
- AdapterModels: bundle for swapping in application models

Examples
--------
async with session_maker() as session:
    adapter = sqlalchemy_adapter(session)(AuthAdapterError)
    await adapter.set_user(
        UserData(id="user-1"),
        KeyData(id="email:alice@example.com", user_id="user-1"),
    )
"""

from authbridge.persistence.sqlalchemy.adapter import (
    DEFAULT_MODELS,
    AdapterModels,
    SQLAlchemyAdapter,
    sqlalchemy_adapter,
)
from authbridge.persistence.sqlalchemy.base import AuthBase
from authbridge.persistence.sqlalchemy.init_db import (
    build_engine,
    create_tables,
    drop_tables,
)
from authbridge.persistence.sqlalchemy.models import (
    KeyModel,
    SessionModel,
    UserModel,
)

__all__ = [
    "DEFAULT_MODELS",
    "AdapterModels",
    "AuthBase",
    "KeyModel",
    "SQLAlchemyAdapter",
    "SessionModel",
    "UserModel",
    "build_engine",
    "create_tables",
    "drop_tables",
    "sqlalchemy_adapter",
]
