"""authbridge - Relational storage for an authentication library.

This package lets an authentication library keep its users, credential
keys and sessions in any database SQLAlchemy can talk to. It handles:
- The storage contract (get/set/update/delete per entity)
- Reshaping mapped rows into flat records
- Translating constraint violations into the library's error kinds

Architecture:
    authbridge/
    ├── adapters/           # Abstract storage contract
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Flat records
    ├── ids.py              # Default id generator
    └── exceptions.py       # Error kinds and exceptions

Usage:
    from authbridge import KeyData, UserData
    from authbridge.persistence.sqlalchemy import sqlalchemy_adapter

    adapter = sqlalchemy_adapter(session)(LibraryError)
"""

from authbridge.adapters import Adapter
from authbridge.exceptions import (
    AuthAdapterError,
    AuthError,
    ErrorFactory,
    ErrorKind,
)
from authbridge.ids import generate_id
from authbridge.schemas import KeyData, SessionData, UserData

__all__ = [
    # Contract
    "Adapter",
    # Schemas
    "KeyData",
    "SessionData",
    "UserData",
    # Ids
    "generate_id",
    # Exceptions
    "AuthAdapterError",
    "AuthError",
    "ErrorFactory",
    "ErrorKind",
]
