# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for users, keys and sessions."""

from authbridge.persistence.sqlalchemy.models.key_model import KeyModel
from authbridge.persistence.sqlalchemy.models.session_model import SessionModel
from authbridge.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "KeyModel",
    "SessionModel",
    "UserModel",
]
