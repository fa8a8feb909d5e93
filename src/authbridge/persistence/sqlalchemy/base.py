"""SQLAlchemy declarative base for authbridge models.

Applications that keep their own declarative base can still use the
adapter with their own mapped classes (see ``AdapterModels``). When they
use the bundled models, AuthBase.metadata must be part of their
migration/``create_all`` setup.

Examples
--------
# In Alembic env.py:
from authbridge.persistence.sqlalchemy import AuthBase
target_metadata = [YourBase.metadata, AuthBase.metadata]
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for authbridge models."""
