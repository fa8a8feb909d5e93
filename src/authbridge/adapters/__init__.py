"""Adapter interfaces for authbridge.

This package defines the abstract storage contract that different
persistence technologies implement.

The SQLAlchemy implementation lives in authbridge.persistence.sqlalchemy.
"""

from authbridge.adapters.adapter import Adapter

__all__ = ["Adapter"]
