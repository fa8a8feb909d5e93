"""Persistence implementations for authbridge.

This package contains database-specific implementations of the
Adapter interface defined in authbridge.adapters.

Structure:
    persistence/
    └── sqlalchemy/     # SQLAlchemy/SQL database implementation
"""
