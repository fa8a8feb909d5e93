"""SQLAlchemy model for credential keys."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from authbridge.persistence.sqlalchemy.base import AuthBase


class KeyModel(AuthBase):
    """
    SQLAlchemy model for credential keys.

    The id is supplied by the caller and identifies the login method,
    e.g. ``"email:alice@example.com"``. Uniqueness of that id across all
    users is enforced by the primary key.

    Table: user_keys
    """

    __tablename__ = "user_keys"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)

    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Only set for password-based keys
    hashed_password: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<KeyModel(id={self.id}, user_id={self.user_id})>"
