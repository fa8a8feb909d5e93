"""SQLAlchemy model for users."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from authbridge.ids import generate_id
from authbridge.persistence.sqlalchemy.base import AuthBase


class UserModel(AuthBase):
    """Root identity record.

    Holds only the id. Applications needing extra user columns pass
    their own user model to the adapter.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
        default=generate_id,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id})>"
