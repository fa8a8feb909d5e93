"""SQLAlchemy model for login sessions."""

from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from authbridge.persistence.sqlalchemy.base import AuthBase


class SessionModel(AuthBase):
    """SQLAlchemy model for login sessions.

    Expiry columns hold epoch milliseconds, hence BigInteger.
    """

    __tablename__ = "user_sessions"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    active_expires: Mapped[int] = mapped_column(BigInteger, nullable=False)
    idle_expires: Mapped[int] = mapped_column(BigInteger, nullable=False)

    def __repr__(self) -> str:
        return f"<SessionModel(id={self.id}, user_id={self.user_id})>"
