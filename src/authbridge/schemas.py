"""Flat records exchanged with the authentication library.

These are pure data transfer objects. Relation objects never appear in
them; ownership is always the flattened ``user_id``.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class UserData:
    """A user record.

    ``attributes`` carries the application-defined columns of the user
    model, passed through untouched. ``id`` may be left as ``None`` when
    creating a user; the adapter then generates one.
    """

    id: str | None
    attributes: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.attributes}


@dataclass(frozen=True)
class KeyData:
    """A credential key linking an external identifier to a user."""

    id: str
    user_id: str
    hashed_password: str | None = None


@dataclass(frozen=True)
class SessionData:
    """A login session.

    Both expiries are epoch milliseconds. Deciding whether a session is
    still valid is left to the authentication library.
    """

    id: str
    user_id: str
    active_expires: int
    idle_expires: int
