"""Adapter exceptions.

The authentication library supplies its own error factory when it builds
the adapter. ``AuthAdapterError`` is the factory used when it does not.
"""

from enum import Enum
from typing import Callable


class ErrorKind(str, Enum):
    """Error kinds the authentication library recognises."""

    DUPLICATE_KEY_ID = "AUTH_DUPLICATE_KEY_ID"
    INVALID_USER_ID = "AUTH_INVALID_USER_ID"


_MESSAGES = {
    ErrorKind.DUPLICATE_KEY_ID.value: "A key with this id already exists",
    ErrorKind.INVALID_USER_ID.value: "No user exists with this id",
}

ErrorFactory = Callable[[str], Exception]


class AuthError(Exception):
    """Base exception for all authbridge errors."""

    def __init__(self, message: str = "Authentication storage error"):
        self.message = message
        super().__init__(self.message)


class AuthAdapterError(AuthError):
    """Raised when the database rejects a write with a known error kind."""

    def __init__(self, kind: str):
        self.kind = kind.value if isinstance(kind, ErrorKind) else kind
        super().__init__(f"{self.kind}: {_MESSAGES.get(self.kind, 'Unknown error')}")
