"""Identifier generation."""

from typing import Callable
from uuid import uuid4

IdGenerator = Callable[[], str]


def generate_id() -> str:
    """Return a random uuid4 as a string."""
    return str(uuid4())
