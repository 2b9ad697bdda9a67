"""Identifier of the current session, fixed for the life of the process."""

from __future__ import annotations

import uuid
from functools import lru_cache


@lru_cache(maxsize=None)
def session_id() -> uuid.UUID:
    """Return the session's random UUID, created on first use."""
    return uuid.uuid4()


def session_string() -> str:
    """Return the session UUID in its canonical string form."""
    return str(session_id())