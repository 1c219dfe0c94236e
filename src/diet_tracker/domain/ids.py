"""Identifier and session token generation.

Both use UUIDv7: a 48-bit millisecond timestamp followed by random bits, so
values are globally unique and sort by creation time.
"""

from uuid import UUID

from uuid6 import uuid7


def new_id() -> UUID:
    """Return a new time-ordered record id."""
    return uuid7()


def new_session_token() -> str:
    """Return a fresh opaque session token."""
    return str(uuid7())
