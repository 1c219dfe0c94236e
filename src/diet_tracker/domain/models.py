"""Domain models for the diet tracker."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a registered user stored in the database."""

    id: UUID
    session_id: str
    name: str
    email: str
