"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.errors import UserAlreadyExists
from diet_tracker.domain.ids import new_id, new_session_token
from diet_tracker.domain.models import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""

    def get_by_session_id(self, session_id: str) -> UserRecord | None:
        """Return the user bound to a session token, if present."""

    def create_user(
        self, user_id: UUID, session_id: str, name: str, email: str
    ) -> UserRecord:
        """Create and return a new user record.

        Raises UserAlreadyExists when the store rejects a duplicate email.
        """


@dataclass(frozen=True)
class Registration:
    """Result of registering a user."""

    user: UserRecord
    token_issued: bool


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def register(self, name: str, email: str, session_id: str | None) -> Registration:
        """Register a user, minting a session token if the caller has none.

        A presented token that already belongs to another user is replaced by a
        fresh one, so each token stays bound to exactly one user.
        """
        # Not atomic; the unique constraints on users are the real guard.
        if self.repository.get_by_email(email) is not None:
            raise UserAlreadyExists(email)

        token_issued = not session_id or (
            self.repository.get_by_session_id(session_id) is not None
        )
        token = new_session_token() if token_issued else session_id
        user = self.repository.create_user(
            user_id=new_id(), session_id=token, name=name, email=email
        )
        logger.info(
            "Registered user",
            extra={"user_id": str(user.id), "token_issued": token_issued},
        )
        return Registration(user=user, token_issued=token_issued)
