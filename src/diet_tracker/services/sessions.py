"""Session token resolution."""

import logging
from dataclasses import dataclass

from diet_tracker.domain.errors import Unauthenticated
from diet_tracker.domain.models import UserRecord
from diet_tracker.services.users import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Resolve session tokens to the users they were issued to."""

    repository: UserRepository

    def resolve(self, token: str | None) -> UserRecord:
        """Return the user bound to the token or raise Unauthenticated."""
        if not token:
            raise Unauthenticated("Missing session token")
        user = self.repository.get_by_session_id(token)
        if user is None:
            logger.info("Rejected unknown session token")
            raise Unauthenticated("Unknown session token")
        return user
