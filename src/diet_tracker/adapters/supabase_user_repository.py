"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client, PostgrestAPIError

from diet_tracker.domain.errors import UserAlreadyExists
from diet_tracker.domain.models import UserRecord
from diet_tracker.services.users import UserRepository

_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""
        return self._get_one("email", email)

    def get_by_session_id(self, session_id: str) -> UserRecord | None:
        """Return the user bound to a session token, if present."""
        return self._get_one("session_id", session_id)

    def create_user(
        self, user_id: UUID, session_id: str, name: str, email: str
    ) -> UserRecord:
        """Create a new user row and return it."""
        try:
            response = (
                self.client.table("users")
                .insert(
                    {
                        "id": str(user_id),
                        "session_id": session_id,
                        "name": name,
                        "email": email,
                    }
                )
                .execute()
            )
        except PostgrestAPIError as exc:
            if _violates_unique_email(exc):
                raise UserAlreadyExists(email) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_row(response.data[0])

    def _get_one(self, column: str, value: str) -> UserRecord | None:
        response = (
            self.client.table("users")
            .select("id, session_id, name, email")
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        return None


def _parse_row(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        session_id=str(row["session_id"]),
        name=str(row.get("name", "")),
        email=str(row.get("email", "")),
    )


def _violates_unique_email(exc: PostgrestAPIError) -> bool:
    # details reads "Key (email)=(a@b.c) already exists."
    if exc.code != _UNIQUE_VIOLATION:
        return False
    return "(email)" in (exc.details or "") or "users_email_key" in (
        exc.message or ""
    )
