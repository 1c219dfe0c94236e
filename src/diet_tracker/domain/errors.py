"""Domain errors surfaced by services and mapped to HTTP responses."""

from uuid import UUID


class DietTrackerError(Exception):
    """Base class for expected application errors."""


class Unauthenticated(DietTrackerError):
    """Raised when a session token is missing or not bound to a user."""


class MealNotFound(DietTrackerError):
    """Raised when a meal id does not resolve to a meal the caller may change."""

    def __init__(self, meal_id: UUID) -> None:
        super().__init__(f"Meal {meal_id} not found")
        self.meal_id = meal_id


class UserAlreadyExists(DietTrackerError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__(f"User with email {email} already exists")
        self.email = email
