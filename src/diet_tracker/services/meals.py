"""Meal tracking service."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.errors import MealNotFound
from diet_tracker.domain.ids import new_id
from diet_tracker.domain.meals import MealDraft, MealMetrics, MealRecord
from diet_tracker.domain.models import UserRecord
from diet_tracker.services.stats import summarize_meals

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def create_meal(self, meal: MealRecord) -> None:
        """Insert a meal row."""

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id regardless of owner."""

    def update_meal(self, meal_id: UUID, draft: MealDraft) -> bool:
        """Replace the mutable fields of a meal. Return False if it is absent."""

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a meal permanently. Return False if it is absent."""

    def list_meals(self, user_id: UUID) -> list[MealRecord]:
        """Return a user's meals ordered by date ascending."""


@dataclass
class MealService:
    """Owner-scoped meal operations for an authenticated user."""

    repository: MealRepository
    scope_reads_to_owner: bool = False

    def create_meal(self, owner: UserRecord, draft: MealDraft) -> UUID:
        """Persist a new meal owned by the user and return its id."""
        meal = MealRecord(
            id=new_id(),
            user_id=owner.id,
            name=draft.name,
            description=draft.description,
            date=draft.date,
            is_on_diet=draft.is_on_diet,
        )
        self.repository.create_meal(meal)
        logger.info(
            "Created meal",
            extra={"meal_id": str(meal.id), "user_id": str(owner.id)},
        )
        return meal.id

    def get_meal(self, owner: UserRecord, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id.

        Lookups are not scoped to the owner unless ``scope_reads_to_owner`` is
        set, so any authenticated user can read any meal id.
        """
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            return None
        if self.scope_reads_to_owner and meal.user_id != owner.id:
            return None
        return meal

    def update_meal(self, owner: UserRecord, meal_id: UUID, draft: MealDraft) -> None:
        """Replace name, description, date and diet flag of the user's meal."""
        self._require_owned(owner, meal_id)
        if not self.repository.update_meal(meal_id, draft):
            raise MealNotFound(meal_id)
        logger.info(
            "Updated meal",
            extra={"meal_id": str(meal_id), "user_id": str(owner.id)},
        )

    def delete_meal(self, owner: UserRecord, meal_id: UUID) -> None:
        """Delete the user's meal."""
        self._require_owned(owner, meal_id)
        if not self.repository.delete_meal(meal_id):
            raise MealNotFound(meal_id)
        logger.info(
            "Deleted meal",
            extra={"meal_id": str(meal_id), "user_id": str(owner.id)},
        )

    def list_meals(self, owner: UserRecord) -> list[MealRecord]:
        """Return the user's meals in date order."""
        return self.repository.list_meals(owner.id)

    def get_metrics(self, owner: UserRecord) -> MealMetrics:
        """Return totals and the longest on-diet streak for the user."""
        return summarize_meals(self.repository.list_meals(owner.id))

    def _require_owned(self, owner: UserRecord, meal_id: UUID) -> MealRecord:
        meal = self.repository.get_meal(meal_id)
        if meal is None or meal.user_id != owner.id:
            raise MealNotFound(meal_id)
        return meal
