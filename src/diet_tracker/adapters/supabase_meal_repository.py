"""Supabase repository for meals."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_tracker.domain.meals import MealDraft, MealRecord
from diet_tracker.services.meals import MealRepository

_MEAL_COLUMNS = "id, user_id, name, description, date, is_on_diet"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def create_meal(self, meal: MealRecord) -> None:
        """Insert a meal row."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "id": str(meal.id),
                    "user_id": str(meal.user_id),
                    "name": meal.name,
                    "description": meal.description,
                    "date": meal.date,
                    "is_on_diet": meal.is_on_diet,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        """Return a meal row by id."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def update_meal(self, meal_id: UUID, draft: MealDraft) -> bool:
        """Replace the mutable columns of a meal row."""
        response = (
            self.client.table("meals")
            .update(
                {
                    "name": draft.name,
                    "description": draft.description,
                    "date": draft.date,
                    "is_on_diet": draft.is_on_diet,
                }
            )
            .eq("id", str(meal_id))
            .execute()
        )
        return bool(response.data)

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a meal row."""
        response = self.client.table("meals").delete().eq("id", str(meal_id)).execute()
        return bool(response.data)

    def list_meals(self, user_id: UUID) -> list[MealRecord]:
        """Return a user's meals ordered by date ascending."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> MealRecord:
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        description=str(row.get("description", "")),
        date=str(row.get("date", "")),
        is_on_diet=bool(row.get("is_on_diet", False)),
    )
