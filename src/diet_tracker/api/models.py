"""Pydantic models for request and response bodies."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from diet_tracker.domain.meals import MealDraft, MealMetrics, MealRecord


class CreateUserBody(BaseModel):
    """Registration payload."""

    name: str = Field(min_length=1)
    email: EmailStr


class MealBody(BaseModel):
    """Payload for creating a meal or replacing its fields."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    date: str = Field(min_length=1)
    is_on_diet: bool = Field(alias="isOnDiet")

    def to_draft(self) -> MealDraft:
        """Return the validated fields as a domain draft."""
        return MealDraft(
            name=self.name,
            description=self.description,
            date=self.date,
            is_on_diet=self.is_on_diet,
        )


class MealOut(BaseModel):
    """Meal as returned by the API, keyed by its stored column names."""

    id: UUID
    user_id: UUID
    name: str
    description: str
    date: str
    is_on_diet: bool

    @classmethod
    def from_record(cls, meal: MealRecord) -> "MealOut":
        return cls(
            id=meal.id,
            user_id=meal.user_id,
            name=meal.name,
            description=meal.description,
            date=meal.date,
            is_on_diet=meal.is_on_diet,
        )


class MealListResponse(BaseModel):
    """List of the user's meals in date order."""

    meals: list[MealOut]


class MealResponse(BaseModel):
    """A single meal, or null when the id is unknown."""

    meal: MealOut | None


class MetricsResponse(BaseModel):
    """Diet metrics, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_meals: int
    total_meals_on_diet: int
    total_meals_not_on_diet: int
    longest_streak: int

    @classmethod
    def from_metrics(cls, metrics: MealMetrics) -> "MetricsResponse":
        return cls(
            total_meals=metrics.total_meals,
            total_meals_on_diet=metrics.total_meals_on_diet,
            total_meals_not_on_diet=metrics.total_meals_not_on_diet,
            longest_streak=metrics.longest_streak,
        )
