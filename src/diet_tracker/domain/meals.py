"""Domain models for meals."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class MealRecord:
    """A meal owned by exactly one user.

    ``date`` is kept as the caller supplied it. Listing orders meals by this
    string, so callers should use a sortable form such as ISO-8601.
    """

    id: UUID
    user_id: UUID
    name: str
    description: str
    date: str
    is_on_diet: bool


@dataclass(frozen=True)
class MealMetrics:
    """Aggregate diet metrics for a user's meals."""

    total_meals: int
    total_meals_on_diet: int
    total_meals_not_on_diet: int
    longest_streak: int


@dataclass(frozen=True)
class MealDraft:
    """Validated mutable fields of a meal, used for create and full replace."""

    name: str
    description: str
    date: str
    is_on_diet: bool
