"""Diet compliance metrics over a user's meals."""

from collections.abc import Iterable

from diet_tracker.domain.meals import MealMetrics, MealRecord


def summarize_meals(meals: Iterable[MealRecord]) -> MealMetrics:
    """Count meals and find the longest run of consecutive on-diet meals.

    Meals must arrive in chronological order. The streak is only as correct as
    that order, and nothing here can check it.
    """
    total = 0
    on_diet = 0
    current_streak = 0
    longest_streak = 0
    for meal in meals:
        total += 1
        if meal.is_on_diet:
            on_diet += 1
            current_streak += 1
            longest_streak = max(longest_streak, current_streak)
        else:
            current_streak = 0
    return MealMetrics(
        total_meals=total,
        total_meals_on_diet=on_diet,
        total_meals_not_on_diet=total - on_diet,
        longest_streak=longest_streak,
    )
