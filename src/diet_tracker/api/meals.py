"""Meal endpoints for the authenticated user."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from diet_tracker.api.dependencies import get_container, require_user
from diet_tracker.api.models import (
    MealBody,
    MealListResponse,
    MealOut,
    MealResponse,
    MetricsResponse,
)
from diet_tracker.containers import AppContainer
from diet_tracker.domain.models import UserRecord

router = APIRouter(prefix="/meals", tags=["meals"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_meal(
    body: MealBody,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Record a meal for the current user."""
    container.meal_service.create_meal(user, body.to_draft())
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("")
async def list_meals(
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> MealListResponse:
    """Return the user's meals ordered by date."""
    meals = container.meal_service.list_meals(user)
    return MealListResponse(meals=[MealOut.from_record(meal) for meal in meals])


# Registered before /{meal_id} so "metrics" is not read as an id.
@router.get("/metrics")
async def meal_metrics(
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> MetricsResponse:
    """Return meal totals and the longest on-diet streak."""
    metrics = container.meal_service.get_metrics(user)
    return MetricsResponse.from_metrics(metrics)


@router.get("/{meal_id}")
async def get_meal(
    meal_id: str,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> MealResponse:
    """Return a single meal, or null when it does not exist."""
    meal = container.meal_service.get_meal(user, UUID(meal_id))
    return MealResponse(meal=MealOut.from_record(meal) if meal else None)


@router.put("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_meal(
    meal_id: str,
    body: MealBody,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Replace the fields of one of the user's meals."""
    container.meal_service.update_meal(user, UUID(meal_id), body.to_draft())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: str,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Delete one of the user's meals."""
    container.meal_service.delete_meal(user, UUID(meal_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
