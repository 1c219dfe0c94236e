"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from uuid import UUID

import pytest

from diet_tracker.config import Settings
from diet_tracker.containers import AppContainer
from diet_tracker.domain.errors import UserAlreadyExists
from diet_tracker.domain.meals import MealDraft, MealRecord
from diet_tracker.domain.models import UserRecord
from diet_tracker.services.meals import MealRepository, MealService
from diet_tracker.services.sessions import SessionService
from diet_tracker.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_email(self, email: str) -> UserRecord | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def get_by_session_id(self, session_id: str) -> UserRecord | None:
        for user in self.users.values():
            if user.session_id == session_id:
                return user
        return None

    def create_user(
        self, user_id: UUID, session_id: str, name: str, email: str
    ) -> UserRecord:
        if self.get_by_email(email) is not None:
            raise UserAlreadyExists(email)
        if self.get_by_session_id(session_id) is not None:
            raise ValueError("session_id is already bound to a user")
        user = UserRecord(id=user_id, session_id=session_id, name=name, email=email)
        self.users[user_id] = user
        return user


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, MealRecord] = field(default_factory=dict)

    def create_meal(self, meal: MealRecord) -> None:
        self.meals[meal.id] = meal

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        return self.meals.get(meal_id)

    def update_meal(self, meal_id: UUID, draft: MealDraft) -> bool:
        meal = self.meals.get(meal_id)
        if meal is None:
            return False
        self.meals[meal_id] = replace(
            meal,
            name=draft.name,
            description=draft.description,
            date=draft.date,
            is_on_diet=draft.is_on_diet,
        )
        return True

    def delete_meal(self, meal_id: UUID) -> bool:
        return self.meals.pop(meal_id, None) is not None

    def list_meals(self, user_id: UUID) -> list[MealRecord]:
        owned = [meal for meal in self.meals.values() if meal.user_id == user_id]
        return sorted(owned, key=lambda meal: meal.date)


def meal_payload(
    name: str = "Oatmeal",
    description: str = "Oats with berries",
    date: str = "2024-05-01T08:00:00",
    is_on_diet: bool = True,
) -> dict[str, object]:
    """Return a JSON meal body as clients send it."""
    return {
        "name": name,
        "description": description,
        "date": date,
        "isOnDiet": is_on_diet,
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    meal_repository: InMemoryMealRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        session_service=SessionService(user_repository),
        meal_service=MealService(
            repository=meal_repository,
            scope_reads_to_owner=settings.scope_meal_reads_to_owner,
        ),
        close_resources=close_resources,
    )
