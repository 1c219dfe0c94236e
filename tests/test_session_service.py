"""Tests for session token resolution."""

from uuid import UUID

import pytest

from diet_tracker.domain.errors import Unauthenticated
from diet_tracker.domain.ids import new_id, new_session_token
from diet_tracker.services.sessions import SessionService
from tests.conftest import InMemoryUserRepository


def test_resolve_returns_bound_user() -> None:
    repository = InMemoryUserRepository()
    user = repository.create_user(
        user_id=new_id(),
        session_id="token-1",
        name="John Doe",
        email="johndoe@email.com",
    )
    service = SessionService(repository)

    assert service.resolve("token-1") == user


@pytest.mark.parametrize("token", [None, ""])
def test_resolve_rejects_missing_token(token: str | None) -> None:
    service = SessionService(InMemoryUserRepository())

    with pytest.raises(Unauthenticated):
        service.resolve(token)


def test_resolve_rejects_unknown_token() -> None:
    service = SessionService(InMemoryUserRepository())

    with pytest.raises(Unauthenticated):
        service.resolve(new_session_token())


def test_session_tokens_are_unique_and_time_ordered() -> None:
    tokens = [new_session_token() for _ in range(50)]

    timestamps = [UUID(token).int >> 80 for token in tokens]

    assert len(set(tokens)) == len(tokens)
    assert all(UUID(token).version == 7 for token in tokens)
    assert timestamps == sorted(timestamps)
