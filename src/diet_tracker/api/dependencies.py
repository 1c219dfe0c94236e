"""Request-scoped dependencies shared by the routers."""

from fastapi import Depends, Request

from diet_tracker.containers import AppContainer
from diet_tracker.domain.models import UserRecord


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def session_token(request: Request) -> str | None:
    """Return the session token cookie, if the caller sent one."""
    container: AppContainer = request.app.state.container
    return request.cookies.get(container.settings.session_cookie_name)


async def require_user(
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> UserRecord:
    """Resolve the session cookie to a user or fail with Unauthenticated."""
    return container.session_service.resolve(token)
