"""User registration endpoint."""

from fastapi import APIRouter, Depends, Response, status

from diet_tracker.api.dependencies import get_container, session_token
from diet_tracker.api.models import CreateUserBody
from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def register_user(
    body: CreateUserBody,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Register a user and issue a session cookie if none was presented."""
    registration = container.user_service.register(
        name=body.name, email=str(body.email), session_id=token
    )
    response = Response(status_code=status.HTTP_201_CREATED)
    if registration.token_issued:
        settings = container.settings
        response.set_cookie(
            settings.session_cookie_name,
            registration.user.session_id,
            max_age=settings.session_max_age_seconds,
            path="/",
            httponly=True,
            samesite="lax",
        )
    return response
