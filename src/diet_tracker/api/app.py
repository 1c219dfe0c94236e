"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from diet_tracker.api.meals import router as meals_router
from diet_tracker.api.users import router as users_router
from diet_tracker.app_logging import configure_logging
from diet_tracker.containers import AppContainer
from diet_tracker.domain.errors import MealNotFound, Unauthenticated, UserAlreadyExists

logger = logging.getLogger(__name__)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_exception_handler(Unauthenticated, _unauthenticated_handler)
    app.add_exception_handler(RequestValidationError, _validation_handler)
    app.add_exception_handler(MealNotFound, _meal_not_found_handler)
    app.add_exception_handler(UserAlreadyExists, _user_exists_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(users_router)
    app.include_router(meals_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


async def _unauthenticated_handler(request: Request, exc: Exception) -> Response:
    return Response(status_code=status.HTTP_401_UNAUTHORIZED)


async def _validation_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report payload validation failures as a 401 with a field error map."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"success": False, "message": {}, "error": _field_errors(errors)},
    )


async def _meal_not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Meal not found!"},
    )


async def _user_exists_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "User already exists"},
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def _field_errors(errors: list[dict]) -> dict[str, list[str]]:
    """Group validation messages by the offending body field."""
    fields: dict[str, list[str]] = {}
    for error in errors:
        path = [str(part) for part in error.get("loc", ()) if part != "body"]
        key = ".".join(path) or "body"
        fields.setdefault(key, []).append(str(error.get("msg", "Invalid value")))
    return fields
