"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse, Response

from fitness_tracker.api.http.app_data import ApplicationDependencies
from fitness_tracker.api.http.routers.health import router as health_router
from fitness_tracker.api.http.routers.trainings import router as trainings_router
from fitness_tracker.api.http.routers.users import router as users_router
from fitness_tracker.api.utils.app_startup import configure_logging
from fitness_tracker.core.exceptions import (
    FitnessTrackerError,
    ReferencedUserNotFoundError,
    TrainingNotFoundError,
    UserHasTrainingsError,
    UserNotFoundError,
)
from fitness_tracker.core.services import DbManageService, DbSessionService
from fitness_tracker.runtime.context import get_config

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


app = FastAPI(
    title=get_config().app.title,
    version=get_config().app.version,
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

__all__ = ["app", "startup", "shutdown"]

# --- CORS configuration ---
if get_config().app.environment == "production" and (
    "*" in get_config().app.cors.origins
):
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().app.cors.origins,
    allow_credentials=get_config().app.cors.allow_credentials,
    allow_methods=get_config().app.cors.allow_methods,
    allow_headers=get_config().app.cors.allow_headers,
)


# --- Request logging middleware ---
def _error_body(status_code: int, detail: Any, request_id: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "request_id": request_id},
        headers={"X-Request-ID": request_id},
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.perf_counter()

    def elapsed_ms() -> float:
        return round((time.perf_counter() - start) * 1000, 1)

    with logger.contextualize(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else "unknown",
    ):
        logger.info("request.start")
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.bind(
                status_code=500,
                duration_ms=elapsed_ms(),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return _error_body(500, "Internal Server Error", request_id)

        logger.bind(status_code=response.status_code, duration_ms=elapsed_ms()).info("request.end")
        response.headers.setdefault("X-Request-ID", request_id)
        return response


# --- Domain error translation ---
def _error_response(request: Request, status_code: int, exc: FitnessTrackerError) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "-")
    return _error_body(status_code, str(exc), request_id)


@app.exception_handler(UserNotFoundError)
@app.exception_handler(TrainingNotFoundError)
async def not_found_handler(request: Request, exc: FitnessTrackerError) -> Response:
    # Missing id-keyed resources answer with an empty 404
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(ReferencedUserNotFoundError)
async def referenced_user_handler(request: Request, exc: ReferencedUserNotFoundError) -> JSONResponse:
    return _error_response(request, 422, exc)


@app.exception_handler(UserHasTrainingsError)
async def user_has_trainings_handler(request: Request, exc: UserHasTrainingsError) -> JSONResponse:
    return _error_response(request, status.HTTP_409_CONFLICT, exc)


# --- Router registration ---
app.include_router(health_router)
app.include_router(users_router, prefix="/v1/users", tags=["users"])
app.include_router(trainings_router, prefix="/v1/trainings", tags=["trainings"])


# --- Lifecycle hooks ---
async def startup(app: FastAPI) -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService()
    DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.engine.dispose()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,
    )
