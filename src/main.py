"""
Entry point: assemble the FastAPI application.

Run with ``uvicorn src.main:app`` (or ``python -m src.main``).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.config import get_settings
from src.core.exceptions import EntityNotFoundError
from src.core.logging_config import setup_logging
from src.db.database import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    init_db()
    yield


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    """Render a missing record as 404 with a machine-parsable body."""
    logger.info("%s %s -> 404: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"type": "EntityNotFoundException", "message": str(exc)},
    )


def create_app() -> FastAPI:
    """Configure logging, mount the resource routers and register error handlers."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name, version=settings.api_version, lifespan=lifespan
    )
    app.include_router(router)
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app")
