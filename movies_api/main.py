"""
This module is the main entry point for the FastAPI application.
create_app is the composition root: it builds the movie and genre stores,
mounts the health-check, movie and genre routers, serves the generated
documentation at /api-docs and installs the 404 and 500 fallbacks.
movies_api.main.py
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from movies_api.config import Settings, load_settings
from movies_api.db import EntityStore, create_client, get_mongo_stores
from movies_api.logging_setup import setup_logging
from movies_api.memory_store import InMemoryEntityStore
from movies_api.routes import genres, health_check, movies

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    # unmatched methods on a known path are reported like unknown paths
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": "Not Found"})
    return await http_exception_handler(request, exc)


async def malformed_request_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected malformed request %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


async def internal_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app(
    settings: Optional[Settings] = None,
    movie_store: Optional[EntityStore] = None,
    genre_store: Optional[EntityStore] = None,
) -> FastAPI:
    if (movie_store is None) != (genre_store is None):
        raise ValueError("movie_store and genre_store must be passed together")
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if movie_store is not None and genre_store is not None:
            app.state.movie_store, app.state.genre_store = movie_store, genre_store
        elif settings.store_backend == "memory":
            logger.info("Using in-memory stores")
            app.state.movie_store, app.state.genre_store = InMemoryEntityStore(), InMemoryEntityStore()
        else:
            client = create_client(settings)
            app.state.movie_store, app.state.genre_store = get_mongo_stores(client, settings)
            logger.info("Using MongoDB database %s", settings.db_name)
        yield
        if client is not None:
            client.close()

    app = FastAPI(
        title="Movies API",
        version="1.0.0",
        docs_url="/api-docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    # stores are available without entering the lifespan when injected
    if movie_store is not None and genre_store is not None:
        app.state.movie_store, app.state.genre_store = movie_store, genre_store

    app.include_router(health_check.router, prefix="/health-check", tags=["Server"])
    app.include_router(movies.router, prefix="/movies", tags=["Movies"])
    app.include_router(genres.router, prefix="/genres", tags=["Genres"])

    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(RequestValidationError, malformed_request_handler)
    app.add_exception_handler(Exception, internal_error_handler)
    return app


def run():
    import uvicorn

    settings = load_settings()
    uvicorn.run("movies_api.main:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
