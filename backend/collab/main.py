# backend/collab/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .cors import StrictCORSMiddleware
from .errors import CollabError, status_for
from .models.schemas import Health, Version
from .routers import questions_router
from .store import QuestionStore

logger = logging.getLogger(__name__)


# =========================================================
# Exception handlers
# =========================================================
async def collab_error_handler(request: Request, exc: CollabError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=status_for(exc))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    if exc.status_code == 404:
        return PlainTextResponse("Route not found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


# =========================================================
# App factory
# =========================================================
def create_app(
    store: Optional[QuestionStore] = None,
    allow_origins: Optional[List[str]] = None,
) -> FastAPI:
    """
    Build the API.

    Without `store`, questions are loaded from config.QUESTIONS_FILE when the
    app starts; a StoreLoadError there aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "store", None) is None:
            try:
                app.state.store = QuestionStore.load_all(config.QUESTIONS_FILE)
            except CollabError:
                logger.exception("cannot start: question data failed to load")
                raise
        yield

    app = FastAPI(
        title="Collab Questions API",
        version=config.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        StrictCORSMiddleware,
        allow_origins=allow_origins if allow_origins is not None else config.CORS_ALLOW_ORIGINS,
        allow_methods=config.CORS_ALLOW_METHODS,
        allow_headers=config.CORS_ALLOW_HEADERS,
    )

    app.add_exception_handler(CollabError, collab_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(questions_router)

    # -----------------------------------------------------
    # Health / Version
    # -----------------------------------------------------
    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "collab-questions OK"

    @app.get("/health", response_model=Health)
    def health(request: Request):
        return Health(questions=len(request.app.state.store))

    @app.get("/version", response_model=Version)
    def version():
        return Version(version=config.APP_VERSION)

    return app


app = create_app()


def run() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("serving on http://%s:%d", config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
