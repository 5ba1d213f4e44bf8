import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from spiesdeck.api import catalog_router, deck_router, health_router
from spiesdeck.config import settings
from spiesdeck.models.failure import KnownError, create_unknown_failure
from spiesdeck.services.catalog_loader import get_catalog
from spiesdeck.services.deck_store import DeckStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the catalog and create the session deck store."""
    app.state.catalog = get_catalog()
    app.state.deck_store = DeckStore()
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("spiesdeck"),
    lifespan=lifespan,
)

app.include_router(catalog_router)
app.include_router(deck_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Return known failures as a classified failure envelope."""
    logger.info("Known failure (%s): %s", exc.kind.value, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def unknown_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Return unexpected errors as an unknown-failure envelope."""
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content=create_unknown_failure(exc).model_dump(mode="json"),
    )
