from spiesdeck.api.catalog import router as catalog_router
from spiesdeck.api.deck import router as deck_router
from spiesdeck.api.health import router as health_router

__all__ = [
    "catalog_router",
    "deck_router",
    "health_router",
]
