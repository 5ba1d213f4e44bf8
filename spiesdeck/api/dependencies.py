"""
Shared API dependencies.

The catalog and the session deck store live on app.state. They are created
by the application lifespan, or on first use when the lifespan did not run.
"""

from fastapi import Request

from spiesdeck.models.card import Card
from spiesdeck.services.catalog_loader import get_catalog
from spiesdeck.services.deck_store import DeckStore


def get_catalog_dependency(request: Request) -> tuple[Card, ...]:
    """Card catalog for the running app."""
    state = request.app.state
    if getattr(state, "catalog", None) is None:
        state.catalog = get_catalog()
    return state.catalog


def get_deck_store(request: Request) -> DeckStore:
    """The session's deck store."""
    state = request.app.state
    if getattr(state, "deck_store", None) is None:
        state.deck_store = DeckStore()
    return state.deck_store
