"""
Deck API endpoints.

Mutate the session deck, read its statistics, and move it in and out of
deck codes and text reports.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from spiesdeck.api.catalog import CardResponse
from spiesdeck.api.dependencies import get_catalog_dependency, get_deck_store
from spiesdeck.config import settings
from spiesdeck.models.card import Card
from spiesdeck.models.deck import DeckStats
from spiesdeck.services.catalog_loader import require_card
from spiesdeck.services.deck_code import encode_deck, import_deck_code
from spiesdeck.services.deck_report import format_deck_report, report_filename
from spiesdeck.services.deck_stats import compute_stats
from spiesdeck.services.deck_store import DeckStore

router = APIRouter(prefix="/deck", tags=["deck"])

Catalog = Annotated[tuple[Card, ...], Depends(get_catalog_dependency)]
Store = Annotated[DeckStore, Depends(get_deck_store)]


class DeckEntryResponse(BaseModel):
    """A card in the deck with its quantity."""

    card: CardResponse
    quantity: int


class DeckStatsResponse(BaseModel):
    """Response model for deck statistics."""

    total_cards: int = 0
    unique_cards: int = 0
    deck_size_target: int = Field(
        default=settings.deck_size_target,
        description="Advisory deck size (not enforced)",
    )
    average_intel: float = 0.0
    average_strength: float = 0.0
    counts_by_type: dict[str, int] = Field(default_factory=dict)
    counts_by_trigger: dict[str, int] = Field(default_factory=dict)
    counts_by_suit: dict[str, int] = Field(
        default_factory=dict,
        description="Dual-suit cards count toward both suits",
    )

    @classmethod
    def from_stats(cls, stats: DeckStats) -> "DeckStatsResponse":
        return cls(
            total_cards=stats.total_cards,
            unique_cards=stats.unique_cards,
            deck_size_target=settings.deck_size_target,
            average_intel=stats.average_intel,
            average_strength=stats.average_strength,
            counts_by_type={k.value: v for k, v in stats.counts_by_type.items()},
            counts_by_trigger={k.value: v for k, v in stats.counts_by_trigger.items()},
            counts_by_suit={k.value: v for k, v in stats.counts_by_suit.items()},
        )


class DeckResponse(BaseModel):
    """Response model for the current deck."""

    entries: list[DeckEntryResponse] = Field(default_factory=list)
    stats: DeckStatsResponse
    code: str = ""
    version: int = Field(
        default=0,
        description="Incremented on every change to the deck",
    )


class DeckCodeResponse(BaseModel):
    """Response model for a deck code."""

    code: str


class DeckImportRequest(BaseModel):
    """Request model for importing a deck code."""

    code: str = Field(
        ...,
        description="Deck code: comma-separated <card_id>-<quantity> entries",
        examples=["1-2,2-1"],
    )


def _deck_response(store: DeckStore) -> DeckResponse:
    deck = store.deck
    return DeckResponse(
        entries=[
            DeckEntryResponse(card=CardResponse.from_card(entry.card), quantity=entry.quantity)
            for entry in deck
        ],
        stats=DeckStatsResponse.from_stats(compute_stats(deck)),
        code=encode_deck(deck),
        version=store.version,
    )


@router.get("", response_model=DeckResponse)
async def get_deck(store: Store) -> DeckResponse:
    """Get the current deck with statistics and deck code."""
    return _deck_response(store)


@router.delete("", response_model=DeckResponse)
async def clear_deck(store: Store) -> DeckResponse:
    """Remove every card from the deck."""
    store.clear()
    return _deck_response(store)


@router.post("/cards/{card_id}", response_model=DeckResponse)
async def add_card_to_deck(card_id: str, catalog: Catalog, store: Store) -> DeckResponse:
    """
    Add one copy of a card.

    A card already at the copy limit is left as is (not an error).
    Returns 404 if the card is not in the catalog.
    """
    store.add_card(require_card(catalog, card_id))
    return _deck_response(store)


@router.delete("/cards/{card_id}", response_model=DeckResponse)
async def remove_card_from_deck(card_id: str, catalog: Catalog, store: Store) -> DeckResponse:
    """
    Remove one copy of a card.

    Removing a card that is not in the deck is a no-op.
    Returns 404 if the card is not in the catalog.
    """
    store.remove_card(require_card(catalog, card_id))
    return _deck_response(store)


@router.get("/stats", response_model=DeckStatsResponse)
async def get_deck_stats(store: Store) -> DeckStatsResponse:
    """Get statistics for the current deck."""
    return DeckStatsResponse.from_stats(compute_stats(store.deck))


@router.get("/code", response_model=DeckCodeResponse)
async def get_deck_code(store: Store) -> DeckCodeResponse:
    """Get the deck code for the current deck (empty string for an empty deck)."""
    return DeckCodeResponse(code=encode_deck(store.deck))


@router.post("/import", response_model=DeckResponse)
async def import_deck(request: DeckImportRequest, catalog: Catalog, store: Store) -> DeckResponse:
    """
    Replace the deck with the one described by a deck code.

    The whole code is validated before the deck changes. Invalid codes
    return 400 with a failure envelope and leave the deck untouched.
    """
    import_deck_code(store, request.code, catalog)
    return _deck_response(store)


@router.get(
    "/export",
    response_class=PlainTextResponse,
    responses={204: {"description": "Deck is empty, nothing to export"}},
)
async def export_deck(
    store: Store,
    title: Annotated[str | None, Query(max_length=100)] = None,
) -> Response:
    """
    Get the deck as a plain-text report.

    Returns 204 when the deck is empty.
    """
    title = title or settings.default_deck_title
    deck = store.deck
    report = format_deck_report(
        deck,
        compute_stats(deck),
        encode_deck(deck),
        title=title,
        deck_size_target=settings.deck_size_target,
    )
    if report is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    filename = report_filename(title, datetime.now())
    return PlainTextResponse(
        report,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
