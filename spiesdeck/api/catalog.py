"""
Catalog API endpoints.

Browse and filter the card catalog.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from spiesdeck.api.dependencies import get_catalog_dependency, get_deck_store
from spiesdeck.filtering import filter_catalog
from spiesdeck.models.card import Card, CardSubtype, CardSuit, CardTrigger, CardType
from spiesdeck.models.filters import FilterState
from spiesdeck.services.catalog_loader import require_card
from spiesdeck.services.deck_store import DeckStore

router = APIRouter(prefix="/cards", tags=["cards"])

Catalog = Annotated[tuple[Card, ...], Depends(get_catalog_dependency)]


class CardResponse(BaseModel):
    """Response model for a single card."""

    id: str
    name: str
    type: CardType
    suits: list[CardSuit]
    subtypes: list[CardSubtype] = Field(default_factory=list)
    intel: int
    strength: int
    trigger: CardTrigger
    description: str = ""
    image: str = ""
    deck_quantity: int | None = Field(
        default=None,
        description="Copies of this card in the current deck (single-card lookups only)",
    )

    @classmethod
    def from_card(cls, card: Card, deck_quantity: int | None = None) -> "CardResponse":
        return cls(
            id=card.id,
            name=card.name,
            type=card.type,
            suits=list(card.suits),
            subtypes=list(card.subtypes),
            intel=card.intel,
            strength=card.strength,
            trigger=card.trigger,
            description=card.description,
            image=card.image,
            deck_quantity=deck_quantity,
        )


class CardListResponse(BaseModel):
    """Response model for a list of cards."""

    cards: list[CardResponse]
    count: int


def _card_list(cards: list[Card]) -> CardListResponse:
    return CardListResponse(
        cards=[CardResponse.from_card(card) for card in cards],
        count=len(cards),
    )


@router.get("", response_model=CardListResponse)
async def list_cards(catalog: Catalog) -> CardListResponse:
    """Get the whole catalog in catalog order."""
    return _card_list(list(catalog))


@router.post("/search", response_model=CardListResponse)
async def search_cards(filters: FilterState, catalog: Catalog) -> CardListResponse:
    """
    Filter the catalog.

    All criteria are ANDed; values within a list are ORed.
    Invalid ranges (lo > hi, outside 0-10) are rejected with 422.
    """
    return _card_list(filter_catalog(catalog, filters))


@router.get("/{card_id}", response_model=CardResponse)
async def get_card(
    card_id: str,
    catalog: Catalog,
    store: Annotated[DeckStore, Depends(get_deck_store)],
) -> CardResponse:
    """
    Get a single card with its current deck quantity.

    Returns 404 if the card is not in the catalog.
    """
    card = require_card(catalog, card_id)
    return CardResponse.from_card(card, deck_quantity=store.quantity_of(card.id))
