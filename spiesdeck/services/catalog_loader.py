"""
Card catalog loader.

Loads the card catalog from JSON once at startup and validates it. Catalog
problems (bad enum values, stats out of range, duplicate ids) are caught
here so the filter and deck paths can trust every Card they see.

The JSON file is an array of card objects:

    {"id": "2", "name": "Example Agent", "type": "Agent", "suits": ["Combat"],
     "subtypes": ["Military"], "Intel": 5, "Strength": 7, "trigger": "Ambush",
     "description": "PLAY: Deal 2 damage", "image": "images/2.png"}
"""

import json
import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from spiesdeck.config import DEFAULT_CATALOG_PATH, STAT_MAX, STAT_MIN, settings
from spiesdeck.models.card import Card, CardSubtype, CardSuit, CardTrigger, CardType
from spiesdeck.models.failure import FailureKind, KnownError

logger = logging.getLogger(__name__)


class CatalogError(KnownError):
    """Raised when the card catalog cannot be loaded or fails validation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(
            kind=FailureKind.CATALOG_INVALID,
            message=f"Card catalog is not available: {reason}",
            detail=reason,
            status_code=503,
        )


class CardNotFoundError(KnownError):
    """Raised when a requested card id is not in the catalog."""

    def __init__(self, card_id: str) -> None:
        self.card_id = card_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Card '{card_id}' not found",
            suggestion="Search the catalog for a valid card id.",
            status_code=404,
        )


class CardRecord(BaseModel):
    """One card object as stored in the catalog file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    type: CardType
    suits: list[CardSuit] = Field(..., min_length=1, max_length=2)
    subtypes: list[CardSubtype] = Field(default_factory=list)
    intel: int = Field(..., alias="Intel", ge=STAT_MIN, le=STAT_MAX)
    strength: int = Field(..., alias="Strength", ge=STAT_MIN, le=STAT_MAX)
    trigger: CardTrigger = CardTrigger.NONE
    description: str = ""
    image: str = ""

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        # "," separates deck code entries
        if "," in value or value != value.strip():
            raise ValueError(f"card id {value!r} must not contain ',' or surrounding spaces")
        return value

    @field_validator("suits", "subtypes")
    @classmethod
    def _check_distinct(cls, value: list[Any]) -> list[Any]:
        if len(set(value)) != len(value):
            raise ValueError("values must be distinct")
        return value

    def to_card(self) -> Card:
        return Card(
            id=self.id,
            name=self.name,
            type=self.type,
            suits=tuple(self.suits),
            subtypes=tuple(self.subtypes),
            intel=self.intel,
            strength=self.strength,
            trigger=self.trigger,
            description=self.description,
            image=self.image,
        )


def parse_catalog(records: list[dict[str, Any]]) -> tuple[Card, ...]:
    """
    Validate raw card records and build the catalog.

    Raises:
        CatalogError: If any record is invalid or an id repeats
    """
    cards: list[Card] = []
    seen_ids: set[str] = set()

    for index, raw in enumerate(records):
        try:
            record = CardRecord.model_validate(raw)
        except ValidationError as e:
            raise CatalogError(f"Card #{index} is invalid: {e}") from e

        if record.id in seen_ids:
            raise CatalogError(f"Duplicate card id: {record.id}")
        seen_ids.add(record.id)

        cards.append(record.to_card())

    return tuple(cards)


def load_catalog(path: Path | None = None) -> tuple[Card, ...]:
    """
    Load and validate the card catalog from a JSON file.

    Args:
        path: Catalog file. Defaults to the bundled data/cards.json

    Returns:
        Cards in file order

    Raises:
        CatalogError: If the file is missing, unreadable, or invalid
    """
    if path is None:
        path = DEFAULT_CATALOG_PATH

    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            records = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read catalog {path}: {e}") from e

    if not isinstance(records, list):
        raise CatalogError("Catalog must be a JSON array of card objects")

    catalog = parse_catalog(records)
    logger.info("Loaded %d cards from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> tuple[Card, ...]:
    """
    Get the configured catalog.

    Cached after first load (catalog is read-only).
    """
    return load_catalog(settings.catalog_path)


def find_card(catalog: Iterable[Card], card_id: str) -> Card | None:
    """Look up a card by id, None if absent."""
    for card in catalog:
        if card.id == card_id:
            return card
    return None


def require_card(catalog: Iterable[Card], card_id: str) -> Card:
    """
    Look up a card by id.

    Raises:
        CardNotFoundError: If the id is not in the catalog
    """
    card = find_card(catalog, card_id)
    if card is None:
        raise CardNotFoundError(card_id)
    return card
