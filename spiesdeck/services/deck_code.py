"""
Deck Code Codec.

A deck code is the compact, shareable text form of a deck:

    entry ("," entry)*        entry = card_id "-" quantity

e.g. "1-2,2-1" is two copies of card "1" and one copy of card "2".
Quantity is an unsigned base-10 integer. The entry is split on its LAST "-",
so card ids may contain "-" but never ",".

=============================================================================
IMPORT CONTRACT
=============================================================================

1. The whole code is decoded and validated before anything is applied
2. Any invalid entry rejects the entire code (no partial import)
3. On success the session deck is replaced in one step

Decoding raises a DeckCodeError subclass describing the first violation.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from spiesdeck.config import MAX_COPIES_PER_CARD
from spiesdeck.models.card import Card
from spiesdeck.models.deck import Deck, DeckEntry
from spiesdeck.models.failure import FailureKind, KnownError

if TYPE_CHECKING:
    from spiesdeck.services.deck_store import DeckStore

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = ","
QUANTITY_SEPARATOR = "-"

_QUANTITY_PATTERN = re.compile(r"[0-9]+")


# =============================================================================
# EXCEPTION HIERARCHY
# =============================================================================


class DeckCodeError(KnownError):
    """
    Base exception for deck code failures.

    The entire code is rejected. The current deck is left untouched.
    """

    def __init__(self, kind: FailureKind, message: str, detail: str | None = None) -> None:
        super().__init__(
            kind=kind,
            message=message,
            detail=detail,
            suggestion="Check the deck code and try again.",
            status_code=400,
        )


class EmptyDeckCodeError(DeckCodeError):
    """Raised when there is nothing to import."""

    def __init__(self) -> None:
        super().__init__(FailureKind.EMPTY_CODE, "Please enter a deck code")


class MalformedEntryError(DeckCodeError):
    """Raised when a segment is not shaped like "<card_id>-<quantity>"."""

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(
            FailureKind.MALFORMED_ENTRY,
            f"Invalid entry: {segment!r}",
            detail="Entries must look like <card_id>-<quantity>",
        )


class InvalidQuantityError(DeckCodeError):
    """Raised when a quantity is not an integer within the copy cap."""

    def __init__(self, entry: str, max_copies: int) -> None:
        self.entry = entry
        self.max_copies = max_copies
        super().__init__(
            FailureKind.INVALID_QUANTITY,
            f"Invalid entry: {entry!r}",
            detail=f"Quantity must be a whole number from 1 to {max_copies}",
        )


class UnknownCardError(DeckCodeError):
    """Raised when a card id is not in the catalog."""

    def __init__(self, card_id: str) -> None:
        self.card_id = card_id
        super().__init__(FailureKind.UNKNOWN_CARD, f"Card not found: {card_id}")


# =============================================================================
# ENCODE
# =============================================================================


def encode_deck(deck: Deck) -> str:
    """
    Encode a deck as a deck code.

    Entries appear in deck order. An empty deck encodes to "".
    """
    return ENTRY_SEPARATOR.join(
        f"{entry.card_id}{QUANTITY_SEPARATOR}{entry.quantity}" for entry in deck
    )


# =============================================================================
# DECODE
# =============================================================================


def _split_entry(segment: str) -> tuple[str, str]:
    """Split a trimmed segment into (card_id, quantity_str) on its last "-"."""
    card_id, separator, quantity_str = segment.rpartition(QUANTITY_SEPARATOR)
    if not segment or not separator or not card_id.strip():
        raise MalformedEntryError(segment)
    return card_id.strip(), quantity_str.strip()


def _parse_quantity(entry: str, quantity_str: str, max_copies: int) -> int:
    if not _QUANTITY_PATTERN.fullmatch(quantity_str):
        raise InvalidQuantityError(entry, max_copies)
    # Length check before int(): huge digit runs must not reach the converter
    digits = quantity_str.lstrip("0")
    if len(digits) > len(str(max_copies)):
        raise InvalidQuantityError(entry, max_copies)
    quantity = int(digits or "0")
    if not 1 <= quantity <= max_copies:
        raise InvalidQuantityError(entry, max_copies)
    return quantity


def decode_deck(
    code: str,
    catalog: Iterable[Card],
    max_copies: int = MAX_COPIES_PER_CARD,
) -> Deck:
    """
    Decode a deck code against the card catalog.

    Args:
        code: Raw deck code, e.g. "1-2,2-1"
        catalog: Card catalog used to resolve ids
        max_copies: Largest quantity accepted per entry

    Returns:
        Deck with entries in order of first appearance. A card listed in
        several entries gets their summed quantity, capped at max_copies.

    Raises:
        EmptyDeckCodeError: If the code is empty or whitespace
        MalformedEntryError: If a segment has no "-" or no card id
        InvalidQuantityError: If a quantity is not an integer in [1, max_copies]
        UnknownCardError: If a card id is not in the catalog
    """
    code = code.strip()
    if not code:
        raise EmptyDeckCodeError()

    cards_by_id = {card.id: card for card in catalog}
    quantities: dict[str, int] = {}

    for raw_segment in code.split(ENTRY_SEPARATOR):
        segment = raw_segment.strip()
        card_id, quantity_str = _split_entry(segment)
        quantity = _parse_quantity(segment, quantity_str, max_copies)

        if card_id not in cards_by_id:
            raise UnknownCardError(card_id)

        quantities[card_id] = min(quantities.get(card_id, 0) + quantity, max_copies)

    return Deck(
        entries=tuple(
            DeckEntry(card=cards_by_id[card_id], quantity=quantity)
            for card_id, quantity in quantities.items()
        )
    )


def import_deck_code(store: DeckStore, code: str, catalog: Iterable[Card]) -> Deck:
    """
    Replace the store's deck with the deck described by a code.

    The code is fully validated first. On any DeckCodeError the store
    keeps its current deck.
    """
    try:
        deck = decode_deck(code, catalog, store.max_copies)
    except DeckCodeError as e:
        logger.warning("Deck code rejected (%s): %s", e.kind.value, e.message)
        raise

    logger.info("Imported deck code with %d cards", deck.total_cards())
    return store.replace(deck)
