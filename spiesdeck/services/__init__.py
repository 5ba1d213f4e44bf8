"""
Deckbuilder services.

Deck mutation, statistics, deck codes, reports and catalog loading.
"""

from spiesdeck.services.catalog_loader import (
    CardNotFoundError,
    CatalogError,
    find_card,
    get_catalog,
    load_catalog,
    parse_catalog,
    require_card,
)
from spiesdeck.services.deck_code import (
    DeckCodeError,
    EmptyDeckCodeError,
    InvalidQuantityError,
    MalformedEntryError,
    UnknownCardError,
    decode_deck,
    encode_deck,
    import_deck_code,
)
from spiesdeck.services.deck_report import format_deck_report, report_filename
from spiesdeck.services.deck_stats import compute_stats
from spiesdeck.services.deck_store import (
    EMPTY_DECK,
    DeckStore,
    add_card,
    clear_deck,
    remove_card,
)

__all__ = [
    # Catalog
    "CardNotFoundError",
    "CatalogError",
    "find_card",
    "get_catalog",
    "load_catalog",
    "parse_catalog",
    "require_card",
    # Deck store
    "EMPTY_DECK",
    "DeckStore",
    "add_card",
    "clear_deck",
    "remove_card",
    # Statistics
    "compute_stats",
    # Deck code
    "DeckCodeError",
    "EmptyDeckCodeError",
    "InvalidQuantityError",
    "MalformedEntryError",
    "UnknownCardError",
    "decode_deck",
    "encode_deck",
    "import_deck_code",
    # Report
    "format_deck_report",
    "report_filename",
]
