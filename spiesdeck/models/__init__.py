from spiesdeck.models.card import Card, CardSubtype, CardSuit, CardTrigger, CardType
from spiesdeck.models.deck import Deck, DeckEntry, DeckStats
from spiesdeck.models.failure import (
    ApiResponse,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    create_unknown_failure,
    finalize_response,
)
from spiesdeck.models.filters import FULL_RANGE, FilterState

__all__ = [
    "ApiResponse",
    "Card",
    "CardSubtype",
    "CardSuit",
    "CardTrigger",
    "CardType",
    "Deck",
    "DeckEntry",
    "DeckStats",
    "FULL_RANGE",
    "FailureDetail",
    "FailureKind",
    "FilterState",
    "KnownError",
    "OutcomeType",
    "create_unknown_failure",
    "finalize_response",
]
