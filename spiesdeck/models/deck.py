from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from spiesdeck.models.card import Card, CardSuit, CardTrigger, CardType


@dataclass(frozen=True, slots=True)
class DeckEntry:
    """A card held in a deck together with its copy count (always >= 1)."""

    card: Card
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"Deck entry for '{self.card.id}' must have quantity >= 1")

    @property
    def card_id(self) -> str:
        return self.card.id


@dataclass(frozen=True)
class Deck:
    """
    An immutable deck snapshot.

    Entries keep insertion order and hold at most one entry per card id.
    Mutations produce new snapshots (see services.deck_store), so readers
    always observe a consistent deck.

    Attributes:
        entries: Deck entries in the order cards were first added
    """

    entries: tuple[DeckEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        ids = [entry.card_id for entry in self.entries]
        if len(ids) != len(set(ids)):
            raise ValueError("Deck may hold at most one entry per card id")

    def __iter__(self) -> Iterator[DeckEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        """Number of distinct cards in the deck."""
        return len(self.entries)

    def __contains__(self, card_id: object) -> bool:
        return any(entry.card_id == card_id for entry in self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def get_entry(self, card_id: str) -> DeckEntry | None:
        for entry in self.entries:
            if entry.card_id == card_id:
                return entry
        return None

    def quantity_of(self, card_id: str) -> int:
        """Copies of a card in the deck, 0 if absent."""
        entry = self.get_entry(card_id)
        return entry.quantity if entry else 0

    def total_cards(self) -> int:
        """Total number of cards (counting quantities)."""
        return sum(entry.quantity for entry in self.entries)

    def to_quantities(self) -> dict[str, int]:
        """Order-free view of the deck: {card_id: quantity}."""
        return {entry.card_id: entry.quantity for entry in self.entries}


def _empty_counts() -> Mapping[Any, int]:
    return MappingProxyType({})


@dataclass(frozen=True)
class DeckStats:
    """
    Summary figures derived from a deck snapshot.

    Count mappings are read-only; DeckStats instances are shared between readers.

    Attributes:
        total_cards: Sum of all entry quantities
        unique_cards: Number of distinct cards
        average_intel: Quantity-weighted mean Intel, one decimal (0.0 when empty)
        average_strength: Quantity-weighted mean Strength, one decimal (0.0 when empty)
        counts_by_type: Copies per card type, zero counts omitted
        counts_by_trigger: Copies per trigger, zero counts omitted
        counts_by_suit: Copies per suit; dual-suit cards count toward both
    """

    total_cards: int = 0
    unique_cards: int = 0
    average_intel: float = 0.0
    average_strength: float = 0.0
    counts_by_type: Mapping[CardType, int] = field(default_factory=_empty_counts)
    counts_by_trigger: Mapping[CardTrigger, int] = field(default_factory=_empty_counts)
    counts_by_suit: Mapping[CardSuit, int] = field(default_factory=_empty_counts)

    def __post_init__(self) -> None:
        for name in ("counts_by_type", "counts_by_trigger", "counts_by_suit"):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))
