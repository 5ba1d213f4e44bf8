"""
Deck store.

Deck mutations are pure functions over immutable Deck snapshots: each one
returns a new snapshot (or the same snapshot when nothing changes). DeckStore
holds the current snapshot for one session and counts versions so derived
views can tell when the deck changed.

Invariants:
- At most one entry per card id
- Every entry has quantity >= 1 (entries reaching 0 are removed)
- No entry exceeds the per-card copy cap
- Total deck size is advisory only and never blocks an add
"""

import logging

from spiesdeck.config import MAX_COPIES_PER_CARD
from spiesdeck.models.card import Card
from spiesdeck.models.deck import Deck, DeckEntry

logger = logging.getLogger(__name__)

EMPTY_DECK = Deck()


def add_card(deck: Deck, card: Card, max_copies: int = MAX_COPIES_PER_CARD) -> Deck:
    """
    Add one copy of a card.

    New cards are appended with quantity 1. A card already at the copy cap
    leaves the deck unchanged.
    """
    entry = deck.get_entry(card.id)
    if entry is None:
        return Deck(entries=(*deck.entries, DeckEntry(card=card, quantity=1)))

    if entry.quantity >= max_copies:
        logger.debug("Card %s already at %d copies, not added", card.id, max_copies)
        return deck

    return Deck(
        entries=tuple(
            DeckEntry(card=e.card, quantity=e.quantity + 1) if e.card_id == card.id else e
            for e in deck.entries
        )
    )


def remove_card(deck: Deck, card: Card) -> Deck:
    """
    Remove one copy of a card.

    The entry is dropped when its last copy is removed. Removing a card
    that is not in the deck leaves it unchanged.
    """
    entry = deck.get_entry(card.id)
    if entry is None:
        return deck

    if entry.quantity <= 1:
        return Deck(entries=tuple(e for e in deck.entries if e.card_id != card.id))

    return Deck(
        entries=tuple(
            DeckEntry(card=e.card, quantity=e.quantity - 1) if e.card_id == card.id else e
            for e in deck.entries
        )
    )


def clear_deck() -> Deck:
    """Return an empty deck."""
    return EMPTY_DECK


class DeckStore:
    """
    Session-owned holder of the current deck snapshot.

    Usage:
        store = DeckStore()
        store.add_card(card)
        store.quantity_of(card.id)  # 1
        stats = compute_stats(store.deck)
    """

    def __init__(self, max_copies: int = MAX_COPIES_PER_CARD) -> None:
        if max_copies < 1:
            raise ValueError(f"max_copies must be at least 1, got {max_copies}")
        self._max_copies = max_copies
        self._deck = EMPTY_DECK
        self._version = 0

    @property
    def deck(self) -> Deck:
        """Current deck snapshot."""
        return self._deck

    @property
    def version(self) -> int:
        """Incremented every time the snapshot changes."""
        return self._version

    @property
    def max_copies(self) -> int:
        return self._max_copies

    def add_card(self, card: Card) -> Deck:
        return self._commit(add_card(self._deck, card, self._max_copies))

    def remove_card(self, card: Card) -> Deck:
        return self._commit(remove_card(self._deck, card))

    def clear(self) -> Deck:
        return self._commit(clear_deck())

    def replace(self, deck: Deck) -> Deck:
        """
        Swap in a whole new snapshot.

        Raises:
            ValueError: If any entry exceeds the copy cap
        """
        for entry in deck:
            if entry.quantity > self._max_copies:
                raise ValueError(
                    f"Card '{entry.card_id}' has {entry.quantity} copies, "
                    f"maximum is {self._max_copies}"
                )
        return self._commit(deck)

    def quantity_of(self, card_id: str) -> int:
        return self._deck.quantity_of(card_id)

    def _commit(self, deck: Deck) -> Deck:
        if deck is not self._deck and deck != self._deck:
            self._deck = deck
            self._version += 1
        return deck
