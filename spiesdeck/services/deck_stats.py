"""
Deck statistics.

Derives summary figures from a deck snapshot. Snapshots are immutable and
hashable, so results are memoized per snapshot; a new deck state is always a
new cache key and stats can never drift from the deck they describe.

Returned DeckStats are shared between callers; their count mappings are
read-only views.
"""

from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache

from spiesdeck.models.card import CardSuit, CardTrigger, CardType
from spiesdeck.models.deck import Deck, DeckStats

_ONE_DECIMAL = Decimal("0.1")


def _weighted_average(weighted_sum: int, total: int) -> float:
    """Mean rounded half-up to one decimal place, 0.0 for no cards."""
    if total == 0:
        return 0.0
    mean = Decimal(weighted_sum) / Decimal(total)
    return float(mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


@lru_cache(maxsize=128)
def compute_stats(deck: Deck) -> DeckStats:
    """
    Compute summary statistics for a deck.

    Groupings keep first-seen order and omit zero counts. A dual-suit card
    adds its quantity to both suits, so suit counts may sum to more than
    total_cards.
    """
    total = 0
    intel_sum = 0
    strength_sum = 0
    by_type: dict[CardType, int] = {}
    by_trigger: dict[CardTrigger, int] = {}
    by_suit: dict[CardSuit, int] = {}

    for entry in deck:
        card, qty = entry.card, entry.quantity
        total += qty
        intel_sum += card.intel * qty
        strength_sum += card.strength * qty
        by_type[card.type] = by_type.get(card.type, 0) + qty
        by_trigger[card.trigger] = by_trigger.get(card.trigger, 0) + qty
        for suit in card.suits:
            by_suit[suit] = by_suit.get(suit, 0) + qty

    return DeckStats(
        total_cards=total,
        unique_cards=len(deck),
        average_intel=_weighted_average(intel_sum, total),
        average_strength=_weighted_average(strength_sum, total),
        counts_by_type=by_type,
        counts_by_trigger=by_trigger,
        counts_by_suit=by_suit,
    )
