"""
Catalog filtering.

Applies a FilterState to the card catalog. All criteria are ANDed together;
values within a multi-valued criterion (types, suits, subtypes, triggers)
are ORed. Pure functions, no side effects, catalog order preserved.
"""

from collections.abc import Iterable

from spiesdeck.models.card import Card
from spiesdeck.models.filters import FilterState


def card_matches(card: Card, filters: FilterState) -> bool:
    """Return True if the card satisfies every criterion of the filter."""
    # Name and text filters
    if filters.name_query and filters.name_query.lower() not in card.name.lower():
        return False

    if filters.effect_query and filters.effect_query.lower() not in card.description.lower():
        return False

    if filters.types and card.type not in filters.types:
        return False

    # Any of the card's suits may match
    if filters.suits and filters.suits.isdisjoint(card.suits):
        return False

    if filters.subtypes and filters.subtypes.isdisjoint(card.subtypes):
        return False

    if filters.triggers and card.trigger not in filters.triggers:
        return False

    strength_lo, strength_hi = filters.strength_range
    if not strength_lo <= card.strength <= strength_hi:
        return False

    intel_lo, intel_hi = filters.intel_range
    return intel_lo <= card.intel <= intel_hi


def filter_catalog(catalog: Iterable[Card], filters: FilterState) -> list[Card]:
    """
    Return the catalog cards matching the filter, in catalog order.

    Args:
        catalog: Card catalog (never modified)
        filters: Validated filter state

    Returns:
        Matching cards. An unconstrained filter returns every card.

    Examples:
        # Combat or Stealth agents
        >>> filter_catalog(catalog, FilterState(types={CardType.AGENT},
        ...                suits={CardSuit.COMBAT, CardSuit.STEALTH}))

        # Cheap cards that mention drawing
        >>> filter_catalog(catalog, FilterState(effect_query="draw", intel_range=(0, 3)))
    """
    if filters.is_unconstrained:
        return list(catalog)
    return [card for card in catalog if card_matches(card, filters)]
