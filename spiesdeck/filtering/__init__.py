"""
Catalog filtering.

Multi-criteria predicate over the card catalog.
"""

from spiesdeck.filtering.catalog_filter import card_matches, filter_catalog

__all__ = [
    "card_matches",
    "filter_catalog",
]
