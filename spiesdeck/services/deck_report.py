"""
Deck Report Formatter.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.

Produces the human-readable deck report used for download and clipboard
export. The report is not meant to be parsed back, except for the deck code
line at the end.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from itertools import groupby

from spiesdeck.config import DECK_SIZE_TARGET
from spiesdeck.models.card import CardTrigger
from spiesdeck.models.deck import Deck, DeckEntry, DeckStats

TITLE_RULE = "=" * 50
SECTION_RULE = "-" * 30

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def format_report_date(day: date) -> str:
    """Long US-style date, e.g. "October 19, 2026"."""
    return f"{day:%B} {day.day}, {day.year}"


def format_deck_report(
    deck: Deck,
    stats: DeckStats,
    code: str,
    title: str = "My Deck",
    generated_on: date | None = None,
    deck_size_target: int = DECK_SIZE_TARGET,
) -> str | None:
    """
    Render a deck as a plain-text report.

    Cards are grouped by type (groups in alphabetical order) and sorted by
    Intel, then name, within each group. The deck code closes the report.

    Args:
        deck: Deck snapshot to render
        stats: Statistics computed for the same snapshot
        code: Deck code for the same snapshot
        title: Report heading
        generated_on: Date shown in the heading (defaults to today)
        deck_size_target: Advisory deck size shown next to the total

    Returns:
        Report text, or None for an empty deck
    """
    if deck.is_empty:
        return None

    generated_on = generated_on or date.today()

    lines: list[str] = [
        f"{title} - {format_report_date(generated_on)}",
        TITLE_RULE,
        "",
        f"Total Cards: {stats.total_cards} / {deck_size_target}",
        f"Average Intel: {stats.average_intel:.1f}",
        "",
        f"Average Strength: {stats.average_strength:.1f}",
        "",
    ]

    by_type = sorted(deck, key=lambda e: e.card.type.value)
    for type_name, group in groupby(by_type, key=lambda e: e.card.type.value):
        entries = sorted(group, key=_card_order)
        type_count = sum(e.quantity for e in entries)
        lines.append(f"{type_name.upper()} ({type_count})")
        lines.append(SECTION_RULE)
        for entry in entries:
            lines.extend(_format_entry(entry))
        lines.append("")

    lines.append("")
    lines.append("Deck Code:")
    lines.append(code)

    return "\n".join(lines) + "\n"


def _card_order(entry: DeckEntry) -> tuple[int, str, str]:
    """Ascending Intel, then name (case-insensitive)."""
    return entry.card.intel, entry.card.name.casefold(), entry.card.name


def _format_entry(entry: DeckEntry) -> list[str]:
    """Format one card as its report lines."""
    card = entry.card
    suits_text = "/".join(suit.value for suit in card.suits)
    subtypes_text = (
        f" [{', '.join(subtype.value for subtype in card.subtypes)}]" if card.subtypes else ""
    )

    lines = [
        f"{entry.quantity}x {card.name} ({card.intel} {suits_text}){subtypes_text}",
        f"    Strength: {card.strength} - {card.description}",
    ]
    if card.trigger is not CardTrigger.NONE:
        lines.append(f"    Trigger: {card.trigger.value}")
    return lines


def report_filename(title: str, when: datetime | None = None) -> str:
    """
    Download filename for a report, e.g. "my_deck-1760899200000.txt".

    Non-alphanumeric characters in the title become underscores.
    """
    when = when or datetime.now()
    safe_title = _UNSAFE_FILENAME_CHARS.sub("_", title).lower()
    return f"{safe_title}-{int(when.timestamp() * 1000)}.txt"
