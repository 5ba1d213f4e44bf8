from dataclasses import dataclass
from enum import Enum


class CardType(str, Enum):
    """Card type. Every card has exactly one."""

    AGENT = "Agent"
    ITEM = "Item"
    ORDER = "Order"
    FACILITY = "Facility"


class CardSuit(str, Enum):
    """Thematic suit. Cards carry one or two."""

    CHARM = "Charm"
    COMBAT = "Combat"
    SEARCH = "Search"
    STEALTH = "Stealth"
    SYSTEM = "System"
    TRANSPORT = "Transport"


class CardSubtype(str, Enum):
    ANIMAL = "Animal"
    BUSINESS = "Business"
    CRIME = "Crime"
    GADGET = "Gadget"
    LAW = "Law"
    MILITARY = "Military"
    POLITICS = "Politics"
    PRESS = "Press"
    SCIENCE = "Science"
    VEHICLE = "Vehicle"


class CardTrigger(str, Enum):
    """Timing keyword governing when a card's effect resolves."""

    AMBUSH = "Ambush"
    COMPLETE = "Complete"
    FLIP = "Flip"
    PAYOFF = "Payoff"
    NONE = "None"


@dataclass(frozen=True, slots=True)
class Card:
    """
    A catalog card. Immutable once loaded.

    Attributes:
        id: Unique identifier, stable across sessions (used in deck codes)
        name: Display name
        type: Card type
        suits: One or two distinct suits, in display order
        subtypes: Zero or more distinct subtypes, in display order
        intel: Intel value (0-10)
        strength: Strength value (0-10)
        trigger: Trigger keyword (CardTrigger.NONE when the card has none)
        description: Card text / ability
        image: Opaque image reference, not interpreted
    """

    id: str
    name: str
    type: CardType
    suits: tuple[CardSuit, ...]
    subtypes: tuple[CardSubtype, ...] = ()
    intel: int = 0
    strength: int = 0
    trigger: CardTrigger = CardTrigger.NONE
    description: str = ""
    image: str = ""
