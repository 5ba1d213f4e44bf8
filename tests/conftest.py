import pytest

from spiesdeck.models.card import Card, CardSubtype, CardSuit, CardTrigger, CardType


@pytest.fixture
def agent_card() -> Card:
    return Card(
        id="1",
        name="Example Agent",
        type=CardType.AGENT,
        suits=(CardSuit.COMBAT,),
        subtypes=(CardSubtype.MILITARY,),
        intel=5,
        strength=7,
        trigger=CardTrigger.AMBUSH,
        description="PLAY: Deal 2 damage",
    )


@pytest.fixture
def item_card() -> Card:
    return Card(
        id="2",
        name="Example Gadget",
        type=CardType.ITEM,
        suits=(CardSuit.SYSTEM,),
        subtypes=(CardSubtype.GADGET, CardSubtype.SCIENCE),
        intel=3,
        strength=0,
        trigger=CardTrigger.PAYOFF,
        description="ATTACH: Target agent gains +2 Strength",
    )


@pytest.fixture
def spy_card() -> Card:
    """Dual-suit card."""
    return Card(
        id="3",
        name="Example Spy",
        type=CardType.AGENT,
        suits=(CardSuit.STEALTH, CardSuit.SYSTEM),
        subtypes=(CardSubtype.CRIME, CardSubtype.SCIENCE),
        intel=6,
        strength=4,
        trigger=CardTrigger.COMPLETE,
        description="FLIP: Draw two cards",
    )


@pytest.fixture
def facility_card() -> Card:
    return Card(
        id="4",
        name="Safe House",
        type=CardType.FACILITY,
        suits=(CardSuit.STEALTH,),
        intel=4,
        strength=3,
        trigger=CardTrigger.NONE,
        description="Agents here cannot be targeted",
    )


@pytest.fixture
def catalog(agent_card, item_card, spy_card, facility_card) -> tuple[Card, ...]:
    return (agent_card, item_card, spy_card, facility_card)
