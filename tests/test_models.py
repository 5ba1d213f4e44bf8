import pytest
from pydantic import ValidationError

from spiesdeck.models.card import Card, CardSuit, CardTrigger, CardType
from spiesdeck.models.deck import Deck, DeckEntry
from spiesdeck.models.filters import FULL_RANGE, FilterState


class TestCard:
    def test_card_creation(self, agent_card: Card) -> None:
        assert agent_card.id == "1"
        assert agent_card.type is CardType.AGENT
        assert agent_card.suits == (CardSuit.COMBAT,)

    def test_card_immutable(self, agent_card: Card) -> None:
        with pytest.raises(AttributeError):
            agent_card.intel = 3  # type: ignore[misc]

    def test_card_optional_fields(self) -> None:
        card = Card(id="x", name="Plain", type=CardType.ORDER, suits=(CardSuit.CHARM,))
        assert card.subtypes == ()
        assert card.trigger is CardTrigger.NONE
        assert card.image == ""


class TestDeck:
    def test_empty_deck(self) -> None:
        deck = Deck()
        assert deck.is_empty
        assert deck.total_cards() == 0
        assert len(deck) == 0

    def test_quantity_of_missing_card(self, agent_card: Card) -> None:
        deck = Deck(entries=(DeckEntry(card=agent_card, quantity=2),))
        assert deck.quantity_of("1") == 2
        assert deck.quantity_of("nope") == 0

    def test_contains(self, agent_card: Card) -> None:
        deck = Deck(entries=(DeckEntry(card=agent_card, quantity=1),))
        assert "1" in deck
        assert "2" not in deck

    def test_total_cards(self, agent_card: Card, item_card: Card) -> None:
        deck = Deck(
            entries=(
                DeckEntry(card=agent_card, quantity=2),
                DeckEntry(card=item_card, quantity=1),
            )
        )
        assert deck.total_cards() == 3
        assert deck.to_quantities() == {"1": 2, "2": 1}

    def test_entry_requires_positive_quantity(self, agent_card: Card) -> None:
        with pytest.raises(ValueError):
            DeckEntry(card=agent_card, quantity=0)

    def test_duplicate_entries_rejected(self, agent_card: Card) -> None:
        with pytest.raises(ValueError):
            Deck(
                entries=(
                    DeckEntry(card=agent_card, quantity=1),
                    DeckEntry(card=agent_card, quantity=1),
                )
            )


class TestFilterState:
    def test_defaults_are_unconstrained(self) -> None:
        filters = FilterState()
        assert filters.is_unconstrained
        assert filters.strength_range == FULL_RANGE
        assert filters.intel_range == FULL_RANGE

    def test_any_constraint_is_detected(self) -> None:
        assert not FilterState(name_query="spy").is_unconstrained
        assert not FilterState(suits={CardSuit.CHARM}).is_unconstrained
        assert not FilterState(intel_range=(0, 9)).is_unconstrained

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FilterState(strength_range=(6, 2))

    def test_out_of_bounds_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FilterState(intel_range=(0, 11))
        with pytest.raises(ValidationError):
            FilterState(intel_range=(-1, 5))

    def test_unknown_enum_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FilterState(types={"Vehicle"})

    def test_accepts_raw_strings_for_enums(self) -> None:
        filters = FilterState(types=["Agent"], triggers=["None"])
        assert filters.types == frozenset({CardType.AGENT})
        assert filters.triggers == frozenset({CardTrigger.NONE})

    def test_frozen(self) -> None:
        filters = FilterState()
        with pytest.raises(ValidationError):
            filters.name_query = "x"  # type: ignore[misc]
