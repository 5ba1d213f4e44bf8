"""
Catalog filter configuration.

FilterState is validated at construction. A range with lo > hi, a bound
outside the stat range, or an unknown enum value raises a pydantic
ValidationError instead of producing a filter that silently matches nothing.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spiesdeck.config import STAT_MAX, STAT_MIN
from spiesdeck.models.card import CardSubtype, CardSuit, CardTrigger, CardType

StatRange = tuple[int, int]

FULL_RANGE: StatRange = (STAT_MIN, STAT_MAX)


class FilterState(BaseModel):
    """
    Multi-criteria catalog query.

    Fields are ANDed together; values inside a multi-valued field are ORed.
    An empty string or empty set places no constraint on that field.
    """

    model_config = ConfigDict(frozen=True)

    name_query: str = Field(
        default="",
        description="Case-insensitive substring matched against the card name",
    )
    effect_query: str = Field(
        default="",
        description="Case-insensitive substring matched against the card description",
    )
    types: frozenset[CardType] = Field(default_factory=frozenset)
    suits: frozenset[CardSuit] = Field(default_factory=frozenset)
    subtypes: frozenset[CardSubtype] = Field(default_factory=frozenset)
    triggers: frozenset[CardTrigger] = Field(default_factory=frozenset)
    strength_range: StatRange = Field(
        default=FULL_RANGE,
        description="Inclusive Strength bounds (lo, hi)",
    )
    intel_range: StatRange = Field(
        default=FULL_RANGE,
        description="Inclusive Intel bounds (lo, hi)",
    )

    @field_validator("strength_range", "intel_range")
    @classmethod
    def _check_range(cls, value: StatRange) -> StatRange:
        lo, hi = value
        if not STAT_MIN <= lo <= hi <= STAT_MAX:
            raise ValueError(
                f"range must satisfy {STAT_MIN} <= lo <= hi <= {STAT_MAX}, got ({lo}, {hi})"
            )
        return value

    @property
    def is_unconstrained(self) -> bool:
        """True when this filter lets every card through."""
        return (
            not self.name_query
            and not self.effect_query
            and not self.types
            and not self.suits
            and not self.subtypes
            and not self.triggers
            and self.strength_range == FULL_RANGE
            and self.intel_range == FULL_RANGE
        )
