from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "S.P.I.E.S. Deckbuilder"
    debug: bool = False

    # JSON card catalog. None uses the catalog bundled with the package.
    catalog_path: Path | None = None

    # Maximum copies of a single card in a deck.
    # Also the upper bound for quantities in an imported deck code.
    max_copies_per_card: int = Field(default=2, ge=1)

    # Advisory deck size, shown in summaries but never enforced on add
    deck_size_target: int = Field(default=30, ge=1)

    default_deck_title: str = "My Deck"


settings = Settings()


# =============================================================================
# DECK POLICY
# =============================================================================

# Defaults for code that does not take settings explicitly
MAX_COPIES_PER_CARD = settings.max_copies_per_card
DECK_SIZE_TARGET = settings.deck_size_target

# Inclusive bounds for Intel and Strength
STAT_MIN = 0
STAT_MAX = 10

# Bundled catalog location
DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "cards.json"
