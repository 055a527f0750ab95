from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PACKHUNTER_")

    log_level: str = "WARNING"

    # Holds expansions.toml, offering_rates.toml and cards/<expansion_id>.csv
    data_dir: Path = Path("data")

    collection_path: Path = Path("collection.toml")

    # Allowed drift when checking that a slot's offering rates sum to 1
    rate_sum_tolerance: float = 1e-6


settings = Settings()


# =============================================================================
# DATA FILE LAYOUT
# =============================================================================

EXPANSIONS_FILE = "expansions.toml"
OFFERING_RATES_FILE = "offering_rates.toml"
CARDS_DIR = "cards"

# Separator between pack names in the card CSV "packs" column
PACK_SEPARATOR = "|"
