from collections.abc import Callable
from pathlib import Path

import pytest

from packhunter.models.card import Card
from packhunter.models.expansion import Expansion
from packhunter.models.offering_rates import OfferingRateTable
from packhunter.models.rarity import Rarity

BUNDLED_DATA_DIR = Path(__file__).parent.parent / "data"


@pytest.fixture
def simple_rates() -> OfferingRateTable:
    """Two-rarity table used by the worked example."""
    return OfferingRateTable(
        name="simple",
        fourth_card={Rarity.ONE_DIAMOND: 0.9, Rarity.TWO_DIAMONDS: 0.1},
        fifth_card={Rarity.ONE_DIAMOND: 0.6, Rarity.TWO_DIAMONDS: 0.4},
    )


@pytest.fixture
def simple_pool() -> list[Card]:
    """Three cards: two OneDiamond, one TwoDiamonds."""
    return [
        Card(name="Bulbasaur", number=1, rarity=Rarity.ONE_DIAMOND, packs=frozenset({"Mewtwo"})),
        Card(name="Caterpie", number=2, rarity=Rarity.ONE_DIAMOND, packs=frozenset({"Pikachu"})),
        Card(
            name="Ivysaur",
            number=3,
            rarity=Rarity.TWO_DIAMONDS,
            packs=frozenset({"Mewtwo", "Pikachu"}),
        ),
    ]


@pytest.fixture
def sample_expansion(simple_pool: list[Card]) -> Expansion:
    """Expansion with two packs built from simple_pool."""
    return Expansion(
        id="test_set",
        name="Test Set",
        offering_rate_table="simple",
        pack_names=("Mewtwo", "Pikachu"),
        cards={card.number: card for card in simple_pool},
    )


@pytest.fixture
def write_data_dir(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory writing a data directory to tmp_path.

    Call with expansions.toml text, offering_rates.toml text and a
    mapping of expansion id -> CSV text.
    """

    def _write(
        expansions: str,
        offering_rates: str,
        cards: dict[str, str],
    ) -> Path:
        data_dir = tmp_path / "data"
        (data_dir / "cards").mkdir(parents=True, exist_ok=True)
        (data_dir / "expansions.toml").write_text(expansions, encoding="utf-8")
        (data_dir / "offering_rates.toml").write_text(offering_rates, encoding="utf-8")
        for expansion_id, text in cards.items():
            (data_dir / "cards" / f"{expansion_id}.csv").write_text(text, encoding="utf-8")
        return data_dir

    return _write


SIMPLE_RATES_TOML = """
[simple.fourth_card]
"♢" = 0.9
"♢♢" = 0.1

[simple.fifth_card]
"♢" = 0.6
"♢♢" = 0.4
"""

SIMPLE_EXPANSIONS_TOML = """
[test_set]
name = "Test Set"
packs = ["Mewtwo", "Pikachu"]
offering_rate_table = "simple"

[promo_set]
name = "Promo Set"
offering_rate_table = "simple"
"""

TEST_SET_CSV = """name,number,rarity,packs
Bulbasaur,1,♢,Mewtwo
Caterpie,2,♢,Pikachu
Ivysaur,3,♢♢,Mewtwo|Pikachu
"""

PROMO_SET_CSV = """name,number,rarity,packs
Pidgey,1,♢,
Pidgeotto,2,♢♢,
"""


@pytest.fixture
def simple_data_dir(write_data_dir: Callable[..., Path]) -> Path:
    """Valid data directory with a two-pack expansion and a packless one."""
    return write_data_dir(
        SIMPLE_EXPANSIONS_TOML,
        SIMPLE_RATES_TOML,
        {"test_set": TEST_SET_CSV, "promo_set": PROMO_SET_CSV},
    )


@pytest.fixture
def simple_rates_toml() -> str:
    return SIMPLE_RATES_TOML


@pytest.fixture
def test_set_csv() -> str:
    return TEST_SET_CSV


@pytest.fixture
def bundled_data_dir() -> Path:
    """The data directory shipped with the project."""
    return BUNDLED_DATA_DIR
