"""
Card catalog loader.

Layout under the data directory:
- expansions.toml: one table per expansion id with name, packs and
  offering_rate_table
- cards/<expansion_id>.csv: columns name,number,rarity,packs where packs is
  a "|"-joined list of pack names (empty for cards in no pack)

Loading is all-or-nothing. Any missing file, malformed row, unknown rarity
or unresolved offering rate table aborts the whole load.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from packhunter.config import CARDS_DIR, EXPANSIONS_FILE, PACK_SEPARATOR
from packhunter.models.card import Card
from packhunter.models.expansion import Expansion
from packhunter.models.failure import (
    ConfigParseError,
    UnknownRarityError,
    UnresolvedOfferingTableError,
)
from packhunter.models.offering_rates import OfferingRateTable
from packhunter.models.rarity import Rarity
from packhunter.parsers.sources import describe_validation_error, read_csv_rows, read_toml

logger = logging.getLogger(__name__)

CARD_COLUMNS = {"name", "number", "rarity"}


class ExpansionRecord(BaseModel):
    """Raw expansion entry from expansions.toml."""

    name: str = Field(..., description="Display name of the expansion")
    packs: list[str] = Field(
        default_factory=list,
        description="Ordered pack names, empty when sold as a single pack",
    )
    offering_rate_table: str = Field(..., description="Name of the offering rate table")


class CardRecord(BaseModel):
    """Raw card row from cards/<expansion_id>.csv."""

    name: str = Field(..., min_length=1)
    number: int = Field(..., gt=0)
    rarity: str
    packs: str = ""


def parse_packs(packs: str) -> frozenset[str]:
    """
    Split a pack membership column into pack names.

    An empty column means the card is in no pack.
    """
    packs = packs.strip()
    if not packs:
        return frozenset()
    return frozenset(name.strip() for name in packs.split(PACK_SEPARATOR) if name.strip())


def card_from_record(record: CardRecord) -> Card:
    """
    Build a Card from a validated row.

    Raises:
        UnknownRarityError: If the rarity literal is not recognised
    """
    return Card(
        name=record.name,
        number=record.number,
        rarity=Rarity.from_literal(record.rarity.strip()),
        packs=parse_packs(record.packs),
    )


def load_cards(path: Path, expansion_name: str) -> dict[int, Card]:
    """
    Load the cards of one expansion.

    Args:
        path: Path to the expansion's CSV file
        expansion_name: Display name, used in error messages

    Returns:
        Dict mapping card number to Card.

    Raises:
        ConfigNotFoundError: If the CSV file doesn't exist
        ConfigParseError: If a row is malformed or a number is repeated
        UnknownRarityError: If a row has an unknown rarity literal
    """
    rows = read_csv_rows(path, f"\"{expansion_name}\" cards file", CARD_COLUMNS)

    cards: dict[int, Card] = {}
    # Row 1 is the header
    for line, row in enumerate(rows, start=2):
        try:
            record = CardRecord.model_validate(row)
        except ValidationError as e:
            raise ConfigParseError(path, f"line {line}: {describe_validation_error(e)}") from e

        try:
            card = card_from_record(record)
        except UnknownRarityError as e:
            e.detail = f"{path}, line {line}. {e.detail}"
            raise

        if card.number in cards:
            raise ConfigParseError(
                path,
                f"line {line}: duplicate card number {card.number} "
                f"(\"{cards[card.number].name}\" and \"{card.name}\")",
            )
        cards[card.number] = card

    return cards


def load_catalog(
    data_dir: Path,
    offering_rates: dict[str, OfferingRateTable],
) -> dict[str, Expansion]:
    """
    Load every expansion and its cards.

    Args:
        data_dir: Directory holding expansions.toml and cards/
        offering_rates: Loaded tables, used to resolve each expansion's
            offering_rate_table reference

    Returns:
        Dict mapping expansion id to Expansion, in file order.

    Raises:
        ConfigNotFoundError: If expansions.toml or a cards file is missing
        ConfigParseError: If any source is malformed
        UnknownRarityError: If a card has an unknown rarity literal
        UnresolvedOfferingTableError: If an expansion names a missing table
    """
    expansions_path = data_dir / EXPANSIONS_FILE
    raw = read_toml(expansions_path, "expansions file")

    catalog: dict[str, Expansion] = {}
    for expansion_id, value in raw.items():
        try:
            record = ExpansionRecord.model_validate(value)
        except ValidationError as e:
            raise ConfigParseError(
                expansions_path, f"[{expansion_id}] {describe_validation_error(e)}"
            ) from e

        if record.offering_rate_table not in offering_rates:
            raise UnresolvedOfferingTableError(
                expansion_id, record.offering_rate_table, list(offering_rates)
            )

        cards_path = data_dir / CARDS_DIR / f"{expansion_id}.csv"
        cards = load_cards(cards_path, record.name)

        known_packs = set(record.packs)
        for card in cards.values():
            unknown = card.packs - known_packs
            if unknown:
                logger.warning(
                    "%s #%d (%s) lists packs not declared for %s: %s",
                    record.name,
                    card.number,
                    card.name,
                    expansion_id,
                    ", ".join(sorted(unknown)),
                )

        catalog[expansion_id] = Expansion(
            id=expansion_id,
            name=record.name,
            offering_rate_table=record.offering_rate_table,
            pack_names=tuple(record.packs),
            cards=cards,
        )
        logger.info("Loaded %d cards for %s", len(cards), record.name)

    return catalog
