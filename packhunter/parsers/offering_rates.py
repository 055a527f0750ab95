"""
Offering rate table loader.

Reads data/offering_rates.toml, which holds one table per rate regime:

    [standard.fourth_card]
    "♢♢" = 0.9
    ...

    [standard.fifth_card]
    "♢♢" = 0.6
    ...

Rarities left out of a slot are never offered in that slot.
"""

import logging
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, ValidationError

from packhunter.models.failure import ConfigParseError
from packhunter.models.offering_rates import OfferingRateTable
from packhunter.models.rarity import Rarity
from packhunter.parsers.sources import describe_validation_error, read_toml

logger = logging.getLogger(__name__)

Rate = Annotated[float, Field(ge=0.0, le=1.0)]


class OfferingRateRecord(BaseModel):
    """Raw offering rate table as written in the TOML file."""

    fourth_card: dict[str, Rate] = Field(
        default_factory=dict,
        description="Rarity literal -> probability for the 4th card",
    )
    fifth_card: dict[str, Rate] = Field(
        default_factory=dict,
        description="Rarity literal -> probability for the 5th card",
    )


def _to_rarity_map(rates: dict[str, float]) -> dict[Rarity, float]:
    return {Rarity.from_literal(literal): rate for literal, rate in rates.items()}


def build_offering_rate_table(name: str, record: OfferingRateRecord) -> OfferingRateTable:
    """
    Convert a validated record into an OfferingRateTable.

    Raises:
        UnknownRarityError: If a rarity literal is not recognised
    """
    return OfferingRateTable(
        name=name,
        fourth_card=_to_rarity_map(record.fourth_card),
        fifth_card=_to_rarity_map(record.fifth_card),
    )


def load_offering_rates(path: Path) -> dict[str, OfferingRateTable]:
    """
    Load every offering rate table from a TOML file.

    Args:
        path: Path to offering_rates.toml

    Returns:
        Dict mapping table name to OfferingRateTable.

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigParseError: If the file or a table is malformed
        UnknownRarityError: If a table uses an unknown rarity literal
    """
    raw = read_toml(path, "offering rates file")

    tables: dict[str, OfferingRateTable] = {}
    for name, value in raw.items():
        try:
            record = OfferingRateRecord.model_validate(value)
        except ValidationError as e:
            raise ConfigParseError(path, f"[{name}] {describe_validation_error(e)}") from e
        tables[name] = build_offering_rate_table(name, record)

    logger.info("Loaded %d offering rate tables from %s", len(tables), path)
    return tables


def check_offering_rates(
    tables: dict[str, OfferingRateTable],
    tolerance: float = 1e-6,
) -> list[str]:
    """
    Report table slots whose rates do not sum to 1.

    The calculator never requires this; it is a data quality check run on
    demand over the loaded tables.

    Args:
        tables: Loaded offering rate tables
        tolerance: Allowed absolute drift from 1.0

    Returns:
        One message per offending slot, empty if all tables are consistent.
    """
    problems: list[str] = []
    for name, table in tables.items():
        for slot, total in (
            ("fourth_card", table.fourth_card_total()),
            ("fifth_card", table.fifth_card_total()),
        ):
            if abs(total - 1.0) > tolerance:
                problems.append(f"{name}.{slot} rates sum to {total:.6f}, expected 1.0")
    return problems
