"""
Data loading service.

Loads the offering rate tables, the card catalog and a collection from
disk, in the order the catalog needs them.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from packhunter.config import OFFERING_RATES_FILE, settings
from packhunter.models.collection import Collection
from packhunter.models.expansion import Expansion
from packhunter.models.offering_rates import OfferingRateTable
from packhunter.parsers.catalog import load_catalog
from packhunter.parsers.collection_import import load_collection
from packhunter.parsers.offering_rates import load_offering_rates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedData:
    """Everything a ranking run needs, read-only after load."""

    offering_rates: dict[str, OfferingRateTable]
    catalog: dict[str, Expansion]
    collection: Collection


def load_static_data(
    data_dir: Path | None = None,
) -> tuple[dict[str, OfferingRateTable], dict[str, Expansion]]:
    """
    Load offering rates and the catalog.

    Args:
        data_dir: Data directory. Defaults to settings.data_dir

    Raises:
        PackHunterError: On any missing or malformed source
    """
    if data_dir is None:
        data_dir = settings.data_dir

    offering_rates = load_offering_rates(data_dir / OFFERING_RATES_FILE)
    catalog = load_catalog(data_dir, offering_rates)
    return offering_rates, catalog


def load_all(
    data_dir: Path | None = None,
    collection_path: Path | None = None,
) -> LoadedData:
    """
    Load offering rates, catalog and collection.

    Args:
        data_dir: Data directory. Defaults to settings.data_dir
        collection_path: Collection file. Defaults to settings.collection_path

    Raises:
        PackHunterError: On any missing or malformed source
    """
    if collection_path is None:
        collection_path = settings.collection_path

    offering_rates, catalog = load_static_data(data_dir)
    collection = load_collection(collection_path)

    logger.info(
        "Loaded %d expansions, %d offering rate tables",
        len(catalog),
        len(offering_rates),
    )
    return LoadedData(offering_rates=offering_rates, catalog=catalog, collection=collection)
