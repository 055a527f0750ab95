from packhunter.parsers.catalog import load_cards, load_catalog, parse_packs
from packhunter.parsers.collection_import import (
    load_collection,
    parse_collection_data,
    parse_number_entry,
)
from packhunter.parsers.offering_rates import check_offering_rates, load_offering_rates

__all__ = [
    "check_offering_rates",
    "load_cards",
    "load_catalog",
    "load_collection",
    "load_offering_rates",
    "parse_collection_data",
    "parse_number_entry",
    "parse_packs",
]
