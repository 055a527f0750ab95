"""
Services for loading data and rendering results.

Provides:
- load_all: Load offering rates, catalog and collection in one call
- format_odds_table: Render ranked pack odds for the console
"""

from packhunter.services.data_loader import LoadedData, load_all
from packhunter.services.odds_formatter import format_odds_table, format_probability

__all__ = [
    "LoadedData",
    "format_odds_table",
    "format_probability",
    "load_all",
]
