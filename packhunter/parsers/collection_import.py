"""
Parser for collection files.

A collection file is TOML mapping expansion ids to owned card numbers:

    genetic_apex = [1, 2, 3, "10-14", 226]
    mythical_island = ["1-20"]

Entries may be single numbers or inclusive "start-end" ranges.
"""

import logging
import re
from pathlib import Path

from pydantic import StrictInt, TypeAdapter, ValidationError

from packhunter.models.collection import Collection
from packhunter.models.failure import ConfigParseError
from packhunter.parsers.sources import describe_validation_error, read_toml

logger = logging.getLogger(__name__)

# Pattern: "10-14" or "10 - 14"
# Groups: (start, end)
RANGE_PATTERN = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")

_COLLECTION_ADAPTER = TypeAdapter(dict[str, list[StrictInt | str]])


def parse_number_entry(entry: int | str) -> set[int]:
    """
    Expand one collection entry into card numbers.

    Accepts:
        - 12
        - "12"
        - "10-14"

    Raises:
        ValueError: If the entry is neither a number nor a valid range
    """
    if isinstance(entry, int):
        return {entry}

    text = entry.strip()
    if text.isdigit():
        return {int(text)}

    match = RANGE_PATTERN.match(text)
    if not match:
        raise ValueError(f"invalid card number or range \"{entry}\"")

    start, end = int(match.group(1)), int(match.group(2))
    if start > end:
        raise ValueError(f"range \"{entry}\" ends before it starts")
    return set(range(start, end + 1))


def parse_collection_data(data: object, source: Path | str = "<collection>") -> Collection:
    """
    Build a Collection from decoded collection data.

    Args:
        data: Decoded mapping of expansion id -> list of entries
        source: Where the data came from, used in error messages

    Raises:
        ConfigParseError: If the structure or an entry is invalid
    """
    try:
        raw = _COLLECTION_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise ConfigParseError(source, describe_validation_error(e)) from e

    owned: dict[str, set[int]] = {}
    for expansion_id, entries in raw.items():
        numbers: set[int] = set()
        for entry in entries:
            try:
                numbers |= parse_number_entry(entry)
            except ValueError as e:
                raise ConfigParseError(source, f"[{expansion_id}] {e}") from e
        owned[expansion_id] = numbers

    return Collection.from_dict(owned)


def load_collection(path: Path) -> Collection:
    """
    Load a player's collection from a TOML file.

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigParseError: If the file is malformed
    """
    collection = parse_collection_data(read_toml(path, "collection file"), path)
    logger.info(
        "Loaded %d owned cards across %d expansions from %s",
        collection.total_cards(),
        len(collection.owned),
        path,
    )
    return collection
