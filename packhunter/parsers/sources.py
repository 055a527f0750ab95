"""
Shared readers for on-disk data sources.

Every loader goes through these helpers so that a missing file always
surfaces as ConfigNotFoundError and a malformed one as ConfigParseError.
"""

import csv
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from packhunter.models.failure import ConfigNotFoundError, ConfigParseError


def read_toml(path: Path, what: str) -> dict[str, Any]:
    """
    Read and decode a TOML file.

    Args:
        path: File to read
        what: Human description used in error messages (e.g., "expansions file")

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigParseError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(path, what)

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(path, str(e)) from e


def read_csv_rows(path: Path, what: str, required_columns: set[str]) -> list[dict[str, str]]:
    """
    Read a headed CSV file into a list of row dicts.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigParseError: If the header is missing required columns
    """
    if not path.is_file():
        raise ConfigNotFoundError(path, what)

    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            fieldnames = [name.strip() for name in reader.fieldnames or []]
            missing = required_columns - set(fieldnames)
            if missing:
                raise ConfigParseError(path, f"Missing columns: {', '.join(sorted(missing))}")
            return [
                {key.strip(): (value or "") for key, value in row.items() if key is not None}
                for row in reader
            ]
    except (csv.Error, UnicodeDecodeError) as e:
        raise ConfigParseError(path, str(e)) from e


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single line."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "(root)"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
