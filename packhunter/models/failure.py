"""
Failure Classification.

Every error the engine can raise is a PackHunterError carrying a
FailureKind. There is no local recovery: loaders and the calculator raise,
and the CLI is the single place that reports the failure and exits.

Failure kinds:
- CONFIG_NOT_FOUND: a catalog, offering-rate or collection source is missing
- CONFIG_PARSE: a source exists but is malformed
- UNKNOWN_RARITY: a rarity literal outside the closed enumeration
- UNRESOLVED_OFFERING_TABLE: an expansion names a table that was not loaded
- EMPTY_CARD_POOL: the calculator was handed no cards
"""

from enum import Enum
from pathlib import Path


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Source failures
    CONFIG_NOT_FOUND = "config_not_found"
    CONFIG_PARSE = "config_parse"

    # Data integrity failures
    UNKNOWN_RARITY = "unknown_rarity"
    UNRESOLVED_OFFERING_TABLE = "unresolved_offering_table"

    # Caller errors
    EMPTY_CARD_POOL = "empty_card_pool"


class PackHunterError(Exception):
    """
    Base class for all known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def describe(self) -> str:
        """Render message, detail and suggestion as one block of text."""
        lines = [self.message]
        if self.detail:
            lines.append(f"  {self.detail}")
        if self.suggestion:
            lines.append(f"  Hint: {self.suggestion}")
        return "\n".join(lines)


class ConfigNotFoundError(PackHunterError):
    """Raised when a required data file does not exist."""

    def __init__(self, path: Path, what: str):
        self.path = path
        super().__init__(
            kind=FailureKind.CONFIG_NOT_FOUND,
            message=f"Failed to open {what} (located at \"{path}\")",
            suggestion="Check the --data-dir option or the file path.",
        )


class ConfigParseError(PackHunterError):
    """Raised when a data file is structurally malformed."""

    def __init__(self, source: Path | str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(
            kind=FailureKind.CONFIG_PARSE,
            message=f"Failed to parse \"{source}\": {reason}",
        )


class UnknownRarityError(PackHunterError):
    """
    Raised when a rarity literal is not part of the closed enumeration.

    Never fall back to a default rarity: the accepted literals are carried
    so the offending catalog row can be fixed.
    """

    def __init__(self, literal: str, accepted: tuple[str, ...]):
        self.literal = literal
        self.accepted = accepted
        super().__init__(
            kind=FailureKind.UNKNOWN_RARITY,
            message=f"Unknown rarity \"{literal}\"",
            detail=f"Expected one of: {', '.join(accepted)}",
        )


class UnresolvedOfferingTableError(PackHunterError):
    """Raised when an expansion references an offering-rate table that is not loaded."""

    def __init__(self, expansion_id: str, table_name: str, available: list[str]):
        self.expansion_id = expansion_id
        self.table_name = table_name
        super().__init__(
            kind=FailureKind.UNRESOLVED_OFFERING_TABLE,
            message=(
                f"Expansion \"{expansion_id}\" references unknown offering rate table "
                f"\"{table_name}\""
            ),
            detail=f"Loaded tables: {', '.join(sorted(available)) or '(none)'}",
        )


class EmptyCardPoolError(PackHunterError):
    """
    Raised when the probability calculator receives no cards.

    This is a programming error in the caller, not user-recoverable.
    """

    def __init__(self, label: str | None = None):
        where = f" for {label}" if label else ""
        super().__init__(
            kind=FailureKind.EMPTY_CARD_POOL,
            message=f"Cannot compute new-card probability{where}: card pool is empty",
        )
