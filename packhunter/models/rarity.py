from enum import Enum

from packhunter.models.failure import UnknownRarityError


class Rarity(str, Enum):
    """
    Card rarity tiers, declared from most common to most scarce.

    Members compare by tier, so sorting a list of rarities puts
    OneDiamond first and Crown last.
    """

    ONE_DIAMOND = "one_diamond"
    TWO_DIAMONDS = "two_diamonds"
    THREE_DIAMONDS = "three_diamonds"
    FOUR_DIAMONDS = "four_diamonds"
    ONE_STAR = "one_star"
    TWO_STARS = "two_stars"
    THREE_STARS = "three_stars"
    ONE_SHINY = "one_shiny"
    TWO_SHINIES = "two_shinies"
    CROWN = "crown"

    @property
    def tier(self) -> int:
        """Zero-based position from most common."""
        return _TIERS[self]

    @property
    def literal(self) -> str:
        """Symbol used for this rarity in catalog and rate files."""
        return _TO_LITERAL[self]

    @classmethod
    def from_literal(cls, literal: str) -> "Rarity":
        """
        Parse a catalog literal such as "♢♢" or "☆".

        Raises:
            UnknownRarityError: If the literal is not recognised
        """
        try:
            return _FROM_LITERAL[literal]
        except KeyError:
            raise UnknownRarityError(literal, RARITY_LITERALS) from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.tier < other.tier

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.tier <= other.tier

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.tier > other.tier

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.tier >= other.tier


_TO_LITERAL: dict[Rarity, str] = {
    Rarity.ONE_DIAMOND: "♢",
    Rarity.TWO_DIAMONDS: "♢♢",
    Rarity.THREE_DIAMONDS: "♢♢♢",
    Rarity.FOUR_DIAMONDS: "♢♢♢♢",
    Rarity.ONE_STAR: "☆",
    Rarity.TWO_STARS: "☆☆",
    Rarity.THREE_STARS: "☆☆☆",
    Rarity.ONE_SHINY: "✵",
    Rarity.TWO_SHINIES: "✵✵",
    Rarity.CROWN: "♕",
}

_FROM_LITERAL: dict[str, Rarity] = {literal: rarity for rarity, literal in _TO_LITERAL.items()}

_TIERS: dict[Rarity, int] = {rarity: index for index, rarity in enumerate(Rarity)}

# Accepted literals in tier order, reported by UnknownRarityError
RARITY_LITERALS: tuple[str, ...] = tuple(_TO_LITERAL[rarity] for rarity in Rarity)

# Rarity drawn for the first three slots of every pack
COMMON_RARITY = Rarity.ONE_DIAMOND
