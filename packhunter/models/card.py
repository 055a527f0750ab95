from dataclasses import dataclass, field

from packhunter.models.rarity import Rarity


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single card of an expansion.

    Attributes:
        name: Card name as printed
        number: Collector number, unique within its expansion
        rarity: Rarity tier
        packs: Names of the packs the card can be pulled from.
            Empty for promo-style cards that are in no pack.
    """

    name: str
    number: int
    rarity: Rarity
    packs: frozenset[str] = field(default_factory=frozenset)

    def in_pack(self, pack_name: str) -> bool:
        """Check if the card can be pulled from `pack_name`."""
        return pack_name in self.packs
