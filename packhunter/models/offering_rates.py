from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from packhunter.models.rarity import Rarity


@dataclass(frozen=True)
class OfferingRateTable:
    """
    Per-rarity offering rates for the two rare slots of a pack.

    Slots 4 and 5 pick a rarity according to these rates. A rarity missing
    from a slot's mapping is never offered there, so lookups default to 0.0.

    Attributes:
        name: Table name referenced by expansions
        fourth_card: Rarity -> probability for the 4th card
        fifth_card: Rarity -> probability for the 5th card
    """

    name: str
    fourth_card: Mapping[Rarity, float] = field(default_factory=dict)
    fifth_card: Mapping[Rarity, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mappings so a shared table cannot be altered by a caller
        object.__setattr__(self, "fourth_card", MappingProxyType(dict(self.fourth_card)))
        object.__setattr__(self, "fifth_card", MappingProxyType(dict(self.fifth_card)))

    def fourth_card_rate(self, rarity: Rarity) -> float:
        """Probability that the 4th card is of `rarity`."""
        return self.fourth_card.get(rarity, 0.0)

    def fifth_card_rate(self, rarity: Rarity) -> float:
        """Probability that the 5th card is of `rarity`."""
        return self.fifth_card.get(rarity, 0.0)

    def fourth_card_total(self) -> float:
        """Sum of all 4th card rates."""
        return sum(self.fourth_card.values())

    def fifth_card_total(self) -> float:
        """Sum of all 5th card rates."""
        return sum(self.fifth_card.values())
