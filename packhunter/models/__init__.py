from packhunter.models.card import Card
from packhunter.models.collection import Collection
from packhunter.models.expansion import Expansion, cards_in
from packhunter.models.failure import (
    ConfigNotFoundError,
    ConfigParseError,
    EmptyCardPoolError,
    FailureKind,
    PackHunterError,
    UnknownRarityError,
    UnresolvedOfferingTableError,
)
from packhunter.models.offering_rates import OfferingRateTable
from packhunter.models.rarity import COMMON_RARITY, RARITY_LITERALS, Rarity

__all__ = [
    "COMMON_RARITY",
    "Card",
    "Collection",
    "ConfigNotFoundError",
    "ConfigParseError",
    "EmptyCardPoolError",
    "Expansion",
    "FailureKind",
    "OfferingRateTable",
    "PackHunterError",
    "RARITY_LITERALS",
    "Rarity",
    "UnknownRarityError",
    "UnresolvedOfferingTableError",
    "cards_in",
]
