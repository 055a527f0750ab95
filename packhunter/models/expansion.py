from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from packhunter.models.card import Card


@dataclass(frozen=True)
class Expansion:
    """
    A released set of cards with its packs and offering-rate regime.

    Attributes:
        id: Key used in data files and collections (e.g., "genetic_apex")
        name: Display name
        pack_names: Ordered pack names. Empty when the expansion is sold
            as a single pack.
        offering_rate_table: Name of the OfferingRateTable it draws with
        cards: Card number -> Card
    """

    id: str
    name: str
    offering_rate_table: str
    pack_names: tuple[str, ...] = ()
    cards: Mapping[int, Card] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pack_names", tuple(self.pack_names))
        object.__setattr__(self, "cards", MappingProxyType(dict(self.cards)))

    @property
    def has_packs(self) -> bool:
        """True if the expansion is split into named packs."""
        return bool(self.pack_names)

    def cards_in(self, pack_name: str | None = None) -> list[Card]:
        """
        Cards that can be pulled from a pack, ordered by number.

        Args:
            pack_name: Pack to restrict to. None returns the whole expansion.
        """
        cards = sorted(self.cards.values(), key=lambda c: c.number)
        if pack_name is None:
            return cards
        return [card for card in cards if card.in_pack(pack_name)]

    def pools(self) -> Iterator[tuple[str | None, list[Card]]]:
        """
        Iterate over (pack name, cards) for every openable pack.

        An expansion without named packs yields a single (None, all cards).
        """
        if not self.pack_names:
            yield None, self.cards_in(None)
            return
        for pack_name in self.pack_names:
            yield pack_name, self.cards_in(pack_name)


def cards_in(expansion: Expansion, pack_name: str | None = None) -> list[Card]:
    """Cards of `expansion` restricted to `pack_name` (all cards when None)."""
    return expansion.cards_in(pack_name)
