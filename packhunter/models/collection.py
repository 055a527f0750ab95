from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Collection:
    """
    A player's owned cards.

    Cards are stored as owned collector numbers per expansion id.
    A number that is not listed is not owned. Numbers are not checked
    against the catalog.
    """

    owned: Mapping[str, frozenset[int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {expansion_id: frozenset(numbers) for expansion_id, numbers in self.owned.items()}
        object.__setattr__(self, "owned", MappingProxyType(frozen))

    @classmethod
    def from_dict(cls, owned: Mapping[str, Iterable[int]]) -> "Collection":
        """Build a collection from expansion id -> card numbers."""
        return cls(owned={expansion_id: frozenset(numbers) for expansion_id, numbers in owned.items()})

    def __contains__(self, expansion_id: str) -> bool:
        """Check if the collection has an entry for an expansion."""
        return expansion_id in self.owned

    def __iter__(self) -> Iterator[str]:
        """Iterate over expansion ids in insertion order."""
        return iter(self.owned)

    def owned_numbers(self, expansion_id: str) -> frozenset[int]:
        """Owned card numbers for an expansion (empty if none recorded)."""
        return self.owned.get(expansion_id, frozenset())

    def owns(self, expansion_id: str, number: int) -> bool:
        """Check if a specific card is owned."""
        return number in self.owned_numbers(expansion_id)

    def total_cards(self) -> int:
        """Number of distinct owned cards across all expansions."""
        return sum(len(numbers) for numbers in self.owned.values())
