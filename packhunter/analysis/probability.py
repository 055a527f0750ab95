"""
New-card probability calculation.

Models one pack opening as five independent slots:
- Slots 1-3 are drawn uniformly from the pool's OneDiamond cards
- Slot 4 picks a rarity by the table's fourth_card rates, then a card of
  that rarity uniformly from the pool
- Slot 5 does the same with the fifth_card rates

Rare slot rates are taken relative to the rarities the pool actually has.

A slot is a duplicate when the drawn card is already owned. The pack
yields something new unless every slot is a duplicate.
"""

from collections.abc import Callable, Container, Sequence
from dataclasses import dataclass

from packhunter.models.card import Card
from packhunter.models.failure import EmptyCardPoolError
from packhunter.models.offering_rates import OfferingRateTable
from packhunter.models.rarity import COMMON_RARITY, Rarity

# Number of slots drawn from the common tier
COMMON_SLOTS = 3


@dataclass(frozen=True)
class DuplicateOdds:
    """
    Per-slot probabilities of pulling an owned card.

    Attributes:
        first_three: All three common slots are duplicates
        fourth: The 4th card is a duplicate
        fifth: The 5th card is a duplicate
    """

    first_three: float
    fourth: float
    fifth: float

    @property
    def all_duplicates(self) -> float:
        """Probability every slot of the pack is a duplicate."""
        return self.first_three * self.fourth * self.fifth

    @property
    def new_card(self) -> float:
        """Probability at least one slot is a new card."""
        return 1.0 - self.all_duplicates


def owned_fractions(pool: Sequence[Card], owned: Container[int]) -> dict[Rarity, float]:
    """
    Fraction of each rarity's cards in the pool that are owned.

    Only rarities with at least one card in the pool appear in the result,
    so no rarity is ever divided by a zero count.

    Args:
        pool: Cards that can be pulled
        owned: Owned card numbers for the pool's expansion

    Returns:
        Dict mapping rarity to owned fraction in [0, 1].
    """
    totals: dict[Rarity, int] = {}
    owned_counts: dict[Rarity, int] = {}

    for card in pool:
        totals[card.rarity] = totals.get(card.rarity, 0) + 1
        if card.number in owned:
            owned_counts[card.rarity] = owned_counts.get(card.rarity, 0) + 1

    return {rarity: owned_counts.get(rarity, 0) / total for rarity, total in totals.items()}


def duplicate_odds(
    pool: Sequence[Card],
    rates: OfferingRateTable,
    owned: Container[int],
) -> DuplicateOdds:
    """
    Per-slot duplicate probabilities for one pack opening.

    A pool with no OneDiamond cards has nothing to fill the first three
    slots from, so they are counted as never all-duplicate.

    Raises:
        EmptyCardPoolError: If the pool has no cards
    """
    if not pool:
        raise EmptyCardPoolError()

    fractions = owned_fractions(pool, owned)

    common_fraction = fractions.get(COMMON_RARITY)
    first_three = common_fraction**COMMON_SLOTS if common_fraction is not None else 0.0

    fourth = _slot_duplicate_odds(rates.fourth_card_rate, fractions)
    fifth = _slot_duplicate_odds(rates.fifth_card_rate, fractions)

    return DuplicateOdds(first_three=first_three, fourth=fourth, fifth=fifth)


def _slot_duplicate_odds(
    rate: Callable[[Rarity], float],
    fractions: dict[Rarity, float],
) -> float:
    """
    Duplicate probability of one rare slot.

    Rates are renormalised over the rarities present in the pool, since the
    slot can only pull cards the pool contains. A slot with no rate mass on
    any present rarity is counted as never a duplicate.
    """
    mass = sum(rate(rarity) for rarity in fractions)
    if mass <= 0.0:
        return 0.0
    return sum(rate(rarity) * fraction for rarity, fraction in fractions.items()) / mass


def compute_pack_probability(
    pool: Sequence[Card],
    rates: OfferingRateTable,
    owned: Container[int],
) -> float:
    """
    Probability that opening one pack yields at least one unowned card.

    Args:
        pool: Cards of the pack (or of the whole expansion)
        rates: Offering rate table of the pack's expansion
        owned: Owned card numbers for that expansion

    Returns:
        Probability in [0, 1].

    Raises:
        EmptyCardPoolError: If the pool has no cards
    """
    return duplicate_odds(pool, rates, owned).new_card
