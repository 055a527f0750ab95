"""
Pack ranking.

Evaluates every openable pack of every expansion in a player's collection
and ranks them by the probability of pulling at least one new card.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from packhunter.analysis.probability import DuplicateOdds, duplicate_odds
from packhunter.models.collection import Collection
from packhunter.models.expansion import Expansion
from packhunter.models.failure import EmptyCardPoolError, UnresolvedOfferingTableError
from packhunter.models.offering_rates import OfferingRateTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackOdds:
    """New-card odds for one pack."""

    expansion_id: str
    expansion_name: str
    pack_name: str | None
    probability: float
    owned_cards: int
    total_cards: int
    odds: DuplicateOdds

    @property
    def label(self) -> str:
        """Display label, e.g. "Genetic Apex / Pikachu"."""
        if self.pack_name is None:
            return self.expansion_name
        return f"{self.expansion_name} / {self.pack_name}"

    @property
    def missing_cards(self) -> int:
        """Cards in the pool not yet owned."""
        return self.total_cards - self.owned_cards


def evaluate_expansion(
    expansion: Expansion,
    rates: OfferingRateTable,
    owned: frozenset[int],
) -> list[PackOdds]:
    """
    New-card odds for every pack of one expansion, in pack order.

    Raises:
        EmptyCardPoolError: If a declared pack has no cards
    """
    results: list[PackOdds] = []

    for pack_name, pool in expansion.pools():
        if not pool:
            raise EmptyCardPoolError(
                f"{expansion.name} / {pack_name}" if pack_name else expansion.name
            )

        odds = duplicate_odds(pool, rates, owned)
        owned_count = sum(1 for card in pool if card.number in owned)

        results.append(
            PackOdds(
                expansion_id=expansion.id,
                expansion_name=expansion.name,
                pack_name=pack_name,
                probability=odds.new_card,
                owned_cards=owned_count,
                total_cards=len(pool),
                odds=odds,
            )
        )

    return results


def rank_packs(
    catalog: Mapping[str, Expansion],
    offering_rates: Mapping[str, OfferingRateTable],
    collection: Collection,
) -> list[PackOdds]:
    """
    Rank packs by probability of yielding a new card.

    Only expansions with an entry in the collection are evaluated.

    Args:
        catalog: Expansion id -> Expansion
        offering_rates: Table name -> OfferingRateTable
        collection: The player's owned cards

    Returns:
        List of PackOdds sorted by probability (highest first). Ties keep
        collection order, then pack order.

    Raises:
        UnresolvedOfferingTableError: If an expansion's table is not loaded
        EmptyCardPoolError: If a declared pack has no cards
    """
    ranked: list[PackOdds] = []

    for expansion_id in collection:
        expansion = catalog.get(expansion_id)
        if expansion is None:
            logger.warning("Skipping collection entry for unknown expansion: %s", expansion_id)
            continue

        rates = offering_rates.get(expansion.offering_rate_table)
        if rates is None:
            raise UnresolvedOfferingTableError(
                expansion_id, expansion.offering_rate_table, list(offering_rates)
            )

        ranked.extend(
            evaluate_expansion(expansion, rates, collection.owned_numbers(expansion_id))
        )

    # Sort by probability descending (stable, so ties stay in input order)
    ranked.sort(key=lambda r: r.probability, reverse=True)

    return ranked
