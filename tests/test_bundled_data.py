"""Checks on the data files shipped in data/."""

from pathlib import Path

import pytest

from packhunter.analysis.probability import compute_pack_probability
from packhunter.analysis.ranker import rank_packs
from packhunter.models.collection import Collection
from packhunter.models.rarity import Rarity
from packhunter.parsers.collection_import import load_collection
from packhunter.parsers.offering_rates import check_offering_rates
from packhunter.services.data_loader import load_static_data


class TestBundledOfferingRates:
    def test_every_slot_sums_to_one(self, bundled_data_dir: Path) -> None:
        rates, _ = load_static_data(bundled_data_dir)

        assert rates
        assert check_offering_rates(rates) == []

    def test_common_tier_never_offered_in_rare_slots(self, bundled_data_dir: Path) -> None:
        rates, _ = load_static_data(bundled_data_dir)

        for table in rates.values():
            assert table.fourth_card_rate(Rarity.ONE_DIAMOND) == 0.0
            assert table.fifth_card_rate(Rarity.ONE_DIAMOND) == 0.0


class TestBundledCatalog:
    def test_every_pack_has_common_cards(self, bundled_data_dir: Path) -> None:
        _, catalog = load_static_data(bundled_data_dir)

        for expansion in catalog.values():
            for pack_name, pool in expansion.pools():
                assert pool, f"{expansion.id}/{pack_name} is empty"
                assert any(card.rarity is Rarity.ONE_DIAMOND for card in pool)

    def test_fully_owned_pools_score_zero(self, bundled_data_dir: Path) -> None:
        rates, catalog = load_static_data(bundled_data_dir)

        for expansion in catalog.values():
            table = rates[expansion.offering_rate_table]
            for pack_name, pool in expansion.pools():
                owned = {card.number for card in pool}
                result = compute_pack_probability(pool, table, owned)
                assert result == 0.0, f"{expansion.id}/{pack_name} scored {result}"

    def test_promo_card_in_no_pack(self, bundled_data_dir: Path) -> None:
        _, catalog = load_static_data(bundled_data_dir)

        mew = catalog["genetic_apex"].cards[283]
        assert mew.packs == frozenset()
        assert all(mew not in pool for _, pool in catalog["genetic_apex"].pools())

    def test_rank_example_collection(self, bundled_data_dir: Path) -> None:
        rates, catalog = load_static_data(bundled_data_dir)
        collection = load_collection(bundled_data_dir.parent / "collection.example.toml")

        ranked = rank_packs(catalog, rates, collection)

        assert len(ranked) == 6
        assert all(0.0 <= r.probability <= 1.0 for r in ranked)

    def test_empty_collection_ranks_everything_at_one(self, bundled_data_dir: Path) -> None:
        rates, catalog = load_static_data(bundled_data_dir)
        collection = Collection.from_dict({expansion_id: [] for expansion_id in catalog})

        ranked = rank_packs(catalog, rates, collection)

        assert [r.probability for r in ranked] == pytest.approx([1.0] * len(ranked))
