from packhunter.analysis.probability import (
    DuplicateOdds,
    compute_pack_probability,
    duplicate_odds,
    owned_fractions,
)
from packhunter.analysis.ranker import PackOdds, evaluate_expansion, rank_packs

__all__ = [
    "DuplicateOdds",
    "PackOdds",
    "compute_pack_probability",
    "duplicate_odds",
    "evaluate_expansion",
    "owned_fractions",
    "rank_packs",
]
