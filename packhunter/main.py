"""
Rank packs by the chance of pulling a card you don't own yet.

Usage:
    packhunter collection.toml
    packhunter --data-dir data --check-rates
"""

import argparse
import logging
import sys
from pathlib import Path

from packhunter.analysis.ranker import rank_packs
from packhunter.config import OFFERING_RATES_FILE, settings
from packhunter.models.failure import PackHunterError
from packhunter.parsers.offering_rates import check_offering_rates, load_offering_rates
from packhunter.services.data_loader import load_all
from packhunter.services.odds_formatter import format_odds_table

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="packhunter",
        description="Rank packs by probability of yielding a new card",
    )
    parser.add_argument(
        "collection",
        nargs="?",
        type=Path,
        default=None,
        help=f"Collection TOML file (default: {settings.collection_path})",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help=f"Directory with expansions, cards and offering rates (default: {settings.data_dir})",
    )
    parser.add_argument(
        "--check-rates",
        action="store_true",
        help="Check that every offering rate table sums to 1 and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log loading progress",
    )
    return parser


def run_check_rates(data_dir: Path) -> int:
    """Report offering rate tables that don't sum to 1. Returns an exit code."""
    tables = load_offering_rates(data_dir / OFFERING_RATES_FILE)
    problems = check_offering_rates(tables, settings.rate_sum_tolerance)

    for problem in problems:
        print(problem)

    if problems:
        return 1

    print(f"All {len(tables)} offering rate tables sum to 1.")
    return 0


def run_ranking(data_dir: Path, collection_path: Path) -> int:
    """Load everything, rank packs and print the table. Returns an exit code."""
    data = load_all(data_dir, collection_path)
    ranked = rank_packs(data.catalog, data.offering_rates, data.collection)
    print(format_odds_table(ranked))
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    data_dir = args.data_dir if args.data_dir is not None else settings.data_dir
    collection_path = args.collection if args.collection is not None else settings.collection_path

    try:
        if args.check_rates:
            return run_check_rates(data_dir)
        return run_ranking(data_dir, collection_path)
    except PackHunterError as e:
        logger.debug("Run aborted: %s", e.kind.value)
        print(e.describe(), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
