"""
Console table rendering for ranked pack odds.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.
It trusts that its input is already ranked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from packhunter.analysis.ranker import PackOdds

HEADERS = ("#", "Expansion", "Pack", "New card", "Owned")


def format_probability(probability: float) -> str:
    """Format a probability as a percentage with two decimals."""
    return f"{probability * 100:.2f}%"


def format_odds_table(ranked: list[PackOdds]) -> str:
    """
    Format ranked pack odds as a fixed-width text table.

    Args:
        ranked: PackOdds in display order

    Returns:
        Table text, or a short notice when there is nothing to show
    """
    if not ranked:
        return "No packs to rank. Is the collection empty?"

    rows = [_format_row(index, odds) for index, odds in enumerate(ranked, start=1)]

    widths = [len(header) for header in HEADERS]
    for row in rows:
        for column, cell in enumerate(row):
            widths[column] = max(widths[column], len(cell))

    lines = [
        _join(HEADERS, widths),
        _join(tuple("-" * width for width in widths), widths),
    ]
    lines.extend(_join(row, widths) for row in rows)

    return "\n".join(lines)


def _format_row(index: int, odds: PackOdds) -> tuple[str, ...]:
    return (
        str(index),
        odds.expansion_name,
        odds.pack_name or "-",
        format_probability(odds.probability),
        f"{odds.owned_cards}/{odds.total_cards}",
    )


def _join(cells: tuple[str, ...], widths: list[int]) -> str:
    """Left-align text columns, right-align the numeric ones."""
    parts = []
    for column, (cell, width) in enumerate(zip(cells, widths, strict=True)):
        if column in (0, 3, 4):
            parts.append(cell.rjust(width))
        else:
            parts.append(cell.ljust(width))
    return "  ".join(parts).rstrip()
