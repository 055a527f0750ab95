from packhunter.analysis.probability import DuplicateOdds
from packhunter.analysis.ranker import PackOdds
from packhunter.services.odds_formatter import format_odds_table, format_probability


def _odds(pack_name: str | None, probability: float, owned: int, total: int) -> PackOdds:
    return PackOdds(
        expansion_id="genetic_apex",
        expansion_name="Genetic Apex",
        pack_name=pack_name,
        probability=probability,
        owned_cards=owned,
        total_cards=total,
        odds=DuplicateOdds(first_three=0.0, fourth=0.0, fifth=0.0),
    )


class TestFormatProbability:
    def test_two_decimals(self) -> None:
        assert format_probability(0.983125) == "98.31%"
        assert format_probability(1.0) == "100.00%"
        assert format_probability(0.0) == "0.00%"


class TestFormatOddsTable:
    def test_empty(self) -> None:
        assert "No packs" in format_odds_table([])

    def test_rows_in_given_order(self) -> None:
        table = format_odds_table(
            [_odds("Pikachu", 0.75, 10, 80), _odds("Mewtwo", 0.5, 40, 80), _odds(None, 0.1, 5, 6)]
        )
        lines = table.splitlines()

        assert len(lines) == 5
        assert lines[2].startswith("1")
        assert "Pikachu" in lines[2]
        assert "75.00%" in lines[2]
        assert "10/80" in lines[2]
        assert "Mewtwo" in lines[3]
        assert lines[4].split()[3] == "-"

    def test_columns_aligned(self) -> None:
        table = format_odds_table([_odds("Pikachu", 0.75, 10, 80), _odds("Mewtwo", 0.5, 4, 8)])
        lines = table.splitlines()

        assert len({line.index("%") for line in lines[2:]}) == 1
