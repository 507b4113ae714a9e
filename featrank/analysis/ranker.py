# ==============================================
# Ranker
# ==============================================
#
# PURPOSE:
#   Turn raw chi-square statistics into the ranked output list.
#
#   score = statistic / n
#
#   Dividing by the row count is a display scaling inherited from the
#   existing ranked_columns.csv format. It does not change the test
#   (the ordering is the same as for the raw statistic) and for a 2x2
#   table it equals the squared phi coefficient.
#
#   Order: score descending, ties broken by ascending attribute id so
#   that repeated runs produce byte-identical output.
#
# ==============================================

from typing import Iterable, List

from .scores import ScoreEntry, RankedEntry


class Ranker:
    """Normalizes and orders scored attributes."""

    def rank(self, entries: Iterable[ScoreEntry], n: int) -> List[RankedEntry]:
        """
        Normalize each statistic by n and sort.

        Args:
            entries: Raw statistics of qualifying attributes
            n: Number of rows the statistics were computed over

        Returns:
            RankedEntry list, best attribute first
        """
        ranked = [
            RankedEntry(
                attribute_id=entry.attribute_id,
                score=self.normalize(entry.statistic, n),
            )
            for entry in entries
        ]
        ranked.sort(key=lambda e: (-e.score, e.attribute_id))
        return ranked

    @staticmethod
    def normalize(statistic: float, n: int) -> float:
        if n <= 0:
            return 0.0
        return statistic / n
