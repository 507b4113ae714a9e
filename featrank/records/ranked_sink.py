# ==============================================
# CsvRankedSink
# ==============================================
#
# PURPOSE:
#   Write ranked attributes to CSV:
#
#       Column,Score
#       12,0.574101
#       26,0.203315
#       ...
#
#   Scores use 6 significant digits ("%g"). Entries are written in the
#   order given; the sink never re-sorts.
#
# ==============================================

import csv
from pathlib import Path
from typing import Iterable, Union

from featrank.analysis.scores import RankedEntry
from featrank.utils.logging import get_logger

logger = get_logger(__name__)

HEADER = ("Column", "Score")


class CsvRankedSink:
    """Writes RankedEntry records to a CSV file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def write(self, entries: Iterable[RankedEntry]) -> int:
        """
        Write the header and one line per entry.

        Args:
            entries: Ranked entries, already in output order

        Returns:
            Number of entries written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        count = 0
        with open(self.path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(HEADER)
            for entry in entries:
                writer.writerow((entry.attribute_id, self.format_score(entry.score)))
                count += 1

        logger.info(f"[+] Wrote {count} ranked attributes to {self.path}")
        return count

    @staticmethod
    def format_score(score: float) -> str:
        return f"{score:g}"
