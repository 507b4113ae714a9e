# ==============================================
# Contingency Scorer
# ==============================================
#
# PURPOSE:
#   Measure how strongly a binary attribute is associated with the
#   binary target using a chi-square test of independence on the
#   2x2 contingency table:
#
#                      label = 1     label = 0
#       attribute = 1     tp            fp        row1 = tp + fp
#       attribute = 0     fn            tn        row2 = fn + tn
#                      col1 = tp+fn  col2 = fp+tn       n
#
#   Expected counts under independence:
#       e1 = row1 * col1 / n   (tp cell)
#       e2 = row1 * col2 / n   (fp cell)
#       e3 = row2 * col1 / n   (fn cell)
#       e4 = row2 * col2 / n   (tn cell)
#   e1 + e2 + e3 + e4 = (row1 + row2)(col1 + col2) / n = n
#
#   chi2 = sum((observed - expected)^2 / expected)
#
#   If any expected count is 0 (a constant attribute or a constant
#   label), the test is undefined and the score is 0.0.
#
# CLASSES:
# --------
# - ContingencyTable (frozen dataclass)
#     tp, tn, fp, fn counts, margins, expected(), chi_square()
#
# - ContingencyScorer
#     score(column, target, n) -> float
#     score_all(store, column_ids=None) -> list[ScoreEntry]
#       Scores attributes on a thread pool. Each task reads its own
#       column and the shared target bits, and writes into its own
#       pre-indexed result slot, so output order never depends on
#       completion order.
#
# ==============================================

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from featrank.errors import ColumnFrozenError
from featrank.storage import BinaryColumnStore, BitColumn
from featrank.utils.logging import get_logger
from .scores import ScoreEntry

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContingencyTable:
    """Joint counts of attribute value x label value."""
    tp: int  # attribute = 1, label = 1
    tn: int  # attribute = 0, label = 0
    fp: int  # attribute = 1, label = 0
    fn: int  # attribute = 0, label = 1

    @classmethod
    def from_bits(cls, feature: np.ndarray, target: np.ndarray) -> "ContingencyTable":
        """
        Count the four cells from two equal-length bool arrays.

        Args:
            feature: Attribute bits
            target: Label bits

        Returns:
            The 2x2 table
        """
        if feature.shape != target.shape:
            raise ValueError(
                f"Feature and target lengths differ: {feature.shape} vs {target.shape}"
            )
        tp = int(np.count_nonzero(feature & target))
        fp = int(np.count_nonzero(feature & ~target))
        fn = int(np.count_nonzero(~feature & target))
        tn = len(feature) - tp - fp - fn
        return cls(tp=tp, tn=tn, fp=fp, fn=fn)

    # ======================================
    # Margins
    # ======================================
    @property
    def n(self) -> int:
        return self.tp + self.tn + self.fp + self.fn

    @property
    def row1(self) -> int:
        """Rows where the attribute is 1."""
        return self.tp + self.fp

    @property
    def row2(self) -> int:
        """Rows where the attribute is 0."""
        return self.tn + self.fn

    @property
    def col1(self) -> int:
        """Rows where the label is 1."""
        return self.tp + self.fn

    @property
    def col2(self) -> int:
        """Rows where the label is 0."""
        return self.fp + self.tn

    # ======================================
    # Statistic
    # ======================================
    def expected(self) -> Tuple[float, float, float, float]:
        """Expected (tp, fp, fn, tn) counts under independence."""
        n = self.n
        if n == 0:
            return 0.0, 0.0, 0.0, 0.0
        row1, row2 = float(self.row1), float(self.row2)
        col1, col2 = float(self.col1), float(self.col2)
        return (
            row1 * col1 / n,
            row1 * col2 / n,
            row2 * col1 / n,
            row2 * col2 / n,
        )

    def chi_square(self) -> float:
        """Pearson chi-square statistic, 0.0 when any expected count is 0."""
        e1, e2, e3, e4 = self.expected()
        if e1 == 0 or e2 == 0 or e3 == 0 or e4 == 0:
            return 0.0
        return (
            (self.tp - e1) ** 2 / e1
            + (self.fp - e2) ** 2 / e2
            + (self.fn - e3) ** 2 / e3
            + (self.tn - e4) ** 2 / e4
        )


class ContingencyScorer:
    """
    Chi-square scorer for bit-packed attribute columns.

    Pure with respect to its inputs: scoring never modifies a column.
    """

    def __init__(self, max_workers: int = 4):
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.max_workers = max_workers

    def table(self, column: BitColumn, target: BitColumn, n: int) -> ContingencyTable:
        """Build the contingency table over the first n rows."""
        return ContingencyTable.from_bits(
            self._first_rows(column, n),
            self._first_rows(target, n),
        )

    def score(self, column: BitColumn, target: BitColumn, n: int) -> float:
        """Chi-square statistic of one attribute against the target."""
        return self.table(column, target, n).chi_square()

    def score_all(
        self,
        store: BinaryColumnStore,
        column_ids: Optional[Sequence[int]] = None
    ) -> List[ScoreEntry]:
        """
        Score every qualifying attribute of a store.

        Args:
            store: Column store after the encoding pass
            column_ids: 0-based ids to score; defaults to every column
                still BINARY

        Returns:
            ScoreEntry per attribute, in the order of column_ids

        Raises:
            ColumnFrozenError: If an explicit id names a disqualified attribute
        """
        if column_ids is None:
            column_ids = store.binary_columns()
        column_ids = list(column_ids)
        for column_id in column_ids:
            if store.is_frozen(column_id):
                raise ColumnFrozenError(column_id)
        n = store.num_rows

        # Unpacked once, read-only for every task
        target_bits = self._first_rows(store.target, n)
        target_bits.setflags(write=False)

        slots: List[Optional[ScoreEntry]] = [None] * len(column_ids)

        def score_slot(slot: int) -> None:
            column_id = column_ids[slot]
            feature_bits = self._first_rows(store.column(column_id), n)
            statistic = ContingencyTable.from_bits(feature_bits, target_bits).chi_square()
            slots[slot] = ScoreEntry(attribute_id=column_id + 1, statistic=statistic)

        logger.debug(
            f"[+] Scoring {len(column_ids)} attributes over {n} rows "
            f"(max_workers={self.max_workers})"
        )

        if self.max_workers == 1 or len(column_ids) <= 1:
            for slot in range(len(column_ids)):
                score_slot(slot)
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # list() re-raises the first task exception, if any
                list(executor.map(score_slot, range(len(column_ids))))

        return [entry for entry in slots if entry is not None]

    @staticmethod
    def _first_rows(column: BitColumn, n: int) -> np.ndarray:
        if n > len(column):
            raise ValueError(f"Column holds {len(column)} rows, {n} requested")
        return column.to_bools()[:n]
