# ==============================================
# BinarityTracker
# ==============================================
#
# PURPOSE:
#   Route each decoded attribute value into the column store, or
#   latch the attribute as DISQUALIFIED the first time it shows a
#   SENTINEL. The latch is irrevocable: a disqualified attribute is
#   skipped on every later row even if its values look binary again.
#
#   The label slot is never seen here; the target column is written
#   by the caller.
#
# CLASS: BinarityTracker
# ----------------------
#   Stateful — wraps a BinaryColumnStore, which holds the per-column
#   state, and remembers where each disqualification happened.
#
#   Methods:
#   --------
#   - observe(row, raw_fields=None) -> list[int]
#       Process the attribute slots of one row, return ids latched on
#       this row.
#   - is_binary(column_id) -> bool
#   - get_disqualifications() -> dict[int, Disqualification]
#
# ==============================================

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from featrank.encoding import Row, SENTINEL
from featrank.storage import BinaryColumnStore
from featrank.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Disqualification:
    """Where and why an attribute stopped being binary."""
    column_id: int
    row_index: int
    raw_value: Optional[str] = None

    @property
    def attribute_id(self) -> int:
        """1-based attribute number."""
        return self.column_id + 1

    def to_dict(self) -> dict:
        return {
            "attribute_id": self.attribute_id,
            "row_index": self.row_index,
            "raw_value": self.raw_value,
        }


class BinarityTracker:
    """One-pass, per-attribute binary/disqualified latch."""

    def __init__(self, store: BinaryColumnStore):
        self.store = store
        self._disqualifications: Dict[int, Disqualification] = {}

    def observe(self, row: Row, raw_fields: Optional[Sequence[str]] = None) -> List[int]:
        """
        Distribute the attribute values of one row.

        Args:
            row: Decoded row (label slot last, ignored here)
            raw_fields: Original field strings, kept for diagnostics only

        Returns:
            Column ids disqualified by this row
        """
        row_index = self.store.num_rows
        latched = []

        for column_id in range(self.store.num_attributes):
            if self.store.is_frozen(column_id):
                continue

            code = row[column_id]
            if code == SENTINEL:
                self.store.freeze(column_id)
                raw_value = None
                if raw_fields is not None and column_id < len(raw_fields):
                    raw_value = raw_fields[column_id]
                self._disqualifications[column_id] = Disqualification(
                    column_id=column_id,
                    row_index=row_index,
                    raw_value=raw_value,
                )
                latched.append(column_id)
                logger.info(
                    f"[!] Attribute {column_id + 1} disqualified at row {row_index} "
                    f"(value {raw_value!r})"
                )
                continue

            self.store.append(column_id, code == 1)

        return latched

    def is_binary(self, column_id: int) -> bool:
        return not self.store.is_frozen(column_id)

    def get_disqualifications(self) -> Dict[int, Disqualification]:
        """Disqualifications keyed by 0-based column id."""
        return dict(self._disqualifications)
