# ==============================================
# BinaryColumnStore
# ==============================================
#
# PURPOSE:
#   Own one BitColumn per non-label attribute plus the target column,
#   and the tagged state of every attribute column:
#
#       BINARY        → column still receives appends
#       DISQUALIFIED  → column is frozen; appends raise ColumnFrozenError
#
#   The state only ever moves BINARY → DISQUALIFIED. Frozen columns
#   keep whatever bits were written before and are excluded from
#   scoring.
#
# METHODS:
# --------
#   - append(column_id, value)      write next bit of an attribute column
#   - append_target(value)          write next bit of the target column
#   - get(column_id, row) / get_target(row)
#   - freeze(column_id)             BINARY → DISQUALIFIED (idempotent)
#   - state(column_id) / is_frozen(column_id)
#   - binary_columns() -> list[int] attribute ids still BINARY
#   - num_rows                      rows appended to the target
#
# ==============================================

from enum import Enum
from typing import List

from featrank.errors import ColumnFrozenError
from .bit_column import BitColumn


class ColumnState(Enum):
    """Binarity state of an attribute column."""
    BINARY = "binary"
    DISQUALIFIED = "disqualified"


class BinaryColumnStore:
    """
    Bit-packed columns for every attribute plus the target.

    Column ids are 0-based attribute positions in the record, the label
    excluded.
    """

    def __init__(self, num_attributes: int, initial_capacity_words: int = 16):
        if num_attributes < 1:
            raise ValueError(f"num_attributes must be >= 1, got {num_attributes}")
        self._columns: List[BitColumn] = [
            BitColumn(initial_capacity_words) for _ in range(num_attributes)
        ]
        self._states: List[ColumnState] = [ColumnState.BINARY] * num_attributes
        self._target = BitColumn(initial_capacity_words)

    @property
    def num_attributes(self) -> int:
        return len(self._columns)

    @property
    def num_rows(self) -> int:
        """Rows processed so far (length of the target column)."""
        return len(self._target)

    @property
    def target(self) -> BitColumn:
        return self._target

    def column(self, column_id: int) -> BitColumn:
        return self._columns[column_id]

    # ======================================
    # Writes
    # ======================================
    def append(self, column_id: int, value: bool) -> None:
        """
        Append the next bit of an attribute column.

        Raises:
            ColumnFrozenError: If the attribute was disqualified
        """
        if self._states[column_id] is ColumnState.DISQUALIFIED:
            raise ColumnFrozenError(column_id)
        self._columns[column_id].append(value)

    def append_target(self, value: bool) -> None:
        self._target.append(value)

    def freeze(self, column_id: int) -> None:
        """Mark a column DISQUALIFIED. There is no way back."""
        self._states[column_id] = ColumnState.DISQUALIFIED

    # ======================================
    # Reads
    # ======================================
    def get(self, column_id: int, row: int) -> bool:
        return self._columns[column_id].get(row)

    def get_target(self, row: int) -> bool:
        return self._target.get(row)

    def state(self, column_id: int) -> ColumnState:
        return self._states[column_id]

    def is_frozen(self, column_id: int) -> bool:
        return self._states[column_id] is ColumnState.DISQUALIFIED

    def binary_columns(self) -> List[int]:
        """Attribute ids still in the BINARY state, ascending."""
        return [
            column_id for column_id, state in enumerate(self._states)
            if state is ColumnState.BINARY
        ]
