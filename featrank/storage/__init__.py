# ==============================================
# TOPIC 2: STORAGE
# ==============================================
#
# This package holds the bit-packed columnar representation of
# the dataset: one boolean column per attribute plus the target.
#
# Modules:
# --------
# - bit_column.py   → One append-only, growable bit-packed column
# - column_store.py → All attribute columns, their BINARY/DISQUALIFIED
#                     state, and the target column
#
# ==============================================

from .bit_column import BitColumn
from .column_store import BinaryColumnStore, ColumnState

__all__ = ["BitColumn", "BinaryColumnStore", "ColumnState"]
