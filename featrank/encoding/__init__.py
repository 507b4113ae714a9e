# ==============================================
# TOPIC 1: ENCODING
# ==============================================
#
# This package turns raw CSV field strings into ternary-coded
# rows BEFORE they reach the column store.
#
# Modules:
# --------
# - row_decoder.py → Decode one record into a fixed-width Row (0 / 1 / SENTINEL)
#
# ==============================================

from .row_decoder import RowDecoder, Row, SENTINEL, is_integer_literal

__all__ = ["RowDecoder", "Row", "SENTINEL", "is_integer_literal"]
