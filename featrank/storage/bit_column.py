# ==============================================
# BitColumn
# ==============================================
#
# PURPOSE:
#   Append-only sequence of booleans packed into 64-bit words.
#   Row r lives in word r // 64 at bit offset r % 64 (LSB first).
#
# STORAGE:
#   - _words:   numpy uint64 array, committed (full) words
#   - _pending: Python int holding the word currently being filled
#   A word is written to _words once its 64th bit is appended. The
#   array doubles in size when a commit would overflow it, so the
#   total row count never has to be known in advance.
#
# METHODS:
# --------
#   - append(value: bool) -> None          amortized O(1)
#   - get(row: int) -> bool                O(1)
#   - words() -> np.ndarray                packed words incl. partial last word
#   - to_bools() -> np.ndarray             unpacked bool array, len == len(self)
#
# ==============================================

import numpy as np

from featrank.config import WORD_BITS


class BitColumn:
    """Growable bit-packed boolean column."""

    def __init__(self, initial_capacity_words: int = 16):
        self._words = np.zeros(max(1, initial_capacity_words), dtype=np.uint64)
        self._length = 0
        self._pending = 0

    def __len__(self) -> int:
        return self._length

    @property
    def capacity_words(self) -> int:
        """Number of words currently allocated for committed bits."""
        return len(self._words)

    @property
    def num_words(self) -> int:
        """Number of words needed to hold every appended bit."""
        return (self._length + WORD_BITS - 1) // WORD_BITS

    # ======================================
    # Writes
    # ======================================
    def append(self, value: bool) -> None:
        """Set the bit at the next row index."""
        offset = self._length % WORD_BITS
        if value:
            self._pending |= 1 << offset
        self._length += 1
        if offset == WORD_BITS - 1:
            self._commit()

    def _commit(self) -> None:
        index = (self._length - 1) // WORD_BITS
        if index >= len(self._words):
            self._grow(index + 1)
        self._words[index] = self._pending
        self._pending = 0

    def _grow(self, min_words: int) -> None:
        new_size = max(min_words, 2 * len(self._words))
        grown = np.zeros(new_size, dtype=np.uint64)
        grown[:len(self._words)] = self._words
        self._words = grown

    # ======================================
    # Reads
    # ======================================
    def get(self, row: int) -> bool:
        """
        Read the bit written for a row.

        Raises:
            IndexError: If row is outside [0, len(self))
        """
        if row < 0 or row >= self._length:
            raise IndexError(f"Row {row} out of range for column of length {self._length}")
        word_index, offset = divmod(row, WORD_BITS)
        if word_index < self._length // WORD_BITS:
            word = int(self._words[word_index])
        else:
            word = self._pending
        return bool((word >> offset) & 1)

    def words(self) -> np.ndarray:
        """Return a copy of the packed words, the partial last word included."""
        committed = self._length // WORD_BITS
        out = np.zeros(self.num_words, dtype=np.uint64)
        out[:committed] = self._words[:committed]
        if committed < self.num_words:
            out[committed] = self._pending
        return out

    def to_bools(self) -> np.ndarray:
        """Unpack into a numpy bool array of length len(self)."""
        # Force little-endian bytes so bit i of word w lands at index 64*w + i
        as_bytes = self.words().astype("<u8").view(np.uint8)
        bits = np.unpackbits(as_bytes, bitorder="little")
        return bits[:self._length].astype(bool)
