# ==============================================
# RowDecoder
# ==============================================
#
# PURPOSE:
#   Convert one raw record (ordered list of field strings) into a
#   fixed-width Row of ternary codes:
#       0        → the field is the integer 0
#       1        → the field is the integer 1
#       SENTINEL → anything else ("not reducible to binary")
#
#   The last slot is the label: the normal/benign literal maps to 0,
#   every other value maps to 1.
#
# RULES:
# ------
#   1. Integer literal = optional "+"/"-" sign followed by ASCII digits.
#      "0", "-0", "+0", "00" → 0        "1", "+1", "01" → 1
#      "7", "-1"             → SENTINEL
#   2. Non-integer text ("tcp", "0.5", "", " 1", "1\n") → SENTINEL
#      Digit runs of any length are classified without int(), so huge
#      literals are SENTINEL too.
#   3. Records shorter than the schema width: missing attribute slots
#      are SENTINEL. A missing label is not the normal literal, so it
#      decodes to 1; the label is never SENTINEL.
#   4. Extra trailing fields are ignored.
#   5. Never raises for field content.
#
# ==============================================

import re
from typing import Sequence, Tuple

# Ternary code for "not reducible to binary"
SENTINEL = 2

# One decoded record; length == schema width
Row = Tuple[int, ...]

_INTEGER_PATTERN = re.compile(r"[+-]?([0-9]+)")


def is_integer_literal(text: str) -> bool:
    """Return True if text is a sign-optional run of ASCII digits."""
    return _INTEGER_PATTERN.fullmatch(text) is not None


class RowDecoder:
    """
    Stateless decoder from field strings to a ternary-coded Row.

    Attributes:
        width: Schema width (attributes + label)
        normal_label: Literal that marks the benign category
    """

    def __init__(self, width: int = 42, normal_label: str = "normal"):
        if width < 2:
            raise ValueError(f"Schema width must be >= 2, got {width}")
        self.width = width
        self.normal_label = normal_label

    @property
    def label_index(self) -> int:
        return self.width - 1

    def decode(self, fields: Sequence[str]) -> Row:
        """
        Decode one record.

        Args:
            fields: Raw field strings, label last

        Returns:
            Tuple of `width` codes in {0, 1, SENTINEL}
        """
        available = min(len(fields), self.width)
        codes = [SENTINEL] * self.width

        for i in range(min(available, self.label_index)):
            codes[i] = self.decode_attribute(fields[i])

        if available == self.width:
            codes[self.label_index] = self.decode_label(fields[self.label_index])
        else:
            codes[self.label_index] = 1

        return tuple(codes)

    @staticmethod
    def decode_attribute(text: str) -> int:
        """Map one attribute field to 0, 1 or SENTINEL."""
        match = _INTEGER_PATTERN.fullmatch(text)
        if match is None:
            return SENTINEL
        digits = match.group(1).lstrip("0")
        if digits == "":
            return 0
        if digits == "1" and not text.startswith("-"):
            return 1
        return SENTINEL

    def decode_label(self, text: str) -> int:
        """Map the label field to 0 (normal) or 1 (anything else)."""
        return 0 if text == self.normal_label else 1
