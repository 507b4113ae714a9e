# ==============================================
# Tests for the Row Decoder
# ==============================================

import pytest

from featrank.encoding import RowDecoder, SENTINEL, is_integer_literal


@pytest.fixture
def decoder():
    return RowDecoder(width=4, normal_label="normal")


class TestIntegerLiteral:
    """Which strings count as integer literals."""

    @pytest.mark.parametrize("text", ["0", "1", "42", "-3", "+7", "007"])
    def test_accepts_signed_digits(self, text):
        assert is_integer_literal(text)

    @pytest.mark.parametrize("text", ["", "-", "+", "1.0", "0x1", " 1", "1 ", "tcp", "1e3", "--1", "1\n", "0\n", "\n1"])
    def test_rejects_everything_else(self, text):
        assert not is_integer_literal(text)

    def test_rejects_non_ascii_digits(self):
        # Arabic-Indic digit one
        assert not is_integer_literal("١")


class TestAttributeDecoding:
    """Attribute slots map to 0 / 1 / SENTINEL."""

    @pytest.mark.parametrize("text,expected", [
        ("0", 0), ("-0", 0), ("+0", 0), ("00", 0),
        ("1", 1), ("+1", 1), ("01", 1),
        ("2", SENTINEL), ("-1", SENTINEL), ("-01", SENTINEL), ("10", SENTINEL), ("7", SENTINEL), ("181", SENTINEL),
    ])
    def test_integer_values(self, text, expected):
        assert RowDecoder.decode_attribute(text) == expected

    def test_very_long_literals_never_raise(self):
        assert RowDecoder.decode_attribute("9" * 5000) == SENTINEL
        assert RowDecoder.decode_attribute("0" * 5000) == 0
        assert RowDecoder.decode_attribute("0" * 5000 + "1") == 1
        assert RowDecoder.decode_attribute("-" + "0" * 4999 + "1") == SENTINEL

    @pytest.mark.parametrize("text", ["tcp", "SF", "0.00", "", "http", "1\n", "0\n"])
    def test_non_integers_are_sentinel(self, text):
        assert RowDecoder.decode_attribute(text) == SENTINEL

    def test_full_row(self, decoder):
        assert decoder.decode(["0", "1", "tcp", "normal"]) == (0, 1, SENTINEL, 0)


class TestLabelDecoding:
    """Label slot is binary by construction."""

    def test_normal_is_zero(self, decoder):
        assert decoder.decode(["0", "0", "0", "normal"])[-1] == 0

    @pytest.mark.parametrize("label", ["smurf", "neptune", "normal.", "Normal", "", "2"])
    def test_everything_else_is_one(self, decoder, label):
        assert decoder.decode(["0", "0", "0", label])[-1] == 1

    def test_custom_normal_label(self):
        decoder = RowDecoder(width=2, normal_label="normal.")
        assert decoder.decode(["1", "normal."]) == (1, 0)
        assert decoder.decode(["1", "normal"]) == (1, 1)


class TestShapeHandling:
    """Short and long records."""

    def test_missing_label_is_never_sentinel(self, decoder):
        for fields in ([], ["0"], ["0", "1", "1"]):
            assert decoder.decode(fields)[-1] == 1

    def test_short_record_fills_sentinel(self, decoder):
        assert decoder.decode(["1", "0"]) == (1, 0, SENTINEL, 1)

    def test_empty_record_is_all_sentinel(self, decoder):
        assert decoder.decode([]) == (SENTINEL, SENTINEL, SENTINEL, 1)

    def test_short_record_is_deterministic(self, decoder):
        decoder.decode(["1", "1", "1", "normal"])
        assert decoder.decode(["0"]) == (0, SENTINEL, SENTINEL, 1)

    def test_extra_fields_ignored(self, decoder):
        assert decoder.decode(["1", "0", "1", "normal", "extra", "9"]) == (1, 0, 1, 0)

    def test_width_validation(self):
        with pytest.raises(ValueError):
            RowDecoder(width=1)
