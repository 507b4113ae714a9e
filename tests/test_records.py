# ==============================================
# Tests for the CSV record source and ranked sink
# ==============================================

import pytest

from featrank.analysis import RankedEntry
from featrank.errors import RecordSourceError
from featrank.records import CsvRecordSource, CsvRankedSink


class TestCsvRecordSource:
    """Header handling and fatal conditions."""

    def test_reads_header_and_records(self, write_csv):
        path = write_csv([["0", "1", "normal"], ["1", "tcp", "smurf"]])
        with CsvRecordSource(path) as source:
            assert source.header == ["a", "b", "label"]
            assert list(source) == [["0", "1", "normal"], ["1", "tcp", "smurf"]]

    def test_header_only(self, write_csv):
        path = write_csv([])
        with CsvRecordSource(path) as source:
            assert list(source) == []

    def test_blank_lines_skipped(self, tmp_path):
        path = tmp_path / "blank.csv"
        path.write_text("a,b,label\n0,1,normal\n\n1,0,smurf\n")
        with CsvRecordSource(path) as source:
            assert len(list(source)) == 2

    def test_crlf_line_endings(self, tmp_path):
        path = tmp_path / "crlf.csv"
        path.write_bytes(b"a,b,label\r\n0,1,normal\r\n")
        with CsvRecordSource(path) as source:
            assert list(source) == [["0", "1", "normal"]]

    def test_missing_file(self, tmp_path):
        with pytest.raises(RecordSourceError, match="Could not open"):
            CsvRecordSource(tmp_path / "missing.csv").open()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(RecordSourceError, match="header"):
            CsvRecordSource(path).open()

    def test_custom_delimiter(self, tmp_path):
        path = tmp_path / "semi.csv"
        path.write_text("a;label\n1;normal\n")
        with CsvRecordSource(path, delimiter=";") as source:
            assert list(source) == [["1", "normal"]]


class TestCsvRankedSink:
    """Output format."""

    def test_writes_header_and_rows(self, tmp_path):
        path = tmp_path / "out" / "ranked_columns.csv"
        count = CsvRankedSink(path).write([
            RankedEntry(attribute_id=12, score=0.5741012345),
            RankedEntry(attribute_id=3, score=1.0),
            RankedEntry(attribute_id=7, score=0.0),
        ])
        assert count == 3
        assert path.read_text() == "Column,Score\n12,0.574101\n3,1\n7,0\n"

    def test_empty_output_has_header(self, tmp_path):
        path = tmp_path / "ranked.csv"
        CsvRankedSink(path).write([])
        assert path.read_text() == "Column,Score\n"

    @pytest.mark.parametrize("score,text", [
        (0.25, "0.25"), (1e-07, "1e-07"), (0.123456789, "0.123457"),
    ])
    def test_score_format(self, score, text):
        assert CsvRankedSink.format_score(score) == text
