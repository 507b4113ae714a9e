# ==============================================
# CsvRecordSource
# ==============================================
#
# PURPOSE:
#   Open a CSV file, consume its header row, and yield every data
#   record as a list of raw field strings.
#
#   Fatal conditions are reported here, before any row is decoded:
#     - the file cannot be opened        → RecordSourceError
#     - the file has no header row       → RecordSourceError
#
#   Blank lines are skipped. Field content is never validated here.
#
# USAGE:
# ------
#   with CsvRecordSource("KDDCup99.csv") as source:
#       print(source.header)
#       for fields in source:
#           ...
#
# ==============================================

import csv
from pathlib import Path
from typing import Iterator, List, Optional, Union

from featrank.errors import RecordSourceError
from featrank.utils.logging import get_logger

logger = get_logger(__name__)


class CsvRecordSource:
    """Header-aware CSV record reader."""

    def __init__(self, path: Union[str, Path], delimiter: str = ","):
        self.path = Path(path)
        self.delimiter = delimiter
        self._file = None
        self._reader = None
        self.header: Optional[List[str]] = None

    def open(self) -> "CsvRecordSource":
        """
        Open the file and read the header row.

        Raises:
            RecordSourceError: If the file cannot be opened or is empty
        """
        try:
            self._file = open(self.path, "r", newline="", encoding="utf-8")
        except OSError as e:
            raise RecordSourceError(f"Could not open file {self.path}: {e}") from e

        self._reader = csv.reader(self._file, delimiter=self.delimiter)
        try:
            self.header = next(self._reader)
        except StopIteration:
            self.close()
            raise RecordSourceError(f"Error reading file header: {self.path} is empty") from None

        logger.debug(f"[+] Opened {self.path} ({len(self.header)} header fields)")
        return self

    def __iter__(self) -> Iterator[List[str]]:
        if self._reader is None:
            self.open()
        for fields in self._reader:
            if not fields:
                continue
            yield fields

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._reader = None

    def __enter__(self):
        """Context manager entry."""
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
