# ==============================================
# TOPIC 4: RECORDS
# ==============================================
#
# Collaborators around the scoring core.
#
# Modules:
# --------
# - record_source.py → Read header + data records from a CSV file
# - ranked_sink.py   → Write "Column,Score" ranked output
#
# ==============================================

from .record_source import CsvRecordSource
from .ranked_sink import CsvRankedSink

__all__ = ["CsvRecordSource", "CsvRankedSink"]
