# ==============================================
# Errors
# ==============================================
#
# Exception hierarchy shared by all topics.
#
# - FeatRankError            → base class, caught by the CLI
#   - RecordSourceError      → input cannot be opened / has no header (fatal)
#   - ColumnFrozenError      → append or scoring requested on a disqualified column
#   - ConfigError            → invalid value in environment / .env
#
# Malformed field values are NOT errors: the row decoder absorbs them
# as SENTINEL. Zero-variance attributes are NOT errors either: the
# contingency scorer returns 0.0 for them.
# ==============================================


class FeatRankError(Exception):
    """Base class for every error raised by featrank."""


class RecordSourceError(FeatRankError):
    """The record source is unreadable, missing, or has no header row."""


class ColumnFrozenError(FeatRankError):
    """A write was attempted on a column whose attribute was disqualified."""

    def __init__(self, column_id: int):
        super().__init__(
            f"Attribute {column_id + 1} (column {column_id}) is disqualified; its column is frozen"
        )
        self.column_id = column_id


class ConfigError(FeatRankError):
    """A configuration value could not be parsed or is out of range."""
