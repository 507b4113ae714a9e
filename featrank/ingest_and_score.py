# ==============================================
# IngestAndScore — Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties the topics together into one object. Callers feed raw
#   records in, then ask for scores or the ranked list.
#
# HOW IT CONNECTS THE TOPICS:
#
#   raw fields
#       │
#       ▼
#   TOPIC 1: RowDecoder.decode()          → ternary Row
#       │
#       ▼
#   TOPIC 3: BinarityTracker.observe()    → attribute bits / latch
#   TOPIC 2: BinaryColumnStore            → bit-packed columns + target
#       │ (after the full pass)
#       ▼
#   TOPIC 3: ContingencyScorer.score_all() → ScoreEntry per binary attribute
#   TOPIC 3: Ranker.rank()                 → RankedEntry list
#
#   The encoding pass is strictly sequential: row order fixes row
#   indices and every latch decision depends on earlier rows.
#   Scoring runs in parallel over read-only columns.
#
# CLASS: IngestAndScore
# ---------------------
#
#   Public Methods:
#   ---------------
#   - ingest(fields) -> bool             one record; False if it was short
#   - ingest_batch(records) -> int       many records; returns rows stored
#   - ingest_source(source) -> int       a CsvRecordSource (header kept)
#   - score() -> list[ScoreEntry]
#   - rank() -> list[RankedEntry]
#   - get_status() -> dict
#   - get_disqualifications() -> list[dict]
#   - attribute_name(attribute_id) -> str | None
#
# ==============================================

from typing import Iterable, List, Optional, Sequence

from featrank.config import AppConfig, get_config
from featrank.encoding import RowDecoder
from featrank.storage import BinaryColumnStore
from featrank.analysis import (
    BinarityTracker,
    ContingencyScorer,
    Ranker,
    RankedEntry,
    ScoreEntry,
)
from featrank.records import CsvRecordSource
from featrank.utils.logging import get_logger

logger = get_logger(__name__)

# Rows between DEBUG progress lines during encoding
PROGRESS_EVERY = 100_000


class IngestAndScore:
    """
    Main orchestrator for one ranking run:
    1. Encoding (row decoder)
    2. Column storage
    3. Binarity tracking, scoring and ranking
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Build every component from configuration.

        Args:
            config: Application configuration. If None, loads from environment.
        """
        self._config = config or get_config()
        schema = self._config.schema

        # TOPIC 1: Encoding
        self._decoder = RowDecoder(
            width=schema.num_columns,
            normal_label=schema.normal_label,
        )

        # TOPIC 2: Storage
        self._store = BinaryColumnStore(
            num_attributes=schema.num_attributes,
            initial_capacity_words=self._config.scoring.initial_capacity_words,
        )

        # TOPIC 3: Analysis
        self._tracker = BinarityTracker(self._store)
        self._scorer = ContingencyScorer(max_workers=self._config.scoring.max_workers)
        self._ranker = Ranker()

        # Internal state
        self._short_rows = 0
        self._header: Optional[List[str]] = None

    @property
    def store(self) -> BinaryColumnStore:
        return self._store

    @property
    def num_rows(self) -> int:
        return self._store.num_rows

    # ======================================
    # Encoding pass
    # ======================================
    def ingest(self, fields: Sequence[str]) -> bool:
        """
        Decode one record and append it to the columns.

        A record shorter than the schema width is still stored: its
        missing attributes decode to SENTINEL and are disqualified, and
        its missing label counts as non-normal.

        Args:
            fields: Raw field strings, label last

        Returns:
            True if the record had the full schema width
        """
        row = self._decoder.decode(fields)
        complete = len(fields) >= self._decoder.width

        if not complete:
            self._short_rows += 1
            logger.warning(
                f"[!] Short record at row {self._store.num_rows}: {len(fields)} fields "
                f"(expected {self._decoder.width})"
            )

        self._tracker.observe(row, raw_fields=fields)
        self._store.append_target(row[self._decoder.label_index] == 1)

        if self._store.num_rows % PROGRESS_EVERY == 0:
            logger.debug(f"[+] Encoded {self._store.num_rows} rows")
        return complete

    def ingest_batch(self, records: Iterable[Sequence[str]]) -> int:
        """
        Ingest records in order.

        Returns:
            Number of rows stored
        """
        stored = 0
        for fields in records:
            self.ingest(fields)
            stored += 1
        return stored

    def ingest_source(self, source: CsvRecordSource) -> int:
        """
        Ingest every record of an opened source and remember its header.

        Returns:
            Number of rows stored
        """
        stored = self.ingest_batch(source)
        self._header = list(source.header) if source.header is not None else None
        logger.info(
            f"[+] Encoded {self._store.num_rows} rows "
            f"({len(self._store.binary_columns())} binary attributes, "
            f"{self._short_rows} short rows)"
        )
        return stored

    # ======================================
    # Scoring
    # ======================================
    def score(self) -> List[ScoreEntry]:
        """Chi-square statistic for every attribute still binary."""
        return self._scorer.score_all(self._store)

    def rank(self) -> List[RankedEntry]:
        """Score, normalize by row count and sort."""
        return self._ranker.rank(self.score(), self._store.num_rows)

    # ======================================
    # Introspection
    # ======================================
    def attribute_name(self, attribute_id: int) -> Optional[str]:
        """Header name of a 1-based attribute id, if a header was read."""
        if self._header is None or attribute_id > len(self._header):
            return None
        return self._header[attribute_id - 1]

    def get_disqualifications(self) -> List[dict]:
        """Disqualified attributes, ascending by id."""
        result = []
        disqualifications = self._tracker.get_disqualifications()
        for column_id in sorted(disqualifications):
            entry = disqualifications[column_id].to_dict()
            entry["name"] = self.attribute_name(entry["attribute_id"])
            result.append(entry)
        return result

    def get_status(self) -> dict:
        """
        Current pipeline status.

        Returns:
            Rows processed, short rows and attribute counts
        """
        binary = self._store.binary_columns()
        return {
            "rows_processed": self._store.num_rows,
            "rows_short": self._short_rows,
            "num_attributes": self._store.num_attributes,
            "binary_attributes": len(binary),
            "disqualified_attributes": self._store.num_attributes - len(binary),
        }
