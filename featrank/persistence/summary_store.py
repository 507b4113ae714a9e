import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


# ==============================================
# SummaryStore
# ==============================================
#
# PURPOSE:
#   Persist the outcome of a ranking run to disk so that it can be
#   inspected later (`featrank summary`) without re-reading the input.
#
# WHAT IS PERSISTED:
#   1. Run state      → input path, rows processed, short rows
#   2. Ranked scores  → attribute id, header name, normalized score
#   3. Disqualified   → attribute id, header name, first offending row/value
#
# FILE STRUCTURE:
# ---------------
#   metadata/
#   └── summary.json
#
# CLASS: SummaryStore
# --------------------
#   Stateful — holds a reference to the storage directory.
#
class SummaryStore:
    """
    Handles persistence of run summaries to disk.

    Files created:
    - <storage_dir>/summary.json → last run summary
    """

    VERSION = "1.0"

    def __init__(self, storage_dir: str = "metadata/"):
        """
        Initialize the summary store.

        Args:
            storage_dir: Directory to store summary files
        """
        self.storage_dir = Path(storage_dir)
        self.summary_file = self.storage_dir / "summary.json"

    def save_summary(self, summary: Dict[str, Any]) -> Dict[str, Any]:
        """
        Save a run summary to disk.

        A `saved_at` timestamp and format `version` are added.

        Args:
            summary: JSON-serializable run summary

        Returns:
            The summary as written
        """
        document = dict(summary)
        document["saved_at"] = datetime.now().isoformat()
        document["version"] = self.VERSION

        # Created on first save so read-only commands leave no trace
        self.storage_dir.mkdir(parents=True, exist_ok=True)

        with open(self.summary_file, 'w') as f:
            json.dump(document, f, indent=2)

        return document

    def load_summary(self) -> Optional[Dict[str, Any]]:
        """
        Load the last run summary.

        Returns:
            The summary dictionary, or None if no run was saved yet
        """
        if not self.summary_file.exists():
            return None

        with open(self.summary_file, 'r') as f:
            return json.load(f)

    def exists(self) -> bool:
        """
        Check if a summary file exists.

        Returns:
            True if a previous run was saved
        """
        return self.summary_file.exists()

    def clear(self) -> None:
        """
        Delete the summary file (for testing or reset).
        """
        if self.summary_file.exists():
            self.summary_file.unlink()
