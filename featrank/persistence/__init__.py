# ==============================================
# TOPIC 5: PERSISTENCE
# ==============================================
#
# Keeps the summary of the last ranking run on disk.
#
# ==============================================

from .summary_store import SummaryStore

__all__ = ["SummaryStore"]
