# ==============================================
# TOPIC 3: ANALYSIS & SCORING
# ==============================================
#
# This package decides which attributes stay binary and ranks the
# survivors by their association with the target.
#
# Three-step process:
#   Step 1 (Tracking): Latch attributes that show a non-binary value
#   Step 2 (Scoring):  2x2 contingency table + chi-square per attribute
#   Step 3 (Ranking):  Normalize by row count, sort descending
#
# Modules:
# --------
# - binarity.py    → BinarityTracker, Disqualification
# - contingency.py → ContingencyTable, ContingencyScorer
# - scores.py      → ScoreEntry, RankedEntry data classes
# - ranker.py      → Ranker
#
# ==============================================

from .binarity import BinarityTracker, Disqualification
from .contingency import ContingencyTable, ContingencyScorer
from .scores import ScoreEntry, RankedEntry
from .ranker import Ranker

__all__ = [
    "BinarityTracker",
    "Disqualification",
    "ContingencyTable",
    "ContingencyScorer",
    "ScoreEntry",
    "RankedEntry",
    "Ranker",
]
