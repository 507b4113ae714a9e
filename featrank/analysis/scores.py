# ==============================================
# Scores (Data Classes)
# ==============================================
#
# - ScoreEntry  → raw chi-square statistic of one attribute
# - RankedEntry → normalized score of one attribute, in output order
#
# Attribute ids are 1-based positions in the input schema.
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ScoreEntry:
    """Chi-square statistic for a qualifying attribute."""
    attribute_id: int
    statistic: float


@dataclass(frozen=True)
class RankedEntry:
    """Normalized score, as written to the ranked output."""
    attribute_id: int
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {"attribute_id": self.attribute_id, "score": self.score}
