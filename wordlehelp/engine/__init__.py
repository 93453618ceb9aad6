from .scoring import score, pattern_statuses, PATTERN_STATUS
from .constraints import (
    ConstraintSet, RowConstraints, extract_constraints, pattern_constraints, row_constraints,
)
from .matcher import MatchEngine, match_mask

__all__ = [
    "score", "pattern_statuses", "PATTERN_STATUS",
    "ConstraintSet", "RowConstraints", "extract_constraints", "pattern_constraints", "row_constraints",
    "MatchEngine", "match_mask",
]
