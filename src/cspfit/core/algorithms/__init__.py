"""Peak correspondence and titration series assembly."""

from cspfit.core.algorithms.matching import (
    DistanceMatrix,
    MatchConflictGroup,
    MatchResult,
    MatchSummary,
    ResolvedMatch,
    distance_matrix,
    match_peaks,
    resolve_matches,
)
from cspfit.core.algorithms.series import SeriesAssembler, perturbation_distance

__all__ = [
    "DistanceMatrix",
    "MatchConflictGroup",
    "MatchResult",
    "MatchSummary",
    "ResolvedMatch",
    "SeriesAssembler",
    "distance_matrix",
    "match_peaks",
    "perturbation_distance",
    "resolve_matches",
]
