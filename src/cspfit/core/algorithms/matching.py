"""Nearest-neighbour correspondence between labeled and unlabeled peaks.

Each labeled reference peak claims the closest unlabeled peak. When several
references claim the same unlabeled peak, the closest reference keeps it and
the others drop out of the match set; they are not offered their next-best
candidate.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from cspfit.core.domain.peaks import PeakRecord, label_map, positions
from cspfit.core.shared.typing import FloatArray

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class DistanceMatrix:
    """Euclidean distances, rows = reference labels, columns = unlabeled indices."""

    labels: list[str]
    indices: list[int]
    values: FloatArray

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self.labels), len(self.indices))

    def get(self, label: str, index: int) -> float:
        return float(self.values[self.labels.index(label), self.indices.index(index)])


@dataclass(slots=True, frozen=True)
class ResolvedMatch:
    reference_label: str
    unlabeled_index: int
    distance: float


@dataclass(slots=True, frozen=True)
class MatchConflictGroup:
    """An unlabeled peak chosen as nearest neighbour by several references."""

    unlabeled_index: int
    labels: tuple[str, ...]
    distances: tuple[float, ...]
    winner: str

    @property
    def size(self) -> int:
        return len(self.labels)

    @property
    def losers(self) -> tuple[str, ...]:
        return tuple(label for label in self.labels if label != self.winner)


@dataclass(slots=True, frozen=True)
class MatchSummary:
    n_reference: int
    n_unlabeled: int
    n_unique: int
    n_conflicts: int
    n_final: int

    def as_dict(self) -> dict[str, int]:
        return {
            "Reference peaks": self.n_reference,
            "Unlabeled peaks": self.n_unlabeled,
            "Unique matches": self.n_unique,
            "Conflicts": self.n_conflicts,
            "Final matches": self.n_final,
        }


@dataclass(slots=True)
class MatchResult:
    """Outcome of one matching pass."""

    unique: list[ResolvedMatch] = field(default_factory=list)
    resolved: list[ResolvedMatch] = field(default_factory=list)
    conflicts: list[MatchConflictGroup] = field(default_factory=list)
    unmatched: list[str] = field(default_factory=list)
    reference_labels: list[str] = field(default_factory=list)
    n_unlabeled: int = 0
    name: str = ""

    @property
    def n_reference(self) -> int:
        return len(self.reference_labels)

    @property
    def matches(self) -> list[ResolvedMatch]:
        """Final deduplicated matches in reference order."""
        order = {label: i for i, label in enumerate(self.reference_labels)}
        return sorted(self.unique + self.resolved, key=lambda m: order[m.reference_label])

    @property
    def summary(self) -> MatchSummary:
        return MatchSummary(
            n_reference=self.n_reference,
            n_unlabeled=self.n_unlabeled,
            n_unique=len(self.unique),
            n_conflicts=len(self.conflicts),
            n_final=len(self.unique) + len(self.resolved),
        )

    def by_label(self) -> dict[str, ResolvedMatch]:
        return {m.reference_label: m for m in self.unique + self.resolved}


def distance_matrix(
    references: Sequence[PeakRecord], unlabeled: Sequence[PeakRecord]
) -> DistanceMatrix:
    """Compute the dense reference x unlabeled distance matrix.

    Only labeled references take part. Raises ``DataIOError`` on duplicate
    reference labels.
    """
    ref_by_label = label_map(references)
    labels = list(ref_by_label)
    ref_xy = positions(ref_by_label.values())
    unl_xy = positions(unlabeled)
    diff = ref_xy[:, np.newaxis, :] - unl_xy[np.newaxis, :, :]
    values = np.sqrt(np.sum(diff**2, axis=-1))
    return DistanceMatrix(labels=labels, indices=[p.index for p in unlabeled], values=values)


def resolve_matches(
    matrix: DistanceMatrix, *, max_distance: float | None = None, name: str = ""
) -> MatchResult:
    """Assign nearest neighbours and resolve many-to-one conflicts."""
    n_ref, n_unl = matrix.shape
    result = MatchResult(reference_labels=list(matrix.labels), n_unlabeled=n_unl, name=name)
    if n_ref == 0 or n_unl == 0:
        result.unmatched = list(matrix.labels)
        return result

    # argmin keeps the first column on ties
    nearest = np.argmin(matrix.values, axis=1)
    claims: dict[int, list[int]] = defaultdict(list)
    for row, col in enumerate(nearest):
        distance = float(matrix.values[row, col])
        if max_distance is not None and distance > max_distance:
            result.unmatched.append(matrix.labels[row])
            continue
        claims[int(col)].append(row)

    for col, rows in sorted(claims.items(), key=lambda item: item[1][0]):
        index = matrix.indices[col]
        distances = [float(matrix.values[row, col]) for row in rows]
        if len(rows) == 1:
            result.unique.append(ResolvedMatch(matrix.labels[rows[0]], index, distances[0]))
            continue
        best = int(np.argmin(distances))
        winner = matrix.labels[rows[best]]
        group = MatchConflictGroup(
            unlabeled_index=index,
            labels=tuple(matrix.labels[row] for row in rows),
            distances=tuple(distances),
            winner=winner,
        )
        result.conflicts.append(group)
        result.resolved.append(ResolvedMatch(winner, index, distances[best]))
        logger.debug(
            "Peak %d claimed by %s; kept %s", index, ", ".join(group.labels), winner
        )

    return result


def match_peaks(
    references: Sequence[PeakRecord],
    unlabeled: Sequence[PeakRecord],
    *,
    max_distance: float | None = None,
    name: str = "",
) -> MatchResult:
    """Match labeled reference peaks to unlabeled peaks in a single pass."""
    matrix = distance_matrix(references, unlabeled)
    return resolve_matches(matrix, max_distance=max_distance, name=name)


__all__ = [
    "DistanceMatrix",
    "MatchConflictGroup",
    "MatchResult",
    "MatchSummary",
    "ResolvedMatch",
    "distance_matrix",
    "match_peaks",
    "resolve_matches",
]
