"""Domain representation of peak list records."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal, get_args

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from cspfit.core.shared.exceptions import DataIOError
from cspfit.core.shared.typing import FloatArray

# "ab": coord1 is the first numeric column, coord2 the second; "ba" swaps them.
AxisOrder = Literal["ab", "ba"]
AXIS_ORDERS: tuple[AxisOrder, ...] = get_args(AxisOrder)


class PeakRecord(BaseModel):
    """A single peak read from a peak list.

    ``coord1`` and ``coord2`` are already mapped from the file columns, so
    every consumer sees the same axis convention.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    index: int
    coord1: float
    coord2: float
    flag: str = ""
    label: str | None = None
    raw_line: str = Field(default="", repr=False)

    @property
    def position(self) -> tuple[float, float]:
        return (self.coord1, self.coord2)

    @property
    def is_labeled(self) -> bool:
        return bool(self.label)


def make_record(
    index: int,
    coord_a: float,
    coord_b: float,
    flag: str = "",
    label: str | None = None,
    raw_line: str = "",
    *,
    axis_order: AxisOrder = "ab",
) -> PeakRecord:
    """Build a record, applying the column-to-axis mapping."""
    coord1, coord2 = (coord_a, coord_b) if axis_order == "ab" else (coord_b, coord_a)
    return PeakRecord(
        index=index,
        coord1=coord1,
        coord2=coord2,
        flag=flag,
        label=label,
        raw_line=raw_line,
    )


def positions(records: Iterable[PeakRecord]) -> FloatArray:
    """Stack record coordinates into an ``(n, 2)`` array."""
    coords = [record.position for record in records]
    if not coords:
        return np.empty((0, 2), dtype=float)
    return np.asarray(coords, dtype=float)


def label_map(records: Iterable[PeakRecord]) -> dict[str, PeakRecord]:
    """Map labels to records, ignoring unlabeled peaks.

    Raises:
        DataIOError: If two records carry the same label.
    """
    mapping: dict[str, PeakRecord] = {}
    for record in records:
        if not record.label:
            continue
        if record.label in mapping:
            msg = (
                f"Duplicate label '{record.label}' (peaks {mapping[record.label].index} "
                f"and {record.index})"
            )
            raise DataIOError(msg)
        mapping[record.label] = record
    return mapping


__all__ = ["AXIS_ORDERS", "AxisOrder", "PeakRecord", "label_map", "make_record", "positions"]
