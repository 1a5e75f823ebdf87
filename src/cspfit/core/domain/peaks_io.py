"""Peak list readers.

The native format is a plain-text peak table: a free-text header line, then
data lines with at least five whitespace-separated fields
``index coordA coordB <ignored> flag``. A line starting with ``#`` labels the
data line immediately before it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from cspfit.core.domain.peaks import AxisOrder, PeakRecord, make_record
from cspfit.core.domain.report import RunWarning, WarningKind
from cspfit.core.shared.exceptions import DataIOError, MalformedRecordError

logger = logging.getLogger(__name__)

MIN_FIELDS = 5
COMMENT = "#"


@dataclass(slots=True)
class ParsedPeakList:
    """Records read from one peak list plus the lines that were skipped."""

    name: str
    header: str
    records: list[PeakRecord] = field(default_factory=list)
    warnings: list[RunWarning] = field(default_factory=list)

    @property
    def is_labeled(self) -> bool:
        return any(record.is_labeled for record in self.records)

    def __len__(self) -> int:
        return len(self.records)


Reader = Callable[[Path, AxisOrder], ParsedPeakList]

READERS: dict[str, Reader] = {}


def register_reader(file_types: str | Iterable[str]) -> Callable[[Reader], Reader]:
    """Decorator to register a reader function for specific file types."""
    if isinstance(file_types, str):
        file_types = [file_types]

    def decorator(fn: Reader) -> Reader:
        for ft in file_types:
            READERS[ft] = fn
        return fn

    return decorator


def parse_data_line(line: str, *, axis_order: AxisOrder = "ab") -> PeakRecord:
    """Parse one data line into an unlabeled record.

    Raises:
        MalformedRecordError: If the line has too few fields or bad numbers.
    """
    fields = line.split()
    if len(fields) < MIN_FIELDS:
        msg = f"expected at least {MIN_FIELDS} fields, got {len(fields)}"
        raise MalformedRecordError(msg)
    try:
        index = int(fields[0])
        coord_a = float(fields[1])
        coord_b = float(fields[2])
    except ValueError as e:
        raise MalformedRecordError(str(e)) from e
    return make_record(
        index, coord_a, coord_b, flag=fields[4], raw_line=line, axis_order=axis_order
    )


def parse_peak_list(
    lines: Iterable[str], *, name: str = "<memory>", axis_order: AxisOrder = "ab"
) -> ParsedPeakList:
    """Parse the lines of a peak list.

    Malformed data lines are skipped and reported as warnings. A comment seen
    before any data line is ignored; when several comments follow the same
    data line the last one wins.
    """
    iterator = iter(lines)
    header = next(iterator, "").rstrip("\n")
    parsed = ParsedPeakList(name=name, header=header)
    pending: PeakRecord | None = None

    for lineno, raw in enumerate(iterator, start=2):
        line = raw.strip()
        if not line:
            continue
        if line.startswith(COMMENT):
            label = line[len(COMMENT) :].strip()
            if pending is not None and label:
                pending = pending.model_copy(update={"label": label})
            continue
        try:
            record = parse_data_line(line, axis_order=axis_order)
        except MalformedRecordError as e:
            logger.debug("Skipping line %d of %s: %s", lineno, name, e)
            parsed.warnings.append(
                RunWarning(WarningKind.MALFORMED_RECORD, f"{name}:{lineno}", str(e))
            )
            continue
        if pending is not None:
            parsed.records.append(pending)
        pending = record

    if pending is not None:
        parsed.records.append(pending)
    return parsed


@register_reader(["list", "txt", "peaks"])
def read_text_list(path: Path, axis_order: AxisOrder = "ab") -> ParsedPeakList:
    """Read a plain-text peak list."""
    with path.open(encoding="utf-8") as f:
        return parse_peak_list(f, name=path.name, axis_order=axis_order)


def csv_row_record(row: dict, *, axis_order: AxisOrder = "ab") -> PeakRecord:
    """Build a record from one CSV row.

    Raises:
        MalformedRecordError: If the index or a coordinate is missing or not a number.
    """
    values = [row["index"], row["coord_a"], row["coord_b"]]
    if any(pd.isna(value) for value in values):
        msg = "missing index or coordinate"
        raise MalformedRecordError(msg)
    try:
        index = int(values[0])
        coord_a = float(values[1])
        coord_b = float(values[2])
    except (TypeError, ValueError) as e:
        raise MalformedRecordError(str(e)) from e
    label = row.get("label")
    flag = row.get("flag", "")
    return make_record(
        index,
        coord_a,
        coord_b,
        flag="" if pd.isna(flag) else str(flag),
        label=None if label is None or pd.isna(label) else str(label),
        axis_order=axis_order,
    )


@register_reader("csv")
def read_csv_list(path: Path, axis_order: AxisOrder = "ab") -> ParsedPeakList:
    """Read a CSV peak table with columns index, coord_a, coord_b, [flag], [label]."""
    table = pd.read_csv(path)
    missing = {"index", "coord_a", "coord_b"} - set(table.columns)
    if missing:
        msg = f"Missing columns in {path}: {', '.join(sorted(missing))}"
        raise DataIOError(msg)

    parsed = ParsedPeakList(name=path.name, header=",".join(map(str, table.columns)))
    # Line 1 is the header
    for lineno, row in enumerate(table.to_dict("records"), start=2):
        try:
            record = csv_row_record(row, axis_order=axis_order)
        except MalformedRecordError as e:
            logger.debug("Skipping line %d of %s: %s", lineno, path.name, e)
            parsed.warnings.append(
                RunWarning(WarningKind.MALFORMED_RECORD, f"{path.name}:{lineno}", str(e))
            )
            continue
        parsed.records.append(record)
    return parsed


def read_peak_list(path: Path, *, axis_order: AxisOrder = "ab") -> ParsedPeakList:
    """Read a peak list based on its extension (plain text by default)."""
    extension = path.suffix.lstrip(".").lower()
    reader = READERS.get(extension, read_text_list)
    try:
        return reader(path, axis_order)
    except (
        OSError,
        UnicodeDecodeError,
        pd.errors.ParserError,
        pd.errors.EmptyDataError,
    ) as e:
        msg = f"Cannot read peak list {path}: {e}"
        raise DataIOError(msg) from e


__all__ = [
    "ParsedPeakList",
    "csv_row_record",
    "parse_data_line",
    "parse_peak_list",
    "read_csv_list",
    "read_peak_list",
    "read_text_list",
    "register_reader",
]
