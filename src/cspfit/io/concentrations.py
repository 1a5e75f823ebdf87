"""Titration concentration tables."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd

from cspfit.core.shared.exceptions import DataIOError
from cspfit.core.shared.typing import FloatArray


@dataclass(slots=True, frozen=True)
class Concentrations:
    """Host and guest concentrations, one pair per spectrum."""

    host: FloatArray
    guest: FloatArray

    def __len__(self) -> int:
        return min(len(self.host), len(self.guest))


def read_concentrations(path: Path) -> Concentrations:
    """Read a concentration table.

    The first line is a header. Columns named ``host`` and ``guest`` are used
    when present, otherwise the first two numeric columns. Comma, semicolon
    and whitespace separators are accepted; ``#`` starts a comment.
    """
    try:
        table = pd.read_csv(path, sep=r"[,;\s]+", engine="python", comment="#")
    except (
        OSError,
        UnicodeDecodeError,
        pd.errors.ParserError,
        pd.errors.EmptyDataError,
    ) as e:
        msg = f"Cannot read concentrations from {path}: {e}"
        raise DataIOError(msg) from e

    columns = {str(column).strip().lower(): column for column in table.columns}
    if "host" in columns and "guest" in columns:
        host, guest = table[columns["host"]], table[columns["guest"]]
    else:
        numeric = table.select_dtypes(include="number")
        if numeric.shape[1] < 2:
            msg = f"{path}: expected 'host' and 'guest' columns or two numeric columns"
            raise DataIOError(msg)
        host, guest = numeric.iloc[:, 0], numeric.iloc[:, 1]

    return Concentrations(
        host=np.asarray(host, dtype=float), guest=np.asarray(guest, dtype=float)
    )


__all__ = ["Concentrations", "read_concentrations"]
