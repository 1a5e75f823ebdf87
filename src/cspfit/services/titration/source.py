"""Where spectra come from and where results go.

The service never chooses files itself: it asks a ``SpectraSource`` for the
ordered spectra and for an output directory. ``DirectorySource`` serves peak
list files; ``MemorySource`` serves in-memory records for tests and
notebooks.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from cspfit.core.domain.peaks import AxisOrder, PeakRecord
from cspfit.core.domain.peaks_io import READERS, ParsedPeakList, read_peak_list
from cspfit.core.shared.exceptions import SourceUnavailableError


@runtime_checkable
class SpectraSource(Protocol):
    """Injected capability providing the spectra and an output sink."""

    def list_spectra(self) -> list[ParsedPeakList]:
        """Return the spectra in titration order, anchor first."""
        ...

    def open_sink(self) -> Path | None:
        """Return a writable output directory, or ``None`` to skip writing."""
        ...


class DirectorySource:
    """Peak list files on disk, in the given order."""

    def __init__(
        self,
        paths: Sequence[Path],
        output_dir: Path | None = None,
        *,
        axis_order: AxisOrder = "ab",
    ) -> None:
        self.paths = list(paths)
        self.output_dir = output_dir
        self.axis_order = axis_order

    @classmethod
    def from_directory(
        cls, directory: Path, output_dir: Path | None = None, *, axis_order: AxisOrder = "ab"
    ) -> DirectorySource:
        """Use every peak list in ``directory``, sorted by file name."""
        if not directory.is_dir():
            msg = f"Not a directory: {directory}"
            raise SourceUnavailableError(msg)
        paths = sorted(
            path
            for path in directory.iterdir()
            if path.is_file() and path.suffix.lstrip(".").lower() in READERS
        )
        return cls(paths, output_dir, axis_order=axis_order)

    def list_spectra(self) -> list[ParsedPeakList]:
        if not self.paths:
            msg = "No spectra selected"
            raise SourceUnavailableError(msg)
        missing = [str(path) for path in self.paths if not path.is_file()]
        if missing:
            msg = f"Spectra not found: {', '.join(missing)}"
            raise SourceUnavailableError(msg)
        return [read_peak_list(path, axis_order=self.axis_order) for path in self.paths]

    def open_sink(self) -> Path | None:
        if self.output_dir is None:
            return None
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            msg = f"Cannot create output directory {self.output_dir}: {e}"
            raise SourceUnavailableError(msg) from e
        return self.output_dir


class MemorySource:
    """Spectra already held in memory."""

    def __init__(
        self,
        spectra: Sequence[Sequence[PeakRecord] | ParsedPeakList],
        output_dir: Path | None = None,
    ) -> None:
        self.spectra = [
            item
            if isinstance(item, ParsedPeakList)
            else ParsedPeakList(name=f"spectrum {i + 1}", header="", records=list(item))
            for i, item in enumerate(spectra)
        ]
        self.output_dir = output_dir

    def list_spectra(self) -> list[ParsedPeakList]:
        if not self.spectra:
            msg = "No spectra selected"
            raise SourceUnavailableError(msg)
        return list(self.spectra)

    def open_sink(self) -> Path | None:
        if self.output_dir is not None:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir


__all__ = ["DirectorySource", "MemorySource", "SpectraSource"]
