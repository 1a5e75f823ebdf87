"""Titration analysis service and its spectra sources."""

from cspfit.services.titration.service import TitrationService
from cspfit.services.titration.source import DirectorySource, MemorySource, SpectraSource
from cspfit.services.titration.writer import write_outputs

__all__ = [
    "DirectorySource",
    "MemorySource",
    "SpectraSource",
    "TitrationService",
    "write_outputs",
]
