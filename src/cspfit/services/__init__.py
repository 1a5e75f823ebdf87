"""Application service layer for orchestrating CSPFit workflows."""

from cspfit.services.titration import (
    DirectorySource,
    MemorySource,
    SpectraSource,
    TitrationService,
)

__all__ = ["DirectorySource", "MemorySource", "SpectraSource", "TitrationService"]
