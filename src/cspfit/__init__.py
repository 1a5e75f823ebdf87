"""CSPFit - binding affinities from NMR chemical shift titrations.

Labeled peaks of an anchor spectrum are tracked through a titration series by
nearest-neighbour matching, their perturbation distances are fitted to a 1:1
binding isotherm, and residues with atypical affinities are flagged.
"""

from importlib import metadata

from cspfit.core.domain.config import CSPFitConfig
from cspfit.core.results.analysis import AnalysisResult
from cspfit.services.titration import DirectorySource, MemorySource, TitrationService

try:
    __version__ = metadata.version("cspfit")
except metadata.PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "AnalysisResult",
    "CSPFitConfig",
    "DirectorySource",
    "MemorySource",
    "TitrationService",
    "__version__",
]
