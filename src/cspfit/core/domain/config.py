"""Domain configuration models for CSPFit."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cspfit.core.domain.peaks import AxisOrder

OutputFormat = Literal["csv", "json"]
LogFormat = Literal["text", "json"]


class MatchingConfig(BaseModel):
    """Configuration for peak correspondence and perturbation distances.

    Example TOML:
        [matching]
        weight = 0.2
        axis_order = "ab"
    """

    model_config = ConfigDict(extra="forbid")

    weight: Annotated[float, Field(gt=0)] = Field(
        default=0.2,
        description="Scaling applied to coord2 differences in the perturbation distance.",
    )
    max_distance: Annotated[float, Field(gt=0)] | None = Field(
        default=None,
        description="Reject nearest neighbours farther than this (None: no limit).",
    )
    axis_order: AxisOrder = Field(
        default="ab",
        description="Map peak list columns A/B to coord1/coord2 ('ab') or swap them ('ba').",
    )


class FittingConfig(BaseModel):
    """Configuration for the multi-start binding isotherm fit."""

    model_config = ConfigDict(extra="forbid")

    n_starts: Annotated[int, Field(ge=1, le=1000)] = Field(
        default=20, description="Number of initial Ka guesses."
    )
    ka_min: Annotated[float, Field(gt=0)] = Field(default=1.0, description="Lowest initial Ka.")
    ka_max: Annotated[float, Field(gt=0)] = Field(default=1e5, description="Highest initial Ka.")
    max_iterations: Annotated[int, Field(gt=0)] = Field(
        default=1000, description="Function evaluation cap for each start."
    )
    min_points: Annotated[int, Field(ge=3)] = Field(
        default=3, description="Minimum valid points required to fit a residue."
    )
    n_curve_points: Annotated[int, Field(ge=2)] = Field(
        default=100, description="Samples in the predicted curve."
    )
    workers: Annotated[int, Field(ge=1)] = Field(
        default=1, description="Residues fitted concurrently."
    )

    @model_validator(mode="after")
    def check_ka_range(self) -> "FittingConfig":
        if self.ka_min > self.ka_max:
            msg = "ka_min must not exceed ka_max"
            raise ValueError(msg)
        return self


class OutlierConfig(BaseModel):
    """Configuration for IQR outlier flagging."""

    model_config = ConfigDict(extra="forbid")

    iqr_factor: Annotated[float, Field(ge=0)] = Field(
        default=1.5, description="Multiple of the IQR added beyond Q1/Q3."
    )


class TitrationConfig(BaseModel):
    """Concentrations of the titration points, aligned with the spectra."""

    model_config = ConfigDict(extra="forbid")

    host: list[Annotated[float, Field(ge=0)]] = Field(default_factory=list)
    guest: list[Annotated[float, Field(ge=0)]] = Field(default_factory=list)

    @property
    def is_set(self) -> bool:
        return bool(self.host) and bool(self.guest)


class OutputConfig(BaseModel):
    """Configuration for output file generation."""

    model_config = ConfigDict(extra="forbid")

    directory: Path = Field(default=Path("CSPFit"), description="Output directory for results.")
    formats: list[OutputFormat] = Field(
        default=["csv", "json"], description="Output formats for results."
    )
    save_figures: bool = Field(default=True, description="Save binding curve figures (PDF).")
    log_format: LogFormat = Field(
        default="text",
        description="Format for log file: text (human-readable) or json (structured).",
    )


class CSPFitConfig(BaseModel):
    """Top-level CSPFit configuration.

    Example TOML configuration:
        [matching]
        weight = 0.2

        [fitting]
        n_starts = 20
        ka_min = 1.0
        ka_max = 1e5

        [outliers]
        iqr_factor = 1.5

        [titration]
        host = [5e-4, 5e-4, 5e-4]
        guest = [0.0, 1e-3, 2e-3]

        [output]
        directory = "CSPFit"
        formats = ["csv", "json"]
    """

    model_config = ConfigDict(extra="forbid")

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    fitting: FittingConfig = Field(default_factory=FittingConfig)
    outliers: OutlierConfig = Field(default_factory=OutlierConfig)
    titration: TitrationConfig = Field(default_factory=TitrationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


__all__ = [
    "CSPFitConfig",
    "FittingConfig",
    "LogFormat",
    "MatchingConfig",
    "OutlierConfig",
    "OutputConfig",
    "OutputFormat",
    "TitrationConfig",
]
