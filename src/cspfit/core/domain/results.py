"""Per-residue binding fit results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


class FitResult(BaseModel):
    """Best multi-start fit of the 1:1 isotherm for one residue.

    Immutable; the outlier flag is set by producing an updated copy once the
    whole residue population has been fitted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str
    ka: float = Field(gt=0, description="Association constant (M^-1)")
    delta_hg: float = Field(description="Response of the bound complex")
    delta_h: float = Field(description="Response of the free host")
    ssr: float = Field(ge=0, description="Sum of squared residuals")
    r_squared: float
    n_points: int = Field(ge=0, description="Valid points used in the fit")
    n_converged: int = Field(default=1, ge=0, description="Starts that converged")
    is_outlier: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def kd(self) -> float:
        """Dissociation constant (M)."""
        return 1.0 / self.ka

    def flagged(self, is_outlier: bool) -> FitResult:
        return self.model_copy(update={"is_outlier": is_outlier})


__all__ = ["FitResult"]
