"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from cspfit.core.domain.config import CSPFitConfig
from cspfit.core.shared.exceptions import ConfigError


def load_config(path: Path) -> CSPFitConfig:
    """Load configuration from a TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the configuration does not validate.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    try:
        return CSPFitConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid configuration in {path}:\n{e}"
        raise ConfigError(msg) from e


def save_config(config: CSPFitConfig, path: Path) -> None:
    """Save configuration to a TOML file."""
    data = config.model_dump(mode="json", exclude_none=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a default configuration file as a string."""
    return """# CSPFit Configuration File
# Generated automatically - edit as needed

[matching]
weight = 0.2          # scaling of coord2 differences in the CSP distance
axis_order = "ab"     # "ab": columns A/B -> coord1/coord2, "ba": swapped
# max_distance = 0.5  # Uncomment to reject distant nearest neighbours

[fitting]
n_starts = 20
ka_min = 1.0
ka_max = 1e5
max_iterations = 1000
min_points = 3
n_curve_points = 100
workers = 1

[outliers]
iqr_factor = 1.5

[titration]
# One value per spectrum, in the order the spectra are given
# host = [5e-4, 5e-4, 5e-4]
# guest = [0.0, 1e-3, 2e-3]

[output]
directory = "CSPFit"
formats = ["csv", "json"]
save_figures = true
log_format = "text"
"""
