"""Closed-form 1:1 host-guest binding isotherm."""

from __future__ import annotations

import numpy as np

from cspfit.core.shared.typing import FloatArray


def complex_concentration(
    host: float | FloatArray, guest: float | FloatArray, ka: float
) -> FloatArray:
    """Concentration of the host-guest complex at equilibrium.

    Root of ``Ka = HG / ((H0 - HG) (G0 - HG))`` lying in ``[0, min(H0, G0)]``.
    """
    host = np.asarray(host, dtype=float)
    guest = np.asarray(guest, dtype=float)
    b = guest + host + 1.0 / ka
    discriminant = np.maximum(b**2 - 4.0 * guest * host, 0.0)
    return 0.5 * (b - np.sqrt(discriminant))


def binding_response(
    host: float | FloatArray,
    guest: float | FloatArray,
    ka: float,
    delta_hg: float,
    delta_h: float,
) -> FloatArray:
    """Population-weighted response of free host and complex."""
    host = np.asarray(host, dtype=float)
    hg = complex_concentration(host, guest, ka)
    free = host - hg
    total = free + hg
    with np.errstate(divide="ignore", invalid="ignore"):
        response = (delta_h * free + delta_hg * hg) / total
    return np.where(total > 0, response, delta_h)


__all__ = ["binding_response", "complex_concentration"]
