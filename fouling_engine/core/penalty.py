"""Roughness-to-penalty model for the hull fouling simulation engine.

Fouling raises the average hull roughness (AHR) above the vessel's clean
baseline.  The added roughness maps to a percentage drag/fuel penalty via
an empirical power law::

    delta_ahr = max(0, roughness - base_roughness)
    penalty   = 0.5 * delta_ahr ** 0.67        (0 when delta_ahr == 0)

e.g. +10 um gives ~2.3 %, +100 um gives ~10.8 %.  Drag and fuel penalty are
the same number in this model.

Clean-hull fuel burn follows the cube law in speed::

    clean_fuel = base_fuel_consumption * (speed / reference_speed) ** 3
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from fouling_engine.core.vessel import VesselProfile

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CO2_FACTOR: float = 3.114  # tonnes CO2 per tonne of HFO burned
SPEED_EXPONENT: float = 3.0  # cube law for propulsive power vs speed

PENALTY_COEFFICIENT: float = 0.5
PENALTY_EXPONENT: float = 0.67


@dataclass(frozen=True)
class PenaltyResult:
    """Instantaneous penalty readout for one roughness/speed pair.

    Attributes:
        drag_penalty: Drag increase over a clean hull in percent (>= 0).
        fuel_penalty: Fuel increase over a clean hull in percent (>= 0).
        clean_fuel_tonnes: Clean-hull fuel burn in tonnes/day at the
            operating speed.
    """

    drag_penalty: float
    fuel_penalty: float
    clean_fuel_tonnes: float

    @property
    def daily_fuel_tonnes(self) -> float:
        """Fuel burn in tonnes/day including the fouling penalty."""
        return self.clean_fuel_tonnes * (1.0 + self.fuel_penalty / 100.0)


def roughness_penalty_percent(roughness: float, base_roughness: float) -> float:
    """Return the percentage penalty for *roughness* above *base_roughness*."""
    delta_ahr: float = max(0.0, roughness - base_roughness)
    if delta_ahr <= 0.0:
        return 0.0
    return PENALTY_COEFFICIENT * delta_ahr**PENALTY_EXPONENT


def clean_fuel_tonnes(vessel: VesselProfile, speed_knots: float) -> float:
    """Return clean-hull fuel burn in tonnes/day at *speed_knots*."""
    speed_ratio: float = speed_knots / vessel.reference_speed
    return vessel.base_fuel_consumption * speed_ratio**SPEED_EXPONENT


def compute_penalties(
    roughness: float,
    vessel: VesselProfile,
    speed_knots: float,
) -> PenaltyResult:
    """Compute drag/fuel penalties and the clean-hull fuel rate.

    Pure function of its arguments.

    Args:
        roughness: Current average hull roughness in microns.
        vessel: Vessel whose clean baseline and fuel curve apply.
        speed_knots: Operating speed in knots (>= 0).

    Returns:
        A :class:`PenaltyResult` with both penalties floored at 0.
    """
    pct: float = roughness_penalty_percent(roughness, vessel.base_roughness)
    return PenaltyResult(
        drag_penalty=max(0.0, pct),
        fuel_penalty=max(0.0, pct),
        clean_fuel_tonnes=clean_fuel_tonnes(vessel, speed_knots),
    )


def penalty_curve(
    roughness: ArrayLike,
    vessel: VesselProfile,
    speed_knots: float,
) -> dict[str, NDArray[np.float64]]:
    """Vectorised form of :func:`compute_penalties` over a roughness grid.

    Args:
        roughness: Roughness values in microns (any array-like).
        vessel: Vessel whose clean baseline and fuel curve apply.
        speed_knots: Operating speed in knots.

    Returns:
        Dictionary containing:
            roughness    -- The input grid as a float array.
            penalty      -- Drag/fuel penalty in percent per grid point.
            daily_fuel   -- Fuel burn in tonnes/day per grid point.
    """
    grid: NDArray[np.float64] = np.asarray(roughness, dtype=np.float64)
    delta_ahr = np.maximum(0.0, grid - vessel.base_roughness)
    penalty = np.where(
        delta_ahr > 0.0, PENALTY_COEFFICIENT * delta_ahr**PENALTY_EXPONENT, 0.0
    )
    clean = clean_fuel_tonnes(vessel, speed_knots)
    return {
        "roughness": grid,
        "penalty": penalty,
        "daily_fuel": clean * (1.0 + penalty / 100.0),
    }
