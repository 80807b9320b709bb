"""Presentation-independent readouts of a simulation snapshot.

Bands and formats match what a dashboard shows next to the raw numbers;
nothing here feeds back into the simulation.
"""

from __future__ import annotations

from fouling_engine.core.simulation import SimulationState

ROUGHNESS_DISPLAY_CEILING: float = 1500.0  # microns; display only
MODERATE_FOULING_THRESHOLD: float = 300.0
SEVERE_FOULING_THRESHOLD: float = 600.0
ELEVATED_PENALTY_THRESHOLD: float = 10.0
HIGH_PENALTY_THRESHOLD: float = 20.0

DAYS_PER_YEAR: float = 365.0


def roughness_gauge_percent(roughness: float) -> float:
    """Return roughness as a percentage of the display ceiling, capped at 100."""
    return min(roughness / ROUGHNESS_DISPLAY_CEILING * 100.0, 100.0)


def fouling_severity(roughness: float) -> str:
    """Classify roughness as ``"clean"``, ``"moderate"`` or ``"severe"``."""
    if roughness > SEVERE_FOULING_THRESHOLD:
        return "severe"
    if roughness > MODERATE_FOULING_THRESHOLD:
        return "moderate"
    return "clean"


def penalty_severity(penalty_percent: float) -> str:
    """Classify a penalty as ``"low"``, ``"elevated"`` or ``"high"``."""
    if penalty_percent > HIGH_PENALTY_THRESHOLD:
        return "high"
    if penalty_percent > ELEVATED_PENALTY_THRESHOLD:
        return "elevated"
    return "low"


def format_elapsed(day: float) -> str:
    """Format elapsed simulated time as days, or years from one year on."""
    if day < DAYS_PER_YEAR:
        return f"{day:.0f} days"
    return f"{day / DAYS_PER_YEAR:.1f} yrs"


def format_compact(value: float) -> str:
    """Format a large quantity with a ``k`` or ``M`` suffix."""
    if value > 1_000_000:
        return f"{value / 1_000_000:.2f}M"
    if value > 1_000:
        return f"{value / 1_000:.1f}k"
    return f"{value:.0f}"


def _shares(clean: float, penalty: float, total: float) -> tuple[float, float]:
    denominator = total or 1.0
    return clean / denominator, penalty / denominator


def emissions_breakdown(state: SimulationState) -> tuple[float, float]:
    """Return the (clean, penalty) fractions of cumulative emissions."""
    return _shares(state.emissions_clean, state.emissions_penalty, state.emissions)


def cost_breakdown(state: SimulationState) -> tuple[float, float]:
    """Return the (clean, penalty) fractions of cumulative fuel cost."""
    return _shares(
        state.fuel_cost_clean, state.fuel_cost_penalty, state.fuel_cost_total
    )
