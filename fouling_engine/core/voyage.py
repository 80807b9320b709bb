"""Headless batch runner for the hull fouling simulation engine.

Drives a :class:`Simulation` with synthetic time steps instead of a
real-time loop and records per-step telemetry traces.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from fouling_engine.core.simulation import Simulation

_TRACE_COLUMNS: dict[str, str] = {
    "roughness_trace": "roughness",
    "coating_trace": "coating_health",
    "fuel_penalty_trace": "fuel_penalty",
    "daily_fuel_trace": "daily_fuel_tonnes",
    "emissions_trace": "emissions",
    "fuel_cost_trace": "fuel_cost_total",
}

_MIN_REMAINDER_DAYS: float = 1e-9


def simulate_voyage(
    simulation: Simulation,
    days: float,
    step_days: float = 1.0,
) -> dict[str, Any]:
    """Advance *simulation* by *days* simulated days and return traces.

    Each step feeds the engine ``step_days / time_multiplier`` real
    seconds, so the step size is expressed in simulated days regardless of
    the configured multiplier.  If *days* is not a whole multiple of
    *step_days* a shorter final step covers the remainder.

    The engine is mutated in place; call ``simulation.reset()`` first for a
    run from a clean hull.

    Args:
        simulation: Engine to drive.
        days: Simulated days to cover (> 0).
        step_days: Simulated days per step (> 0).

    Returns:
        Dictionary containing:
            final_state        -- Snapshot after the last step.
            day_trace          -- Simulated day after each step (list[float]).
            roughness_trace    -- Roughness after each step (list[float]).
            coating_trace      -- Coating health after each step (list[float]).
            fuel_penalty_trace -- Fuel penalty % after each step (list[float]).
            daily_fuel_trace   -- Fuel burn t/day after each step (list[float]).
            emissions_trace    -- Cumulative CO2 after each step (list[float]).
            fuel_cost_trace    -- Cumulative fuel cost after each step (list[float]).

    Raises:
        ValueError: If days or step_days is not > 0, or the time
            multiplier is zero.
    """
    if not days > 0.0:
        raise ValueError("days must be > 0.")
    if not step_days > 0.0:
        raise ValueError("step_days must be > 0.")
    multiplier: float = simulation.config.time_multiplier
    if multiplier <= 0.0:
        raise ValueError("time_multiplier must be > 0 to run a voyage.")

    full_steps: int = int(days // step_days)
    steps: list[float] = [step_days] * full_steps
    remainder: float = days - full_steps * step_days
    if remainder > _MIN_REMAINDER_DAYS:
        steps.append(remainder)

    traces: dict[str, list[float]] = {"day_trace": []}
    traces.update({name: [] for name in _TRACE_COLUMNS})

    for step in steps:
        simulation.advance(step / multiplier)
        state = simulation.state
        traces["day_trace"].append(state.day)
        for name, attr in _TRACE_COLUMNS.items():
            traces[name].append(getattr(state, attr))

    result: dict[str, Any] = {"final_state": simulation.state}
    result.update(traces)
    return result


def voyage_to_frame(result: dict[str, Any]) -> pd.DataFrame:
    """Convert :func:`simulate_voyage` traces into a DataFrame indexed by day."""
    frame = pd.DataFrame(
        {attr: result[name] for name, attr in _TRACE_COLUMNS.items()},
        index=pd.Index(result["day_trace"], name="day"),
    )
    return frame
