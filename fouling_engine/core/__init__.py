"""Core simulation modules for the hull fouling engine."""

from fouling_engine.core.catalog import VesselCatalog, default_catalog, load_catalog
from fouling_engine.core.controls import (
    SPEED_SNAP_POINTS,
    TIME_MULTIPLIER_PRESETS,
    is_above_service_speed,
    knots_to_ms,
    snap_speed,
)
from fouling_engine.core.errors import InvalidConfigError, UnknownVesselError
from fouling_engine.core.penalty import (
    CO2_FACTOR,
    PenaltyResult,
    compute_penalties,
    penalty_curve,
)
from fouling_engine.core.readout import (
    cost_breakdown,
    emissions_breakdown,
    fouling_severity,
    format_compact,
    format_elapsed,
    penalty_severity,
    roughness_gauge_percent,
)
from fouling_engine.core.simulation import (
    Simulation,
    SimulationConfig,
    SimulationState,
    advance_state,
    build_initial_state,
    reconfigure_state,
)
from fouling_engine.core.vessel import VesselProfile
from fouling_engine.core.voyage import simulate_voyage, voyage_to_frame

__all__ = [
    "CO2_FACTOR",
    "InvalidConfigError",
    "PenaltyResult",
    "SPEED_SNAP_POINTS",
    "Simulation",
    "SimulationConfig",
    "SimulationState",
    "TIME_MULTIPLIER_PRESETS",
    "UnknownVesselError",
    "VesselCatalog",
    "VesselProfile",
    "advance_state",
    "build_initial_state",
    "compute_penalties",
    "cost_breakdown",
    "default_catalog",
    "emissions_breakdown",
    "fouling_severity",
    "format_compact",
    "format_elapsed",
    "is_above_service_speed",
    "knots_to_ms",
    "load_catalog",
    "penalty_curve",
    "penalty_severity",
    "reconfigure_state",
    "roughness_gauge_percent",
    "simulate_voyage",
    "snap_speed",
    "voyage_to_frame",
]
