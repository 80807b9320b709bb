"""Steppable hull fouling simulation for the fouling engine.

The simulation owns a single immutable :class:`SimulationState` snapshot
and replaces it wholesale on every transition.  The transitions themselves
are pure functions of (previous state, elapsed time, configuration) so
they can be driven by a real-time loop, a batch runner, or a test with
synthetic deltas.

Per advance, with ``sim_days = elapsed_seconds * time_multiplier``:
    1. Roughness grows linearly, accelerated by coating wear::

           coating_factor = 1 + (1 - coating_health / 100) * 0.5
           roughness     += fouling_rate * sim_days * coating_factor

    2. Coating health decays by 0.05 %/day, floored at 0.
    3. Penalties and the fuel rate are recomputed at the new roughness.
    4. Emissions and cost accumulate at the *post-step* rates times
       ``sim_days`` (rectangular integration).
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, replace

from fouling_engine.config import DEFAULT_FUEL_PRICE, DEFAULT_TIME_MULTIPLIER
from fouling_engine.core.catalog import VesselCatalog, default_catalog
from fouling_engine.core.errors import InvalidConfigError
from fouling_engine.core.penalty import CO2_FACTOR, compute_penalties
from fouling_engine.core.vessel import VesselProfile

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

COATING_DECAY_PER_DAY: float = 0.05  # percentage points of coating health
COATING_FOULING_BOOST: float = 0.5  # extra fouling rate at zero coating health
FULL_COATING_HEALTH: float = 100.0

# ---------------------------------------------------------------------------
# Configuration and state records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationConfig:
    """Operating parameters currently in effect.

    Attributes:
        vessel: Catalog profile of the simulated vessel.
        speed_knots: Operating speed in knots (>= 0).  May differ from
            the vessel's reference speed.
        time_multiplier: Simulated days per real second (>= 0).
        fuel_price_per_tonne: Fuel price in currency units per tonne (>= 0).
    """

    vessel: VesselProfile
    speed_knots: float
    time_multiplier: float = DEFAULT_TIME_MULTIPLIER
    fuel_price_per_tonne: float = DEFAULT_FUEL_PRICE

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.vessel, VesselProfile):
            raise InvalidConfigError(
                f"vessel must be a VesselProfile, got {type(self.vessel).__name__}."
            )
        for field_name in ("speed_knots", "time_multiplier", "fuel_price_per_tonne"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidConfigError(
                    f"{field_name} must be numeric, got {type(value).__name__}."
                )
            if not (math.isfinite(value) and value >= 0.0):
                raise InvalidConfigError(
                    f"{field_name} must be a finite value >= 0.0, got {value}."
                )


@dataclass(frozen=True)
class SimulationState:
    """Snapshot of the simulation at one instant.

    Cumulative fields (``day``, ``emissions*``, ``fuel_cost*``) only ever
    grow.  Instantaneous fields (penalties and fuel rates) are recomputed
    on every transition.

    Attributes:
        day: Simulated days elapsed.
        roughness: Average hull roughness in microns.
        coating_health: Antifouling coating condition in percent [0, 100].
        drag_penalty: Drag increase over a clean hull in percent.
        fuel_penalty: Fuel increase over a clean hull in percent.
        clean_fuel_tonnes: Clean-hull fuel burn in tonnes/day.
        daily_fuel_tonnes: Actual fuel burn in tonnes/day.
        emissions: Cumulative CO2 in tonnes.
        emissions_clean: Share of ``emissions`` a clean hull would emit.
        emissions_penalty: Share of ``emissions`` caused by fouling.
        fuel_cost_clean: Cumulative clean-hull fuel cost.
        fuel_cost_penalty: Cumulative fuel cost caused by fouling.
        fuel_cost_total: Cumulative fuel cost.
        config: Configuration in effect.
    """

    day: float
    roughness: float
    coating_health: float
    drag_penalty: float
    fuel_penalty: float
    clean_fuel_tonnes: float
    daily_fuel_tonnes: float
    emissions: float
    emissions_clean: float
    emissions_penalty: float
    fuel_cost_clean: float
    fuel_cost_penalty: float
    fuel_cost_total: float
    config: SimulationConfig


# ---------------------------------------------------------------------------
# Pure transitions
# ---------------------------------------------------------------------------


def build_initial_state(config: SimulationConfig) -> SimulationState:
    """Return the clean-hull starting state for *config*."""
    vessel = config.vessel
    result = compute_penalties(vessel.base_roughness, vessel, config.speed_knots)
    return SimulationState(
        day=0.0,
        roughness=vessel.base_roughness,
        coating_health=FULL_COATING_HEALTH,
        drag_penalty=result.drag_penalty,
        fuel_penalty=result.fuel_penalty,
        clean_fuel_tonnes=result.clean_fuel_tonnes,
        daily_fuel_tonnes=result.daily_fuel_tonnes,
        emissions=0.0,
        emissions_clean=0.0,
        emissions_penalty=0.0,
        fuel_cost_clean=0.0,
        fuel_cost_penalty=0.0,
        fuel_cost_total=0.0,
        config=config,
    )


def advance_state(state: SimulationState, elapsed_seconds: float) -> SimulationState:
    """Return the state after *elapsed_seconds* of real time.

    Args:
        state: Previous snapshot.
        elapsed_seconds: Real time elapsed since *state* (>= 0, finite).

    Returns:
        A new :class:`SimulationState`.  A zero-length step returns
        *state* itself.

    Raises:
        ValueError: If elapsed_seconds is negative or not finite.
    """
    if not math.isfinite(elapsed_seconds):
        raise ValueError("elapsed_seconds must be finite.")
    if elapsed_seconds < 0.0:
        raise ValueError("elapsed_seconds must be >= 0.")

    config = state.config
    vessel = config.vessel
    sim_days: float = elapsed_seconds * config.time_multiplier
    if sim_days == 0.0:
        return state

    # 1. Fouling growth, faster as the coating wears
    coating_factor: float = 1.0 + (
        1.0 - state.coating_health / FULL_COATING_HEALTH
    ) * COATING_FOULING_BOOST
    roughness: float = state.roughness + vessel.fouling_rate * sim_days * coating_factor

    # 2. Coating wear
    coating_health: float = max(
        0.0, state.coating_health - COATING_DECAY_PER_DAY * sim_days
    )

    # 3. Instantaneous readout at the new roughness
    result = compute_penalties(roughness, vessel, config.speed_knots)
    clean_fuel: float = result.clean_fuel_tonnes
    daily_fuel: float = result.daily_fuel_tonnes
    penalty_fuel: float = daily_fuel - clean_fuel

    # 4. Accumulate at post-step rates
    step_emissions_clean: float = clean_fuel * CO2_FACTOR * sim_days
    step_emissions_penalty: float = penalty_fuel * CO2_FACTOR * sim_days
    step_cost_clean: float = clean_fuel * config.fuel_price_per_tonne * sim_days
    step_cost_penalty: float = penalty_fuel * config.fuel_price_per_tonne * sim_days

    return replace(
        state,
        day=state.day + sim_days,
        roughness=roughness,
        coating_health=coating_health,
        drag_penalty=result.drag_penalty,
        fuel_penalty=result.fuel_penalty,
        clean_fuel_tonnes=clean_fuel,
        daily_fuel_tonnes=daily_fuel,
        emissions=state.emissions + step_emissions_clean + step_emissions_penalty,
        emissions_clean=state.emissions_clean + step_emissions_clean,
        emissions_penalty=state.emissions_penalty + step_emissions_penalty,
        fuel_cost_clean=state.fuel_cost_clean + step_cost_clean,
        fuel_cost_penalty=state.fuel_cost_penalty + step_cost_penalty,
        fuel_cost_total=state.fuel_cost_total + step_cost_clean + step_cost_penalty,
    )


def reconfigure_state(
    state: SimulationState, config: SimulationConfig
) -> SimulationState:
    """Return *state* under *config* with only the instantaneous fields redone.

    Roughness, coating health, ``day`` and every cumulative counter are
    carried over unchanged.
    """
    result = compute_penalties(state.roughness, config.vessel, config.speed_knots)
    return replace(
        state,
        config=config,
        drag_penalty=result.drag_penalty,
        fuel_penalty=result.fuel_penalty,
        clean_fuel_tonnes=result.clean_fuel_tonnes,
        daily_fuel_tonnes=result.daily_fuel_tonnes,
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class Simulation:
    """Owner of one evolving hull fouling state.

    Each instance is independent; create one per session and hand it to
    whatever drives the update loop.

    Attributes:
        catalog: Catalog used to resolve vessel identifiers.
    """

    __slots__ = ("catalog", "_state")

    def __init__(
        self,
        vessel: VesselProfile | str | None = None,
        speed_knots: float | None = None,
        time_multiplier: float | None = None,
        fuel_price_per_tonne: float | None = None,
        catalog: VesselCatalog | None = None,
    ) -> None:
        """Build the engine from defaults plus any supplied overrides.

        Args:
            vessel: Profile or catalog id.  Defaults to the catalog's
                default profile.
            speed_knots: Operating speed.  Defaults to the vessel's
                reference speed.
            time_multiplier: Simulated days per real second.
            fuel_price_per_tonne: Fuel price in currency units per tonne.
            catalog: Catalog for id lookups.  Defaults to the packaged
                catalog.

        Raises:
            InvalidConfigError: If the merged configuration is invalid.
            UnknownVesselError: If *vessel* is an unknown id.
        """
        self.catalog: VesselCatalog = (
            catalog if catalog is not None else default_catalog()
        )
        profile = (
            self.catalog.default_profile() if vessel is None else self._resolve(vessel)
        )
        config = SimulationConfig(
            vessel=profile,
            speed_knots=profile.reference_speed if speed_knots is None else speed_knots,
            time_multiplier=(
                DEFAULT_TIME_MULTIPLIER if time_multiplier is None else time_multiplier
            ),
            fuel_price_per_tonne=(
                DEFAULT_FUEL_PRICE
                if fuel_price_per_tonne is None
                else fuel_price_per_tonne
            ),
        )
        self._state: SimulationState = build_initial_state(config)

    @property
    def state(self) -> SimulationState:
        """Current read-only snapshot."""
        return self._state

    @property
    def config(self) -> SimulationConfig:
        """Configuration currently in effect."""
        return self._state.config

    def advance(self, elapsed_seconds: float) -> None:
        """Advance by *elapsed_seconds* of real (wall-clock) time.

        Raises:
            ValueError: If elapsed_seconds is negative or not finite.  The
                state is left unchanged.
        """
        self._state = advance_state(self._state, elapsed_seconds)

    def reconfigure(
        self,
        vessel: VesselProfile | str | None = None,
        speed_knots: float | None = None,
        time_multiplier: float | None = None,
        fuel_price_per_tonne: float | None = None,
    ) -> None:
        """Replace the supplied config fields, keeping accumulated history.

        Fields left as ``None`` keep their current value.  Penalties and
        fuel rates are recomputed from the current roughness; cumulative
        counters are untouched.

        Raises:
            InvalidConfigError: If the merged configuration is invalid.
                The previous state stays in effect.
            UnknownVesselError: If *vessel* is an unknown id.
        """
        current = self._state.config
        changes: dict[str, object] = {}
        if vessel is not None:
            changes["vessel"] = self._resolve(vessel)
        if speed_knots is not None:
            changes["speed_knots"] = speed_knots
        if time_multiplier is not None:
            changes["time_multiplier"] = time_multiplier
        if fuel_price_per_tonne is not None:
            changes["fuel_price_per_tonne"] = fuel_price_per_tonne
        if not changes:
            return

        config = replace(current, **changes)
        if config.vessel.id != current.vessel.id:
            logger.info(
                "Vessel changed from %s to %s on day %.2f",
                current.vessel.id,
                config.vessel.id,
                self._state.day,
            )
        logger.debug("Reconfigured simulation: %s", sorted(changes))
        self._state = reconfigure_state(self._state, config)

    def reset(self) -> None:
        """Return to a clean hull under the current configuration."""
        logger.debug("Resetting simulation on day %.2f", self._state.day)
        self._state = build_initial_state(self._state.config)

    def _resolve(self, vessel: VesselProfile | str) -> VesselProfile:
        if isinstance(vessel, VesselProfile):
            return vessel
        return self.catalog.by_id(vessel)

    def __repr__(self) -> str:
        return (
            f"Simulation(vessel={self.config.vessel.id!r}, "
            f"day={self._state.day:.2f}, roughness={self._state.roughness:.1f})"
        )
