"""Tests for the steppable hull fouling simulation."""

import dataclasses
import math

import numpy as np
import pytest

from fouling_engine.config import DEFAULT_FUEL_PRICE
from fouling_engine.core.catalog import default_catalog
from fouling_engine.core.errors import InvalidConfigError, UnknownVesselError
from fouling_engine.core.penalty import CO2_FACTOR
from fouling_engine.core.simulation import (
    Simulation,
    SimulationConfig,
    SimulationState,
    advance_state,
    build_initial_state,
)
from fouling_engine.core.vessel import VesselProfile

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_CUMULATIVE_FIELDS: tuple[str, ...] = (
    "day",
    "emissions",
    "emissions_clean",
    "emissions_penalty",
    "fuel_cost_clean",
    "fuel_cost_penalty",
    "fuel_cost_total",
)


def _sample_vessel() -> VesselProfile:
    return VesselProfile(
        id="test_panamax",
        name="Test Panamax",
        category="Bulk Carrier",
        reference_speed=13.5,
        base_fuel_consumption=35.0,
        hull_length=225.0,
        base_roughness=100.0,
        fouling_rate=1.1,
    )


def _assert_additive(state: SimulationState) -> None:
    assert math.isclose(
        state.emissions,
        state.emissions_clean + state.emissions_penalty,
        rel_tol=1e-9,
        abs_tol=1e-9,
    )
    assert math.isclose(
        state.fuel_cost_total,
        state.fuel_cost_clean + state.fuel_cost_penalty,
        rel_tol=1e-9,
        abs_tol=1e-9,
    )


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def test_default_construction() -> None:
    sim = Simulation()
    state = sim.state
    default = default_catalog().default_profile()
    assert state.config.vessel == default
    assert state.config.speed_knots == default.reference_speed
    assert state.config.time_multiplier == 1.0
    assert state.config.fuel_price_per_tonne == DEFAULT_FUEL_PRICE
    assert state.day == 0.0
    assert state.roughness == default.base_roughness
    assert state.coating_health == 100.0
    for name in _CUMULATIVE_FIELDS:
        assert getattr(state, name) == 0.0


def test_baseline_penalty_is_zero() -> None:
    state = Simulation().state
    assert state.drag_penalty == 0.0
    assert state.fuel_penalty == 0.0
    assert state.daily_fuel_tonnes == state.clean_fuel_tonnes


def test_construct_with_vessel_id_and_overrides() -> None:
    sim = Simulation(vessel="vlcc", time_multiplier=2.0, fuel_price_per_tonne=650.0)
    assert sim.config.vessel.id == "vlcc"
    assert sim.config.speed_knots == 15.0
    assert sim.config.time_multiplier == 2.0
    assert sim.config.fuel_price_per_tonne == 650.0


def test_construct_unknown_vessel_id() -> None:
    with pytest.raises(UnknownVesselError):
        Simulation(vessel="not-a-real-id")


@pytest.mark.parametrize(
    "overrides",
    [
        {"speed_knots": -1.0},
        {"speed_knots": float("nan")},
        {"time_multiplier": -0.5},
        {"time_multiplier": float("inf")},
        {"fuel_price_per_tonne": float("nan")},
        {"fuel_price_per_tonne": -10.0},
    ],
)
def test_construct_rejects_invalid_config(overrides: dict) -> None:
    with pytest.raises(InvalidConfigError):
        Simulation(**overrides)


def test_config_requires_vessel_profile() -> None:
    with pytest.raises(InvalidConfigError, match="VesselProfile"):
        SimulationConfig(vessel="panamax_bulker", speed_knots=10.0)  # type: ignore[arg-type]


def test_independent_instances() -> None:
    a = Simulation()
    b = Simulation()
    a.advance(10.0)
    assert a.state.day == 10.0
    assert b.state.day == 0.0


# ---------------------------------------------------------------------------
# Advance
# ---------------------------------------------------------------------------


def test_single_step_values() -> None:
    """One real second at multiplier 2 equals two simulated days."""
    vessel = _sample_vessel()
    sim = Simulation(vessel=vessel, time_multiplier=2.0, fuel_price_per_tonne=500.0)
    sim.advance(1.0)
    state = sim.state

    assert state.day == 2.0
    # Full coating health -> coating_factor 1.0
    assert math.isclose(state.roughness, 100.0 + 1.1 * 2.0)
    assert math.isclose(state.coating_health, 100.0 - 0.05 * 2.0)

    pct = 0.5 * 2.2**0.67
    assert math.isclose(state.fuel_penalty, pct)
    assert math.isclose(state.drag_penalty, pct)
    assert state.clean_fuel_tonnes == 35.0
    daily = 35.0 * (1.0 + pct / 100.0)
    assert math.isclose(state.daily_fuel_tonnes, daily)

    # Rectangular integration at the post-step rate
    assert math.isclose(state.emissions_clean, 35.0 * CO2_FACTOR * 2.0)
    assert math.isclose(state.emissions_penalty, (daily - 35.0) * CO2_FACTOR * 2.0)
    assert math.isclose(state.fuel_cost_clean, 35.0 * 500.0 * 2.0)
    assert math.isclose(state.fuel_cost_penalty, (daily - 35.0) * 500.0 * 2.0)
    _assert_additive(state)


def test_coating_factor_accelerates_fouling() -> None:
    """Worn coating grows roughness faster than fresh coating."""
    vessel = _sample_vessel()
    state = build_initial_state(SimulationConfig(vessel=vessel, speed_knots=13.5))
    worn = dataclasses.replace(state, coating_health=0.0)

    fresh_step = advance_state(state, 10.0)
    worn_step = advance_state(worn, 10.0)

    assert math.isclose(fresh_step.roughness - 100.0, 1.1 * 10.0)
    assert math.isclose(worn_step.roughness - 100.0, 1.1 * 10.0 * 1.5)
    assert worn_step.coating_health == 0.0


def test_coating_health_floors_at_zero() -> None:
    sim = Simulation()
    sim.advance(5000.0)
    assert sim.state.coating_health == 0.0
    sim.advance(100.0)
    assert sim.state.coating_health == 0.0


def test_monotonicity_over_many_steps() -> None:
    sim = Simulation(time_multiplier=1.5)
    previous = sim.state
    for delta in [0.016, 0.5, 0.0, 3.0, 12.25, 0.001, 40.0, 400.0, 2.0]:
        sim.advance(delta)
        current = sim.state
        assert current.roughness >= previous.roughness
        assert current.coating_health <= previous.coating_health
        assert 0.0 <= current.coating_health <= 100.0
        for name in _CUMULATIVE_FIELDS:
            assert getattr(current, name) >= getattr(previous, name), name
        _assert_additive(current)
        previous = current


def test_zero_step_is_identity() -> None:
    sim = Simulation()
    sim.advance(7.0)
    before = sim.state
    sim.advance(0.0)
    assert sim.state == before


def test_zero_multiplier_freezes_time() -> None:
    sim = Simulation(time_multiplier=0.0)
    before = sim.state
    sim.advance(100.0)
    assert sim.state == before


@pytest.mark.parametrize("delta", [-1.0, float("nan"), float("inf")])
def test_invalid_elapsed_time_rejected(delta: float) -> None:
    sim = Simulation()
    sim.advance(3.0)
    before = sim.state
    with pytest.raises(ValueError):
        sim.advance(delta)
    assert sim.state is before


def test_state_snapshot_is_immutable() -> None:
    sim = Simulation()
    with pytest.raises(dataclasses.FrozenInstanceError):
        sim.state.roughness = 0.0  # type: ignore[misc]


def test_snapshot_unchanged_by_later_steps() -> None:
    sim = Simulation()
    snapshot = sim.state
    sim.advance(10.0)
    assert snapshot.day == 0.0
    assert sim.state is not snapshot


# ---------------------------------------------------------------------------
# Reconfigure
# ---------------------------------------------------------------------------


def test_reconfigure_preserves_history() -> None:
    sim = Simulation()
    sim.advance(90.0)
    before = sim.state
    assert before.emissions > 0.0

    sim.reconfigure(speed_knots=20.0)
    after = sim.state

    for name in _CUMULATIVE_FIELDS:
        assert getattr(after, name) == getattr(before, name), name
    assert after.roughness == before.roughness
    assert after.coating_health == before.coating_health
    assert after.config.speed_knots == 20.0
    assert after.daily_fuel_tonnes > before.daily_fuel_tonnes
    # Penalty % depends on roughness only
    assert after.fuel_penalty == before.fuel_penalty


def test_reconfigure_vessel_recomputes_from_existing_roughness() -> None:
    sim = Simulation()
    sim.advance(30.0)
    roughness = sim.state.roughness
    yacht = default_catalog().by_id("yacht")

    sim.reconfigure(vessel="yacht")
    state = sim.state

    assert state.config.vessel == yacht
    assert state.roughness == roughness
    expected = 0.5 * (roughness - yacht.base_roughness) ** 0.67
    assert math.isclose(state.fuel_penalty, expected)
    # Speed is kept from the previous config
    assert state.config.speed_knots == 13.5


def test_reconfigure_affects_only_future_accumulation() -> None:
    sim = Simulation(fuel_price_per_tonne=500.0)
    sim.advance(10.0)
    cost_before = sim.state.fuel_cost_total
    sim.reconfigure(fuel_price_per_tonne=1000.0)
    assert sim.state.fuel_cost_total == cost_before
    sim.advance(1.0)
    step_cost = sim.state.fuel_cost_total - cost_before
    assert math.isclose(step_cost, sim.state.daily_fuel_tonnes * 1000.0)


def test_reconfigure_time_multiplier() -> None:
    sim = Simulation()
    sim.reconfigure(time_multiplier=0.25)
    sim.advance(4.0)
    assert math.isclose(sim.state.day, 1.0)


def test_rejected_reconfigure_keeps_previous_state() -> None:
    sim = Simulation()
    sim.advance(20.0)
    before = sim.state
    with pytest.raises(InvalidConfigError):
        sim.reconfigure(speed_knots=float("nan"))
    with pytest.raises(InvalidConfigError):
        sim.reconfigure(fuel_price_per_tonne=-1.0)
    with pytest.raises(UnknownVesselError):
        sim.reconfigure(vessel="not-a-real-id")
    assert sim.state is before


def test_reconfigure_accepts_numpy_scalars() -> None:
    """numpy integer and float scalars are valid config values."""
    sim = Simulation(speed_knots=np.float64(10.0))
    sim.reconfigure(
        speed_knots=np.int64(12),
        time_multiplier=np.float64(2.0),
        fuel_price_per_tonne=np.int32(600),
    )
    assert sim.config.speed_knots == 12
    assert sim.config.time_multiplier == 2.0
    assert sim.config.fuel_price_per_tonne == 600
    sim.advance(1.0)
    assert math.isclose(sim.state.day, 2.0)


def test_config_rejects_bool_and_strings() -> None:
    with pytest.raises(InvalidConfigError, match="numeric"):
        Simulation(speed_knots=True)
    with pytest.raises(InvalidConfigError, match="numeric"):
        Simulation(fuel_price_per_tonne="500")  # type: ignore[arg-type]


def test_empty_reconfigure_is_noop() -> None:
    sim = Simulation()
    before = sim.state
    sim.reconfigure()
    assert sim.state is before


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------


def test_reset_restores_baseline_under_current_config() -> None:
    sim = Simulation()
    sim.advance(50.0)
    sim.reconfigure(vessel="capesize_bulker", speed_knots=11.0, time_multiplier=2.5)
    sim.advance(10.0)
    config = sim.config

    sim.reset()
    state = sim.state

    assert state.config == config
    assert state.day == 0.0
    assert state.roughness == config.vessel.base_roughness
    assert state.coating_health == 100.0
    for name in _CUMULATIVE_FIELDS:
        assert getattr(state, name) == 0.0
    assert state.fuel_penalty == 0.0
    assert state.drag_penalty == 0.0
