"""CLI entrypoint for the hull fouling simulation engine."""

from __future__ import annotations

import argparse
import logging
import sys

from fouling_engine import __version__
from fouling_engine.config import DEFAULT_FUEL_PRICE
from fouling_engine.core.catalog import default_catalog
from fouling_engine.core.controls import is_above_service_speed
from fouling_engine.core.errors import InvalidConfigError, UnknownVesselError
from fouling_engine.core.readout import (
    emissions_breakdown,
    fouling_severity,
    format_compact,
    format_elapsed,
)
from fouling_engine.core.simulation import Simulation
from fouling_engine.core.voyage import simulate_voyage

_REPORT_INTERVAL_DAYS: int = 30


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Hull fouling projection demo.")
    parser.add_argument("--vessel", default=None, help="Catalog vessel id.")
    parser.add_argument("--speed", type=float, default=None, help="Speed in knots.")
    parser.add_argument("--days", type=float, default=365.0, help="Days to project.")
    parser.add_argument(
        "--fuel-price",
        type=float,
        default=DEFAULT_FUEL_PRICE,
        help="Fuel price per tonne.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Print the catalog and a headless fouling projection for one vessel."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Hull Fouling Simulation Engine v{__version__}")
    print("=" * 56)

    # -- Catalog --------------------------------------------------------------
    catalog = default_catalog()
    print(f"\nVessel catalog: {len(catalog)} vessels")
    for category in catalog.categories():
        print(f"  {category}")
        for vessel in catalog.by_category(category):
            print(f"    {vessel.id:<24} {vessel.name}")

    # -- Engine ---------------------------------------------------------------
    try:
        sim = Simulation(
            vessel=args.vessel,
            speed_knots=args.speed,
            fuel_price_per_tonne=args.fuel_price,
            catalog=catalog,
        )
    except (InvalidConfigError, UnknownVesselError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 2

    config = sim.config
    print(f"\nVessel : {config.vessel.name}")
    print(f"Speed  : {config.speed_knots:g} kn")
    if is_above_service_speed(config.speed_knots, config.vessel):
        print("         (above typical service speed for this vessel)")
    print(f"Fuel   : {config.fuel_price_per_tonne:g} per tonne")
    print("-" * 56)

    # -- Projection -----------------------------------------------------------
    try:
        result = simulate_voyage(sim, days=args.days, step_days=1.0)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 2
    print(
        f"\n  {'Elapsed':>9}  {'AHR (um)':>8}  {'Fouling':>8}  "
        f"{'Penalty':>7}  {'Fuel t/d':>8}  {'CO2 (t)':>8}"
    )
    for i, day in enumerate(result["day_trace"]):
        last = i == len(result["day_trace"]) - 1
        if (i + 1) % _REPORT_INTERVAL_DAYS and not last:
            continue
        roughness = result["roughness_trace"][i]
        print(
            f"  {format_elapsed(day):>9}  {roughness:8.1f}  "
            f"{fouling_severity(roughness):>8}  "
            f"{result['fuel_penalty_trace'][i]:6.1f}%  "
            f"{result['daily_fuel_trace'][i]:8.2f}  "
            f"{format_compact(result['emissions_trace'][i]):>8}"
        )

    final = result["final_state"]
    _, penalty_share = emissions_breakdown(final)
    print(f"\nCumulative CO2   : {format_compact(final.emissions)} t")
    print(
        f"  from fouling   : {format_compact(final.emissions_penalty)} t "
        f"({penalty_share * 100:.1f}%)"
    )
    print(f"Cumulative cost  : {format_compact(final.fuel_cost_total)}")
    print(f"  from fouling   : {format_compact(final.fuel_cost_penalty)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
