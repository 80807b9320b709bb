"""Operator control presets for the hull fouling simulation engine.

Discrete choices offered to whoever drives :meth:`Simulation.reconfigure`.
"""

from fouling_engine.core.vessel import VesselProfile

TIME_MULTIPLIER_PRESETS: tuple[float, ...] = (0.25, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0)

MIN_SPEED_KNOTS: int = 4
MAX_SPEED_KNOTS: int = 30
SPEED_SNAP_STEP: int = 2
SPEED_SNAP_POINTS: tuple[float, ...] = tuple(
    float(k) for k in range(MIN_SPEED_KNOTS, MAX_SPEED_KNOTS + 1, SPEED_SNAP_STEP)
)

KNOTS_TO_MS: float = 0.514444
SERVICE_SPEED_MARGIN: float = 1.2  # x reference speed


def snap_speed(knots: float) -> float:
    """Return the snap point nearest to *knots*.

    Values outside the slider range snap to the nearest end.  Ties go to
    the lower point.
    """
    return min(SPEED_SNAP_POINTS, key=lambda point: abs(point - knots))


def knots_to_ms(knots: float) -> float:
    """Convert a speed in knots to metres per second."""
    return knots * KNOTS_TO_MS


def is_above_service_speed(speed_knots: float, vessel: VesselProfile) -> bool:
    """Return True if *speed_knots* exceeds the vessel's typical service speed.

    The threshold is ``SERVICE_SPEED_MARGIN * vessel.reference_speed``;
    a speed exactly on the threshold is not flagged.
    """
    return speed_knots > vessel.reference_speed * SERVICE_SPEED_MARGIN
