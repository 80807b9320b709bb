"""Vessel profile model for the hull fouling simulation engine."""

import math
from dataclasses import dataclass

from fouling_engine.core.errors import InvalidConfigError

_POSITIVE_FIELDS: tuple[str, ...] = (
    "reference_speed",
    "base_fuel_consumption",
    "hull_length",
    "base_roughness",
)


@dataclass(frozen=True)
class VesselProfile:
    """Immutable reference parameters for one class of vessel.

    Attributes:
        id: Unique catalog identifier (e.g. ``"panamax_bulker"``).
        name: Display name.
        category: Catalog grouping label (e.g. ``"Bulk Carrier"``).
        reference_speed: Service speed in knots (> 0).
        base_fuel_consumption: Fuel burn in tonnes/day at the reference
            speed with a clean hull (> 0).
        hull_length: Length in metres (> 0).
        base_roughness: Clean-hull average hull roughness (AHR) in
            microns (> 0).
        fouling_rate: Roughness growth in microns/day at full coating
            health (>= 0).
        description: Free-text description.
    """

    id: str
    name: str
    category: str
    reference_speed: float
    base_fuel_consumption: float
    hull_length: float
    base_roughness: float
    fouling_rate: float
    description: str = ""

    def __post_init__(self) -> None:
        """Validate vessel parameters."""
        if not self.id:
            raise InvalidConfigError("Vessel id must not be empty.")
        if not self.name:
            raise InvalidConfigError(f"Vessel '{self.id}' name must not be empty.")
        if not self.category:
            raise InvalidConfigError(
                f"Vessel '{self.id}' category must not be empty."
            )
        for field_name in _POSITIVE_FIELDS:
            value = getattr(self, field_name)
            if not (math.isfinite(value) and value > 0.0):
                raise InvalidConfigError(
                    f"Vessel '{self.id}': {field_name} must be a finite value "
                    f"> 0.0, got {value}."
                )
        if not (math.isfinite(self.fouling_rate) and self.fouling_rate >= 0.0):
            raise InvalidConfigError(
                f"Vessel '{self.id}': fouling_rate must be a finite value "
                f">= 0.0, got {self.fouling_rate}."
            )
