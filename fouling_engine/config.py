"""Configuration loader for the hull fouling simulation engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
CATALOG_PATH: Path = DATA_DIR / "vessels.yaml"

DEFAULT_TIME_MULTIPLIER: float = 1.0  # simulated days per real second
DEFAULT_FUEL_PRICE: float = 500.0  # currency units per tonne

_REQUIRED_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "category",
    "reference_speed",
    "base_fuel_consumption",
    "hull_length",
    "base_roughness",
    "fouling_rate",
)

_NUMERIC_FIELDS: tuple[str, ...] = _REQUIRED_FIELDS[3:]  # all except id/name/category


def load_vessel_entries(path: Path | None = None) -> tuple[str, list[dict[str, Any]]]:
    """Load raw vessel catalog entries from a YAML file.

    Entries are checked for required fields and numeric types and returned
    in file order.  Range checks belong to :class:`VesselProfile`.

    Args:
        path: Optional override for the catalog file path.

    Returns:
        Tuple of ``(default_id, entries)`` where *entries* is a list of
        plain dicts with float-coerced numeric fields.

    Raises:
        FileNotFoundError: If the catalog file does not exist.
        ValueError: If the file lacks a ``default`` id or a ``vessels``
            list, or an entry is missing fields or has non-numeric values.
    """
    catalog_path = path or CATALOG_PATH
    if not catalog_path.exists():
        raise FileNotFoundError(f"Vessel catalog file not found: {catalog_path}")

    with open(catalog_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"Vessel catalog {catalog_path} must be a mapping.")
    default_id = data.get("default")
    if not default_id:
        raise ValueError(f"Vessel catalog {catalog_path} has no 'default' id.")
    raw_vessels = data.get("vessels")
    if not isinstance(raw_vessels, list) or not raw_vessels:
        raise ValueError(f"Vessel catalog {catalog_path} has no 'vessels' list.")

    entries: list[dict[str, Any]] = []
    for idx, entry in enumerate(raw_vessels):
        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Vessel entry {idx} ({entry.get('id', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        # --- Validate numeric types ---
        for field in _NUMERIC_FIELDS:
            val = entry[field]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Vessel entry {idx} ({entry['id']}): "
                    f"'{field}' must be numeric, got {type(val).__name__}"
                )

        entries.append(
            {
                "id": str(entry["id"]),
                "name": str(entry["name"]),
                "category": str(entry["category"]),
                "reference_speed": float(entry["reference_speed"]),
                "base_fuel_consumption": float(entry["base_fuel_consumption"]),
                "hull_length": float(entry["hull_length"]),
                "base_roughness": float(entry["base_roughness"]),
                "fouling_rate": float(entry["fouling_rate"]),
                "description": str(entry.get("description", "")),
            }
        )

    logger.debug("Loaded %d vessel entries from %s", len(entries), catalog_path)
    return str(default_id), entries
