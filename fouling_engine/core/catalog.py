"""Static vessel catalog for the hull fouling simulation engine.

The catalog is an ordered, immutable collection of :class:`VesselProfile`
entries.  Entry order is significant: it doubles as display order, and
category grouping preserves the order in which categories first appear.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path

from fouling_engine.config import load_vessel_entries
from fouling_engine.core.errors import InvalidConfigError, UnknownVesselError
from fouling_engine.core.vessel import VesselProfile

logger = logging.getLogger(__name__)


class VesselCatalog:
    """Ordered lookup table of vessel profiles.

    Attributes:
        default_id: Identifier of the profile used when an engine is
            constructed without an explicit vessel.
    """

    __slots__ = ("_profiles", "_by_id", "_categories", "default_id")

    def __init__(self, profiles: Iterable[VesselProfile], default_id: str) -> None:
        ordered: tuple[VesselProfile, ...] = tuple(profiles)
        if not ordered:
            raise InvalidConfigError("Vessel catalog must not be empty.")

        by_id: dict[str, VesselProfile] = {}
        for profile in ordered:
            if profile.id in by_id:
                raise InvalidConfigError(f"Duplicate vessel id '{profile.id}'.")
            by_id[profile.id] = profile
        if default_id not in by_id:
            raise InvalidConfigError(
                f"Default vessel id '{default_id}' is not in the catalog."
            )

        # dict keys keep first-seen order
        categories = tuple(dict.fromkeys(p.category for p in ordered))

        self._profiles: tuple[VesselProfile, ...] = ordered
        self._by_id: dict[str, VesselProfile] = by_id
        self._categories: tuple[str, ...] = categories
        self.default_id: str = default_id

    def profiles(self) -> tuple[VesselProfile, ...]:
        """Return every profile in catalog order."""
        return self._profiles

    def categories(self) -> tuple[str, ...]:
        """Return the distinct categories in first-seen order."""
        return self._categories

    def by_category(self, category: str) -> tuple[VesselProfile, ...]:
        """Return the profiles of *category* in catalog order.

        An unknown category yields an empty tuple.
        """
        return tuple(p for p in self._profiles if p.category == category)

    def by_id(self, vessel_id: str) -> VesselProfile:
        """Return the profile with identifier *vessel_id*.

        Raises:
            UnknownVesselError: If no profile has that identifier.
        """
        try:
            return self._by_id[vessel_id]
        except KeyError:
            raise UnknownVesselError(vessel_id) from None

    def default_profile(self) -> VesselProfile:
        """Return the designated default profile."""
        return self._by_id[self.default_id]

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self) -> Iterator[VesselProfile]:
        return iter(self._profiles)

    def __contains__(self, vessel_id: object) -> bool:
        return vessel_id in self._by_id

    def __repr__(self) -> str:
        return f"VesselCatalog(vessels={len(self)}, default={self.default_id!r})"


def load_catalog(path: Path | None = None) -> VesselCatalog:
    """Build a :class:`VesselCatalog` from a YAML catalog file.

    Args:
        path: Optional override for the catalog file path.  Defaults to
            the packaged ``vessels.yaml``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is malformed.  Range violations surface as
            :class:`InvalidConfigError`.
    """
    default_id, entries = load_vessel_entries(path)
    catalog = VesselCatalog((VesselProfile(**entry) for entry in entries), default_id)
    logger.debug("Built %r", catalog)
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> VesselCatalog:
    """Return the packaged catalog, built once per process."""
    return load_catalog()
