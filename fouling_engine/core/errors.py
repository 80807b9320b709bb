"""Exception types for the hull fouling simulation engine."""


class InvalidConfigError(ValueError):
    """A vessel profile or simulation config failed validation."""


class UnknownVesselError(LookupError):
    """A catalog lookup was given an identifier with no matching vessel."""

    def __init__(self, vessel_id: str) -> None:
        super().__init__(f"Unknown vessel id: {vessel_id!r}")
        self.vessel_id: str = vessel_id
