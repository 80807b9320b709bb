"""Hull fouling simulation engine."""

__version__ = "0.1.0"
