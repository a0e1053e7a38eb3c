"""Diagnostics package.

- pretty_triad, round_trip: always available
- year_drift --plot: optional (requires the diagnostics extras)
"""

__all__ = ["pretty_triad", "round_trip", "year_drift"]
