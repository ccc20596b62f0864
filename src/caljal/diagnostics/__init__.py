"""Diagnostics package.

- pretty_month, nowruz_table, round_trip: always available
- leap_years: requires the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["pretty_month", "nowruz_table", "round_trip", "leap_years"]
