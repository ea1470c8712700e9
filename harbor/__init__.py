"""Capacity-aware assignment of ships to docks and haulers."""

__version__ = "0.1.0"
