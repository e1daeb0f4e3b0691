"""RideShare: a small ride-sharing marketplace with tiered fares."""

__version__ = "0.1.0"
