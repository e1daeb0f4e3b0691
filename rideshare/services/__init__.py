"""Services for the RideShare application."""
from rideshare.services.registry import RideRegistry


__all__ = [
    'RideRegistry',
]
