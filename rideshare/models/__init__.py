"""Entity models for the RideShare application."""
from rideshare.models.ride import Ride, RideType, BASE_RATE, calculate_fare, fare_table
from rideshare.models.driver import Driver
from rideshare.models.rider import Rider


__all__ = [
    'Ride',
    'RideType',
    'BASE_RATE',
    'calculate_fare',
    'fare_table',
    'Driver',
    'Rider',
]
