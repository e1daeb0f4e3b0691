"""Exceptions raised by the RideShare core."""

from rideshare.config import MIN_RATING, MAX_RATING


class RideShareError(Exception):
    """Base exception for ride-sharing errors."""
    pass


class UnknownRideTypeError(RideShareError):
    """Raised when a ride type tag is not one of the supported tiers."""

    def __init__(self, ride_type):
        self.ride_type = ride_type
        super().__init__(
            f"Unknown ride type: {ride_type!r}. "
            "Must be one of: standard, premium, economy.")


class InvalidRatingError(RideShareError):
    """Raised when a driver rating falls outside the accepted range."""

    def __init__(self, rating):
        self.rating = rating
        super().__init__(
            f"Invalid rating {rating}. Must be between {MIN_RATING} and {MAX_RATING}.")
