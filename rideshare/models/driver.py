"""Driver entity for the RideShare application."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from rideshare.config import DEFAULT_DRIVER_RATING, MIN_RATING, MAX_RATING
from rideshare.errors import InvalidRatingError
from rideshare.models.ride import Ride

logger = logging.getLogger(__name__)


@dataclass
class Driver:
    """
    Represents a driver in the ride-sharing system.

    Attributes:
        id: Unique identifier for the driver
        name: Driver's name
        rating: Driver's current rating (1-5)
    """
    id: int
    name: str
    rating: float = DEFAULT_DRIVER_RATING
    _rides: List[Ride] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Log the new driver."""
        logger.info("Created driver: %s (ID: %s)", self.name, self.id)

    @property
    def rides(self) -> Tuple[Ride, ...]:
        """Get the rides assigned to this driver in assignment order."""
        return tuple(self._rides)

    @property
    def ride_count(self) -> int:
        """Get the number of rides assigned to this driver."""
        return len(self._rides)

    def assign_ride(self, ride: Optional[Ride]) -> None:
        """Assign a ride to the driver. A missing ride is ignored."""
        if ride is None:
            return
        self._rides.append(ride)
        logger.info("Driver %s assigned to ride ID: %s", self.name, ride.id)

    def total_earnings(self) -> float:
        """Calculate total earnings from all assigned rides."""
        return sum(ride.fare() for ride in self._rides)

    def update_rating(self, new_rating: float) -> float:
        """
        Update the driver's rating with feedback from a ride.

        The new rating is averaged with the current one.

        Args:
            new_rating: Rating given for a ride (1.0 - 5.0)

        Returns:
            float: The updated rating

        Raises:
            InvalidRatingError: If the rating is out of range
        """
        if not MIN_RATING <= new_rating <= MAX_RATING:
            logger.warning("Rejected rating %s for driver %s", new_rating, self.name)
            raise InvalidRatingError(new_rating)

        self.rating = (self.rating + new_rating) / 2.0
        logger.info("Driver %s rating updated to %.1f", self.name, self.rating)
        return self.rating

    def summary(self) -> Dict[str, Any]:
        """
        Get driver information including all assigned rides.

        Returns:
            Dict: Driver data with ride count, earnings and ride details
        """
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "ride_count": self.ride_count,
            "total_earnings": self.total_earnings(),
            "rides": [ride.details() for ride in self._rides],
        }
