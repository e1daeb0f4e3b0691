"""Registry service for the RideShare application."""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from rideshare.config import LOG_LEVEL, DEFAULT_DRIVER_RATING, DEFAULT_PAYMENT_METHOD
from rideshare.errors import UnknownRideTypeError
from rideshare.models.ride import Ride, RideType
from rideshare.models.driver import Driver
from rideshare.models.rider import Rider

# Set up logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


class RideRegistry:
    """
    Owns every driver, rider and ride in the system.

    The registry hands out identifiers (one independent sequence per entity
    kind, starting at 1) and builds rides of the requested tier, linking each
    ride to its driver and rider. Nothing is ever removed.
    """

    def __init__(self):
        self._rides: List[Ride] = []
        self._rides_by_id: Dict[int, Ride] = {}
        self._drivers: List[Driver] = []
        self._riders: List[Rider] = []
        self._next_ride_id = 1
        self._next_driver_id = 1
        self._next_rider_id = 1
        logger.info("Ride sharing registry initialized")

    @property
    def rides(self) -> Tuple[Ride, ...]:
        """Get all linked rides in creation order."""
        return tuple(self._rides)

    @property
    def drivers(self) -> Tuple[Driver, ...]:
        """Get all drivers in registration order."""
        return tuple(self._drivers)

    @property
    def riders(self) -> Tuple[Rider, ...]:
        """Get all riders in registration order."""
        return tuple(self._riders)

    def add_driver(self, name: str, rating: float = DEFAULT_DRIVER_RATING) -> Driver:
        """
        Register a new driver.

        Args:
            name: Driver's name
            rating: Initial rating

        Returns:
            Driver: The registered driver
        """
        driver = Driver(self._next_driver_id, name, rating)
        self._next_driver_id += 1
        self._drivers.append(driver)
        return driver

    def add_rider(self, name: str, payment_method: str = DEFAULT_PAYMENT_METHOD) -> Rider:
        """
        Register a new rider.

        Args:
            name: Rider's name
            payment_method: Payment method

        Returns:
            Rider: The registered rider
        """
        rider = Rider(self._next_rider_id, name, payment_method)
        self._next_rider_id += 1
        self._riders.append(rider)
        return rider

    def create_ride(self, ride_type: Union[str, RideType], pickup: str, dropoff: str,
                    distance: float, driver: Optional[Driver],
                    rider: Optional[Rider]) -> Ride:
        """
        Create a ride and assign it to a driver and rider.

        An unknown ride type is rejected before an identifier is allocated.
        When the driver or the rider is missing the ride is still built (and
        its identifier used up) but it is not linked anywhere.

        Args:
            ride_type: Tier tag ("standard", "premium", "economy") or RideType
            pickup: Pickup location
            dropoff: Dropoff location
            distance: Distance in miles
            driver: Driver to assign the ride to
            rider: Rider requesting the ride

        Returns:
            Ride: The created ride

        Raises:
            UnknownRideTypeError: If the ride type is not supported
        """
        try:
            resolved_type = RideType.from_tag(ride_type)
        except UnknownRideTypeError:
            logger.warning("Unknown ride type: %s", ride_type)
            raise

        ride = Ride(self._next_ride_id, pickup, dropoff, distance, resolved_type)
        self._next_ride_id += 1
        logger.info("Created %s with ID: %s", resolved_type.label, ride.id)

        if driver is None or rider is None:
            logger.warning(
                "Ride ID %s has no %s; it was not assigned",
                ride.id, "driver" if driver is None else "rider")
            return ride

        self._rides.append(ride)
        self._rides_by_id[ride.id] = ride
        driver.assign_ride(ride)
        rider.request_ride(ride)
        logger.info("Ride %s created and assigned successfully", ride.id)
        return ride

    def find_driver(self, driver_id: int) -> Optional[Driver]:
        """Find a driver by ID, or None if there is no such driver."""
        for driver in self._drivers:
            if driver.id == driver_id:
                return driver
        return None

    def find_rider(self, rider_id: int) -> Optional[Rider]:
        """Find a rider by ID, or None if there is no such rider."""
        for rider in self._riders:
            if rider.id == rider_id:
                return rider
        return None

    def find_ride(self, ride_id: int) -> Optional[Ride]:
        """Find a linked ride by ID, or None if there is no such ride."""
        return self._rides_by_id.get(ride_id)

    def aggregate_revenue(self) -> float:
        """Calculate total revenue across all rides."""
        return sum(ride.fare() for ride in self._rides)

    def ride_type_distribution(self) -> Dict[str, int]:
        """Count rides per tier. Every tier is present, including empty ones."""
        distribution = {tag: 0 for tag in RideType.tags()}
        for ride in self._rides:
            distribution[ride.ride_type.tag] += 1
        return distribution

    def ride_report(self) -> Dict[str, Any]:
        """
        Get the details of every ride together with the revenue they earn.

        Returns:
            Dict: Ride details in creation order, ride count and total revenue
        """
        rides = [ride.details() for ride in self._rides]
        return {
            "rides": rides,
            "ride_count": len(rides),
            "total_revenue": sum(ride["fare"] for ride in rides),
        }

    def system_stats(self) -> Dict[str, Any]:
        """
        Get system statistics.

        Returns:
            Dict: Entity counts, total revenue and ride type distribution
        """
        return {
            "driver_count": len(self._drivers),
            "rider_count": len(self._riders),
            "ride_count": len(self._rides),
            "total_revenue": self.aggregate_revenue(),
            "distribution": self.ride_type_distribution(),
        }
