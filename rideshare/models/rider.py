"""Rider entity for the RideShare application."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from rideshare.config import DEFAULT_PAYMENT_METHOD
from rideshare.models.ride import Ride

logger = logging.getLogger(__name__)


@dataclass
class Rider:
    """
    Represents a passenger in the ride-sharing system.

    Attributes:
        id: Unique identifier for the rider
        name: Rider's name
        payment_method: How the rider pays, e.g. "Credit Card" or "PayPal"
    """
    id: int
    name: str
    payment_method: str = DEFAULT_PAYMENT_METHOD
    _rides: List[Ride] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Log the new rider."""
        logger.info("Created rider: %s (ID: %s)", self.name, self.id)

    @property
    def rides(self) -> Tuple[Ride, ...]:
        """Get the rides requested by this rider in request order."""
        return tuple(self._rides)

    @property
    def ride_count(self) -> int:
        """Get the number of rides requested by this rider."""
        return len(self._rides)

    def request_ride(self, ride: Optional[Ride]) -> None:
        """Add a ride to the rider's history. A missing ride is ignored."""
        if ride is None:
            return
        self._rides.append(ride)
        logger.info("Rider %s requested ride ID: %s", self.name, ride.id)

    def total_spending(self) -> float:
        """Calculate total spending on rides."""
        return sum(ride.fare() for ride in self._rides)

    def set_payment_method(self, payment_method: str) -> None:
        """Update the payment method."""
        self.payment_method = payment_method
        logger.info("Payment method for %s updated to: %s", self.name, payment_method)

    def ride_history(self) -> List[Dict[str, Any]]:
        """Get details of every requested ride, numbered from 1."""
        history = []
        for position, ride in enumerate(self._rides, start=1):
            entry = ride.details()
            entry["position"] = position
            history.append(entry)
        return history

    def summary(self) -> Dict[str, Any]:
        """
        Get rider information including all requested rides.

        Returns:
            Dict: Rider data with ride count, spending and ride details
        """
        return {
            "id": self.id,
            "name": self.name,
            "payment_method": self.payment_method,
            "ride_count": self.ride_count,
            "total_spending": self.total_spending(),
            "rides": [ride.details() for ride in self._rides],
        }
