"""Ride entity for the RideShare application."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Union

from rideshare.errors import UnknownRideTypeError

# Fare per unit of distance before the tier multiplier is applied
BASE_RATE = 2.5


class RideType(Enum):
    """
    Ride tiers offered by the marketplace.

    Each member carries the multiplier applied to the base fare, a display
    label and a short description of the tier.
    """
    STANDARD = ("standard", 1.0, "Standard Ride", "Everyday ride")
    PREMIUM = ("premium", 1.8, "Premium Ride", "Luxury vehicle, complimentary refreshments")
    ECONOMY = ("economy", 0.7, "Economy Ride", "Budget-friendly option")

    def __init__(self, tag: str, multiplier: float, label: str, description: str):
        self.tag = tag
        self.multiplier = multiplier
        self.label = label
        self.description = description

    @classmethod
    def from_tag(cls, tag: Union[str, "RideType"]) -> "RideType":
        """
        Resolve a ride type tag such as "premium".

        Args:
            tag: Tag string or an existing RideType member

        Returns:
            RideType: The matching tier

        Raises:
            UnknownRideTypeError: If the tag is not a supported tier
        """
        if isinstance(tag, cls):
            return tag
        for ride_type in cls:
            if ride_type.tag == tag:
                return ride_type
        raise UnknownRideTypeError(tag)

    @classmethod
    def tags(cls) -> List[str]:
        """Get all tier tags in declaration order."""
        return [ride_type.tag for ride_type in cls]


def calculate_fare(ride_type: RideType, distance: float) -> float:
    """Calculate the fare for a tier and distance."""
    return BASE_RATE * distance * ride_type.multiplier


def fare_table(distance: float) -> Dict[str, float]:
    """Get the fare of every tier for the given distance."""
    return {ride_type.tag: calculate_fare(ride_type, distance) for ride_type in RideType}


@dataclass(frozen=True)
class Ride:
    """
    Represents a ride in the ride-sharing system.

    A ride never changes once created; the registry, the assigned driver and
    the requesting rider all hold the same instance.

    Attributes:
        id: Unique identifier assigned by the registry
        pickup_location: Where the ride starts
        dropoff_location: Where the ride ends
        distance: Distance of the ride in miles
        ride_type: Tier of the ride, fixes the fare multiplier
    """
    id: int
    pickup_location: str
    dropoff_location: str
    distance: float
    ride_type: RideType = RideType.STANDARD

    def fare(self) -> float:
        """Calculate the fare for this ride."""
        return calculate_fare(self.ride_type, self.distance)

    @property
    def label(self) -> str:
        """Get the display label of the ride's tier."""
        return self.ride_type.label

    def details(self) -> Dict[str, Any]:
        """
        Get a structured summary of the ride.

        Returns:
            Dict: Tier, identifier, locations, distance and fare
        """
        return {
            "type": self.ride_type.tag,
            "label": self.ride_type.label,
            "description": self.ride_type.description,
            "id": self.id,
            "pickup_location": self.pickup_location,
            "dropoff_location": self.dropoff_location,
            "distance": self.distance,
            "fare": self.fare(),
        }
