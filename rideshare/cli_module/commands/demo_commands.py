"""Automated demo command for the RideShare CLI."""

import click

from rideshare.config import DEMO_PAUSE
from rideshare.services.registry import RideRegistry
from rideshare.cli_module.utils import (
    echo_header, echo_driver_summary, echo_rider_summary,
    echo_ride_report, echo_system_stats
)

DEMO_DRIVERS = [
    ("John Smith", 4.8),
    ("Maria Garcia", 4.9),
    ("David Chen", 4.7),
]

DEMO_RIDERS = [
    ("Alice Johnson", "Credit Card"),
    ("Bob Wilson", "PayPal"),
    ("Carol Brown", "Apple Pay"),
]

# (ride type, pickup, dropoff, distance, driver index, rider index)
DEMO_RIDES = [
    ("standard", "Downtown", "Airport", 15.5, 0, 0),
    ("premium", "Hotel District", "Business Center", 8.2, 1, 1),
    ("economy", "University", "Shopping Mall", 12.0, 2, 2),
    ("premium", "City Center", "Suburbs", 22.7, 0, 1),
    ("standard", "Train Station", "Hospital", 6.3, 1, 0),
]

# Ratings given to each demo driver after their rides
DEMO_RATINGS = [5.0, 4.6, 4.9]


def _pause(enabled: bool) -> None:
    if enabled:
        click.pause("\n[Press any key to continue...]")


def run_demo(registry: RideRegistry, pause: bool = False) -> None:
    """
    Walk through the whole system with a fixed data set.

    Registers drivers and riders, creates rides of every type, then prints
    the ride report, every driver and rider, rating updates and the
    system statistics.

    Args:
        registry: Registry to populate
        pause: Wait for a key press between steps
    """
    echo_header("AUTOMATED DEMO - RIDE SHARING SYSTEM")

    echo_header("STEP 1: REGISTERING DRIVERS")
    drivers = [registry.add_driver(name, rating) for name, rating in DEMO_DRIVERS]
    for driver in drivers:
        click.echo(f"Driver {driver.name} registered (ID: {driver.id}, rating {driver.rating:.1f})")
    _pause(pause)

    echo_header("STEP 2: REGISTERING RIDERS")
    riders = [registry.add_rider(name, payment) for name, payment in DEMO_RIDERS]
    for rider in riders:
        click.echo(f"Rider {rider.name} registered (ID: {rider.id}, pays with {rider.payment_method})")
    _pause(pause)

    echo_header("STEP 3: CREATING RIDES")
    for ride_type, pickup, dropoff, distance, driver_index, rider_index in DEMO_RIDES:
        ride = registry.create_ride(
            ride_type, pickup, dropoff, distance,
            drivers[driver_index], riders[rider_index])
        click.echo(f"{ride.label} {ride.id}: {pickup} → {dropoff}")
    _pause(pause)

    echo_header("STEP 4: RIDE REPORT")
    echo_ride_report(registry.ride_report())
    _pause(pause)

    echo_header("STEP 5: DRIVER INFORMATION")
    for driver in drivers:
        echo_driver_summary(driver.summary())
    _pause(pause)

    echo_header("STEP 6: RIDER INFORMATION")
    for rider in riders:
        echo_rider_summary(rider.summary())
    _pause(pause)

    echo_header("STEP 7: UPDATING DRIVER RATINGS")
    for driver, rating in zip(drivers, DEMO_RATINGS):
        previous = driver.rating
        driver.update_rating(rating)
        click.echo(f"{driver.name}: {previous:.2f} → {driver.rating:.2f} (rated {rating})")
    _pause(pause)

    echo_header("STEP 8: SYSTEM STATISTICS")
    echo_system_stats(registry.system_stats())

    echo_header("DEMO COMPLETE")


@click.command(name="demo", help="Run the automated ride-sharing demo.")
@click.option("--pause/--no-pause", default=DEMO_PAUSE,
              help="Wait for a key press between demo steps")
def demo_command(pause):
    """Run the automated demo against a fresh registry."""
    run_demo(RideRegistry(), pause=pause)
