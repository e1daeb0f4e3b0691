"""Interactive menu for the RideShare CLI."""

import click

from rideshare.errors import RideShareError
from rideshare.models.ride import RideType
from rideshare.services.registry import RideRegistry
from rideshare.cli_module.commands.demo_commands import run_demo
from rideshare.cli_module.utils import (
    echo_driver_summary, echo_rider_summary, echo_ride_report, echo_system_stats
)

MENU_OPTIONS = [
    "Add Driver",
    "Add Rider",
    "Create Ride",
    "View Driver Info",
    "View Rider Info",
    "Rate Driver",
    "Change Payment Method",
    "Ride Report",
    "System Statistics",
    "Run Demo (All Features)",
    "Exit",
]

EXIT_CHOICE = len(MENU_OPTIONS)


def _show_menu() -> None:
    click.echo("\n=== RIDE SHARING SYSTEM ===")
    for number, option in enumerate(MENU_OPTIONS, start=1):
        click.echo(f"{number}. {option}")


def _add_driver(registry: RideRegistry) -> None:
    name = click.prompt("Driver name")
    rating = click.prompt("Initial rating (1-5)", type=float, default=5.0)
    driver = registry.add_driver(name, rating)
    click.echo(f"Driver {driver.name} added with ID {driver.id}.")


def _add_rider(registry: RideRegistry) -> None:
    name = click.prompt("Rider name")
    payment = click.prompt("Payment method", default="Credit Card")
    rider = registry.add_rider(name, payment)
    click.echo(f"Rider {rider.name} added with ID {rider.id}.")


def _create_ride(registry: RideRegistry) -> None:
    ride_type = click.prompt("Ride type", type=click.Choice(RideType.tags()))
    pickup = click.prompt("Pickup location")
    dropoff = click.prompt("Dropoff location")
    distance = click.prompt("Distance (miles)", type=float)
    driver = registry.find_driver(click.prompt("Driver ID", type=int))
    rider = registry.find_rider(click.prompt("Rider ID", type=int))

    if driver is None or rider is None:
        click.echo("Invalid driver or rider ID!", err=True)
        return

    ride = registry.create_ride(ride_type, pickup, dropoff, distance, driver, rider)
    click.echo(f"{ride.label} {ride.id} created. Fare: ${ride.fare():.2f}")


def _view_driver(registry: RideRegistry) -> None:
    driver = registry.find_driver(click.prompt("Driver ID", type=int))
    if driver is None:
        click.echo("Driver not found!", err=True)
        return
    echo_driver_summary(driver.summary())


def _view_rider(registry: RideRegistry) -> None:
    rider = registry.find_rider(click.prompt("Rider ID", type=int))
    if rider is None:
        click.echo("Rider not found!", err=True)
        return
    echo_rider_summary(rider.summary())


def _rate_driver(registry: RideRegistry) -> None:
    driver = registry.find_driver(click.prompt("Driver ID", type=int))
    if driver is None:
        click.echo("Driver not found!", err=True)
        return
    rating = click.prompt("Rating (1-5)", type=float)
    driver.update_rating(rating)
    click.echo(f"Driver {driver.name} rating is now {driver.rating:.1f}.")


def _change_payment(registry: RideRegistry) -> None:
    rider = registry.find_rider(click.prompt("Rider ID", type=int))
    if rider is None:
        click.echo("Rider not found!", err=True)
        return
    rider.set_payment_method(click.prompt("New payment method"))
    click.echo(f"Payment method for {rider.name} updated to {rider.payment_method}.")


ACTIONS = {
    1: _add_driver,
    2: _add_rider,
    3: _create_ride,
    4: _view_driver,
    5: _view_rider,
    6: _rate_driver,
    7: _change_payment,
    8: lambda registry: echo_ride_report(registry.ride_report()),
    9: lambda registry: echo_system_stats(registry.system_stats()),
    10: run_demo,
}


@click.command(name="interactive", help="Manage drivers, riders and rides from a menu.")
def interactive_command():
    """
    Run the interactive menu.

    Everything entered lives only until the session ends.
    """
    registry = RideRegistry()

    while True:
        _show_menu()
        choice = click.prompt("Enter your choice", type=click.IntRange(1, EXIT_CHOICE))

        if choice == EXIT_CHOICE:
            click.echo("Thank you for using the Ride Sharing System!")
            return

        try:
            ACTIONS[choice](registry)
        except RideShareError as e:
            click.echo(f"Error: {str(e)}", err=True)
