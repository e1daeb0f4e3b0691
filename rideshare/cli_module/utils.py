"""Display helpers for the CLI interface."""

from typing import Any, Dict, List

import click
from tabulate import tabulate

HEADER_WIDTH = 50


def format_money(amount: float) -> str:
    """Format an amount as dollars."""
    return f"${amount:.2f}"


def echo_header(title: str) -> None:
    """Print a section header."""
    click.echo("\n" + "=" * HEADER_WIDTH)
    click.echo(title)
    click.echo("=" * HEADER_WIDTH)


def _ride_rows(rides: List[Dict[str, Any]]) -> List[List[Any]]:
    return [
        [
            ride["id"],
            ride["label"],
            f"{ride['pickup_location']} → {ride['dropoff_location']}",
            f"{ride['distance']:.2f} mi",
            format_money(ride["fare"]),
        ]
        for ride in rides
    ]


def echo_rides(rides: List[Dict[str, Any]]) -> None:
    """Print a table of ride details."""
    click.echo(tabulate(
        _ride_rows(rides),
        headers=["Ride ID", "Type", "Route", "Distance", "Fare"],
        tablefmt="grid"
    ))


def echo_driver_summary(summary: Dict[str, Any]) -> None:
    """Print a driver summary with the driver's assigned rides."""
    click.echo("\n🚖 Driver Information:\n")
    click.echo(f"Driver ID: {summary['id']}")
    click.echo(f"Name: {summary['name']}")
    click.echo(f"Rating: {summary['rating']:.1f}/5.0")
    click.echo(f"Total Rides: {summary['ride_count']}")
    click.echo(f"Total Earnings: {format_money(summary['total_earnings'])}")

    if summary["rides"]:
        click.echo("\n--- Assigned Rides ---")
        echo_rides(summary["rides"])


def echo_rider_summary(summary: Dict[str, Any]) -> None:
    """Print a rider summary with the rider's ride history."""
    click.echo("\n🧍 Rider Information:\n")
    click.echo(f"Rider ID: {summary['id']}")
    click.echo(f"Name: {summary['name']}")
    click.echo(f"Payment Method: {summary['payment_method']}")
    click.echo(f"Total Rides: {summary['ride_count']}")
    click.echo(f"Total Spending: {format_money(summary['total_spending'])}")

    if summary["rides"]:
        click.echo("\n--- Ride History ---")
        echo_rides(summary["rides"])
    else:
        click.echo("No rides requested yet.")


def echo_ride_report(report: Dict[str, Any]) -> None:
    """Print every ride in the system with the total revenue."""
    if not report["rides"]:
        click.echo("No rides in the system.")
        return

    echo_rides(report["rides"])
    click.echo(f"\nTotal rides processed: {report['ride_count']}")
    click.echo(f"Total revenue: {format_money(report['total_revenue'])}")


def echo_system_stats(stats: Dict[str, Any]) -> None:
    """Print system statistics and the ride type distribution."""
    click.echo(tabulate(
        [
            ["Total Drivers", stats["driver_count"]],
            ["Total Riders", stats["rider_count"]],
            ["Total Rides", stats["ride_count"]],
            ["Total Revenue", format_money(stats["total_revenue"])],
        ],
        tablefmt="pretty"
    ))

    click.echo("\nRide Type Distribution:")
    click.echo(tabulate(
        [[tag.capitalize(), count] for tag, count in stats["distribution"].items()],
        headers=["Type", "Rides"],
        tablefmt="pretty"
    ))
