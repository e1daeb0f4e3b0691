"""Fare quote command for the RideShare CLI."""

import click
from tabulate import tabulate

from rideshare.models.ride import RideType, fare_table
from rideshare.cli_module.utils import format_money


@click.command(name="fare", help="Quote the fare of a ride for each ride type.")
@click.option("--distance", type=float, required=True, help="Distance of the ride in miles")
@click.option("--type", "ride_type", type=click.Choice(RideType.tags()),
              help="Only quote this ride type")
def fare_command(distance, ride_type):
    """Show the fare for a distance, per ride type."""
    fares = fare_table(distance)
    ride_types = [RideType.from_tag(ride_type)] if ride_type else list(RideType)

    table_data = [
        [
            rt.label,
            f"x{rt.multiplier}",
            rt.description,
            format_money(fares[rt.tag]),
        ]
        for rt in ride_types
    ]

    click.echo(f"\n💵 Fare quote for {distance:.2f} miles:\n")
    click.echo(tabulate(
        table_data,
        headers=["Type", "Multiplier", "Description", "Fare"],
        tablefmt="grid"
    ))
