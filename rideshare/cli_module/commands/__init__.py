"""Command modules for the RideShare CLI."""

from rideshare.cli_module.commands.fare_commands import fare_command
from rideshare.cli_module.commands.demo_commands import demo_command
from rideshare.cli_module.commands.interactive_commands import interactive_command

__all__ = [
    'fare_command',
    'demo_command',
    'interactive_command',
]
