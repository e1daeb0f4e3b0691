"""Main CLI entry point for the RideShare application."""

import click

from rideshare import __version__

# Set context settings to properly display help for all commands
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
    "show_default": True
}

from rideshare.cli_module.commands import fare_command, demo_command, interactive_command


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, prog_name="rideshare")
def cli():
    """RideShare CLI for drivers, riders and tiered ride fares."""
    pass


# Register all commands
cli.add_command(fare_command)
cli.add_command(demo_command)
cli.add_command(interactive_command)


def main():
    """Entry point for the application."""
    cli()


if __name__ == '__main__':
    main()
