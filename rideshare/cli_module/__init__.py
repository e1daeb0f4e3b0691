"""Command line interface for the RideShare application."""
