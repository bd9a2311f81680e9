"""Command line interface for geotemporal_uuid."""
