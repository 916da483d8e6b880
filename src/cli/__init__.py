"""Command-line interface for mapsearch."""
