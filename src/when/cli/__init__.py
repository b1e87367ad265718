"""Command-line interface for when."""
