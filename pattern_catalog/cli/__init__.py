"""Command-line interface for running the examples."""
