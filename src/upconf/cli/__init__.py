"""Command line interface for upconf."""
