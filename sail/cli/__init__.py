"""Command-line interface for sail."""
