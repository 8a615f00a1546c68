"""CLI commands for sail."""
