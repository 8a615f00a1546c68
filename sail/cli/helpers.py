"""CLI Helper Functions for sail.

Shared setup for commands: configuration loading and Docker connectivity,
with consistent error reporting and exit codes.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from sail.models.config import SailConfig
from sail.services.docker_service import DockerService
from sail.services.exceptions import ConfigError, DockerServiceError
from sail.utils.config_manager import ConfigManager


def configure_logging(verbose: bool) -> None:
    """Configure root logging for a CLI invocation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def get_config_manager(ctx: click.Context) -> ConfigManager:
    """ConfigManager for the config path given on the command line, if any."""
    config_path: Optional[Path] = (ctx.obj or {}).get('config_path')
    return ConfigManager(config_path)


def load_config(ctx: click.Context) -> SailConfig:
    """Load configuration, exit with error on failure."""
    try:
        return get_config_manager(ctx).load()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def get_docker_service() -> DockerService:
    """Initialize Docker service with error handling.

    Note:
        Exits with error message if Docker is not available.
    """
    try:
        return DockerService()
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
