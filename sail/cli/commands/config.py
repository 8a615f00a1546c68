"""Configuration management commands for sail."""

import click

from ...models.config import SailConfig
from ..helpers import get_config_manager, load_config


@click.group()
def config():
    """Manage sail configuration"""
    pass


@config.command()
@click.pass_context
def show(ctx):
    """Display current configuration"""
    click.echo(load_config(ctx).model_dump_json(indent=2))


@config.command()
@click.option('--force', '-f', is_flag=True, help='Overwrite an existing config file')
@click.pass_context
def init(ctx, force):
    """Write a default configuration file"""
    config_manager = get_config_manager(ctx)
    if config_manager.config_path.exists() and not force:
        click.echo(f"Config already exists at {config_manager.config_path}")
        return

    config_manager.save(SailConfig())
    click.echo(f"Wrote default config to {config_manager.config_path}")
