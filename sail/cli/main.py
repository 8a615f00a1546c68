"""Main CLI entry point for sail."""

import click

from .commands.config import config
from .commands.inspect import inspect
from .commands.run import run
from .helpers import configure_logging


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--config', 'config_path', envvar='SAIL_CONFIG', type=click.Path(dir_okay=False),
              help='Path to the config file')
@click.pass_context
def cli(ctx, verbose, config_path):
    """sail - Run development containers assembled from layered images"""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


# Register commands
cli.add_command(run)
cli.add_command(inspect)
cli.add_command(config)


if __name__ == '__main__':
    cli()
