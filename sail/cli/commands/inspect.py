"""Inspect command for sail."""

import sys

import click
from tabulate import tabulate

from ...core.state_recoverer import runner_from_container
from ...services.exceptions import ServiceError
from ..helpers import get_docker_service, load_config


@click.command()
@click.argument('name')
@click.option('--network', help='Network to look the address up on (defaults to the configured network)')
@click.pass_context
def inspect(ctx, name, network):
    """Show how container NAME was assembled"""
    config = load_config(ctx)
    docker_service = get_docker_service()

    try:
        runner = runner_from_container(docker_service, name, network or config.default_network)
    except ServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    rows = [
        ["Container", runner.container_name],
        ["Project", runner.project_name],
        ["Hostname", runner.hostname],
        ["Local dir", runner.project_local_dir],
        ["User", runner.host_user],
        ["Network", runner.network],
        ["IP", runner.ip],
    ]
    click.echo(tabulate(rows, tablefmt="plain"))
