"""Run command for sail."""

import os
import sys
from pathlib import Path

import click

from ...core.container_runner import ContainerRunner
from ...models.runner import Runner
from ...services.exceptions import ServiceError
from ..helpers import get_docker_service, load_config


@click.command()
@click.argument('project_dir', type=click.Path(exists=True, file_okay=False, resolve_path=True))
@click.option('--ip', required=True, help='Static IP address on the network')
@click.option('--name', help='Container name (defaults to the project name)')
@click.option('--image', help='Image to run (defaults to the configured image)')
@click.option('--hostname', help='Container hostname (defaults to the container name)')
@click.option('--network', help='Network to attach to (defaults to the configured network)')
@click.option('--test-cmd', help='Run this command once instead of code-server')
@click.pass_context
def run(ctx, project_dir, ip, name, image, hostname, network, test_cmd):
    """Create and start a container for PROJECT_DIR"""
    config = load_config(ctx)
    project_name = Path(project_dir).name
    name = name or project_name

    runner_args = dict(
        container_name=name,
        project_name=project_name,
        hostname=hostname or name,
        project_local_dir=project_dir,
        host_user=str(os.getuid()),
        network=network or config.default_network,
        ip=ip,
    )
    if test_cmd:
        runner = Runner.one_shot(test_cmd, **runner_args)
    else:
        runner = Runner(**runner_args)

    docker_service = get_docker_service()
    try:
        if runner.network == config.default_network:
            docker_service.ensure_network(config.default_network, config.default_subnet)
        container_id = ContainerRunner(docker_service, config).run(
            runner, image or config.default_image
        )
    except ServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Started container {name} ({container_id[:12]}) at {ip}")
