"""Rebuilding runners from existing containers."""

import logging

from ..models.runner import Runner
from ..services.docker_service import DockerService
from .constants import PROJECT_LOCAL_DIR_LABEL, PROJECT_NAME_LABEL

logger = logging.getLogger(__name__)


def runner_from_container(docker_service: DockerService, name: str, network: str) -> Runner:
    """Get a runner from the container named name.

    Everything comes from the container's stored config plus its live address
    on network; nothing is re-derived from the image.

    Raises:
        ContainerNotFoundError: If there is no such container
        ContainerInspectError: If the container can't be inspected
        NetworkLookupError: If the container has no address on network
    """
    attrs = docker_service.inspect_container(name)
    config = attrs.get("Config") or {}
    labels = config.get("Labels") or {}

    runner = Runner(
        container_name=name,
        project_name=labels.get(PROJECT_NAME_LABEL, ""),
        hostname=config.get("Hostname", ""),
        project_local_dir=labels.get(PROJECT_LOCAL_DIR_LABEL, ""),
        host_user=config.get("User", ""),
        network=network,
    )
    runner.ip = docker_service.container_ip(name, network)
    logger.debug(f"Recovered runner for {name} at {runner.ip}")
    return runner
