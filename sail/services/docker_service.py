"""Docker service for abstracting Docker operations."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import docker
import docker.errors
import requests.exceptions
from docker.types import IPAMConfig, IPAMPool

from ..models.mount import Mount
from .exceptions import (
    ContainerCreateError,
    ContainerInspectError,
    ContainerNotFoundError,
    ContainerStartError,
    ContainerTimeoutError,
    DockerServiceError,
    ImageInspectError,
    ImageNotFoundError,
    NetworkLookupError,
)

logger = logging.getLogger(__name__)


class DockerService:
    """Service for Docker operations with clean abstractions.

    Uses the low-level API client so that create requests carry exactly the
    host and networking config sail assembles.
    """

    def __init__(self, client: Optional[docker.DockerClient] = None):
        """Initialize Docker service and test connection."""
        if client is not None:
            self.client = client
            return
        try:
            self.client = docker.from_env()
            self.client.ping()
        except docker.errors.DockerException as e:
            if "connection refused" in str(e).lower() or "cannot connect" in str(e).lower():
                raise DockerServiceError(
                    "Docker daemon is not running. Please start Docker Desktop or the Docker service."
                ) from e
            else:
                raise DockerServiceError(f"Failed to connect to Docker: {e}") from e

    @property
    def api(self):
        """The low-level Docker API client."""
        return self.client.api

    @contextmanager
    def request_timeout(self, timeout: Optional[float]):
        """Bound every API request made inside the block by timeout seconds."""
        if timeout is None:
            yield
            return
        previous = self.api.timeout
        self.api.timeout = timeout
        try:
            yield
        finally:
            self.api.timeout = previous

    def inspect_image(self, image: str) -> Dict[str, Any]:
        """Inspect an image.

        Args:
            image: Image name or ID

        Returns:
            The engine's inspect payload

        Raises:
            ImageNotFoundError: If image not found
            ImageInspectError: If inspection fails
        """
        try:
            return self.api.inspect_image(image)
        except docker.errors.ImageNotFound as e:
            raise ImageNotFoundError(f"Image '{image}' not found") from e
        except docker.errors.APIError as e:
            raise ImageInspectError(f"Failed to inspect {image}: {e}") from e
        except Exception as e:
            raise ImageInspectError(f"Unexpected error inspecting image {image}: {e}") from e

    def inspect_container(self, name: str) -> Dict[str, Any]:
        """Inspect a container.

        Args:
            name: Container name or ID

        Returns:
            The engine's inspect payload

        Raises:
            ContainerNotFoundError: If container not found
            ContainerInspectError: If inspection fails
        """
        try:
            return self.api.inspect_container(name)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(f"Container '{name}' not found") from e
        except docker.errors.APIError as e:
            raise ContainerInspectError(f"Failed to inspect {name}: {e}") from e
        except Exception as e:
            raise ContainerInspectError(f"Unexpected error inspecting container {name}: {e}") from e

    def create_container(
        self,
        name: str,
        image: str,
        command: List[str],
        hostname: str,
        user: str,
        labels: Dict[str, str],
        mounts: List[Mount],
        network: str,
        ip: Optional[str] = None,
        privileged: bool = True,
        timeout: Optional[float] = None,
    ) -> str:
        """Create a container attached to a single network with a static IP.

        Args:
            name: Container name
            image: Image name
            command: Command to run
            hostname: Container hostname
            user: User spec, ``uid:group``
            labels: Container labels
            mounts: Resolved bind mounts
            network: Network to attach to
            ip: Static IPv4 address on network
            privileged: Run privileged
            timeout: Request timeout in seconds

        Returns:
            ID of the created container

        Raises:
            ImageNotFoundError: If image not found
            ContainerTimeoutError: If the request times out
            ContainerCreateError: If creation fails
        """
        host_config = self.api.create_host_config(
            mounts=[m.to_docker() for m in mounts],
            privileged=privileged,
            network_mode=network,
        )
        networking_config = self.api.create_networking_config({
            network: self.api.create_endpoint_config(ipv4_address=ip),
        })
        try:
            with self.request_timeout(timeout):
                created = self.api.create_container(
                    image=image,
                    command=command,
                    hostname=hostname,
                    user=user,
                    labels=labels,
                    host_config=host_config,
                    networking_config=networking_config,
                    name=name,
                )
        except requests.exceptions.Timeout as e:
            raise ContainerTimeoutError(f"Timed out creating container {name}: {e}") from e
        except docker.errors.ImageNotFound as e:
            raise ImageNotFoundError(f"Image '{image}' not found") from e
        except docker.errors.APIError as e:
            raise ContainerCreateError(f"Failed to create container {name}: {e}") from e
        except Exception as e:
            raise ContainerCreateError(f"Unexpected error creating container {name}: {e}") from e
        logger.info(f"Created container {name} from {image}")
        return created.get("Id", name)

    def start_container(self, name: str, timeout: Optional[float] = None) -> None:
        """Start a created container.

        Raises:
            ContainerTimeoutError: If the request times out
            ContainerStartError: If start fails
        """
        try:
            with self.request_timeout(timeout):
                self.api.start(name)
        except requests.exceptions.Timeout as e:
            raise ContainerTimeoutError(f"Timed out starting container {name}: {e}") from e
        except docker.errors.APIError as e:
            raise ContainerStartError(f"Failed to start container {name}: {e}") from e
        except Exception as e:
            raise ContainerStartError(f"Unexpected error starting container {name}: {e}") from e
        logger.info(f"Started container {name}")

    def remove_container(self, name: str, force: bool = False) -> None:
        """Remove a container.

        Args:
            name: Container name or ID
            force: Force remove even if running

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If removal fails
        """
        try:
            self.api.remove_container(name, force=force)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(f"Container '{name}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to remove container {name}: {e}") from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error removing container {name}: {e}") from e
        logger.info(f"Removed container {name}")

    def container_ip(self, name: str, network: str) -> str:
        """Get the live IP address of a container on a network.

        Raises:
            NetworkLookupError: If the container has no address on network
        """
        try:
            attrs = self.api.inspect_container(name)
        except docker.errors.APIError as e:
            raise NetworkLookupError(f"Failed to get container {name} IP: {e}") from e
        except Exception as e:
            raise NetworkLookupError(f"Unexpected error getting container {name} IP: {e}") from e

        networks = (attrs.get("NetworkSettings") or {}).get("Networks") or {}
        endpoint = networks.get(network)
        if endpoint is None:
            raise NetworkLookupError(f"Container {name} is not attached to network {network}")
        ip = endpoint.get("IPAddress")
        if not ip:
            raise NetworkLookupError(f"Container {name} has no IP on network {network}")
        return ip

    def ensure_network(self, name: str, subnet: str) -> None:
        """Create a bridge network with subnet unless one named name exists.

        Raises:
            DockerServiceError: If listing or creating the network fails
        """
        try:
            # the engine's name filter matches substrings
            existing = self.client.networks.list(names=[name])
            if any(n.name == name for n in existing):
                logger.debug(f"Network {name} already exists")
                return
            ipam = IPAMConfig(pool_configs=[IPAMPool(subnet=subnet)])
            self.client.networks.create(name, driver="bridge", ipam=ipam)
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to ensure network {name}: {e}") from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error ensuring network {name}: {e}") from e
        logger.info(f"Created network {name} ({subnet})")
