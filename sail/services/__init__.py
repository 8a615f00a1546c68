"""Service layer for abstracting Docker operations."""

from .docker_service import DockerService
from .exceptions import (
    ServiceError,
    DockerServiceError,
    ImageNotFoundError,
    ContainerNotFoundError,
    ImageInspectError,
    ContainerInspectError,
    ContainerCreateError,
    ContainerStartError,
    ContainerTimeoutError,
    NetworkLookupError,
    MissingAddressError,
    MalformedShareError,
    HostEnvironmentError,
    CodeServerNotFoundError,
    ConfigError,
)

__all__ = [
    "DockerService",
    "ServiceError",
    "DockerServiceError",
    "ImageNotFoundError",
    "ContainerNotFoundError",
    "ImageInspectError",
    "ContainerInspectError",
    "ContainerCreateError",
    "ContainerStartError",
    "ContainerTimeoutError",
    "NetworkLookupError",
    "MissingAddressError",
    "MalformedShareError",
    "HostEnvironmentError",
    "CodeServerNotFoundError",
    "ConfigError",
]
