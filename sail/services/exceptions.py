"""Custom exceptions for service layer."""


class ServiceError(Exception):
    """Base exception for all service-related errors."""

    pass


class DockerServiceError(ServiceError):
    """Exception raised for Docker service operations."""

    pass


class ImageNotFoundError(DockerServiceError):
    """Exception raised when a Docker image is not found."""

    pass


class ContainerNotFoundError(DockerServiceError):
    """Exception raised when a Docker container is not found."""

    pass


class ImageInspectError(DockerServiceError):
    """Exception raised when an image cannot be inspected."""

    pass


class ContainerInspectError(DockerServiceError):
    """Exception raised when a container cannot be inspected."""

    pass


class ContainerCreateError(DockerServiceError):
    """Exception raised when the engine rejects a container create."""

    pass


class ContainerStartError(DockerServiceError):
    """Exception raised when a created container fails to start."""

    pass


class ContainerTimeoutError(DockerServiceError):
    """Exception raised when create/start exceeds its deadline."""

    pass


class MissingAddressError(ServiceError):
    """Exception raised when a container would be created without a static IP."""

    pass


class NetworkLookupError(DockerServiceError):
    """Exception raised when a container's address on a network can't be found."""

    pass


class MalformedShareError(ServiceError):
    """Exception raised for a share label that isn't of the form source:target."""

    def __init__(self, value: str):
        super().__init__(f"invalid share {value!r}")
        self.value = value


class HostEnvironmentError(ServiceError):
    """Exception raised when the host environment can't support assembly."""

    pass


class CodeServerNotFoundError(HostEnvironmentError):
    """Exception raised when no cached code-server binary is available."""

    pass


class ConfigError(ServiceError):
    """Exception raised for unreadable or invalid configuration."""

    pass
