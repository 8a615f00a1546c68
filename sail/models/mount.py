"""Mount model."""

from dataclasses import dataclass, replace

from docker.types import Mount as DockerMount

from ..core.constants import MOUNT_TYPE_BIND


@dataclass(frozen=True)
class Mount:
    """A bind mount from a host source to a guest target.

    Source and target may still carry a ``~`` placeholder until they are
    resolved by the mount assembler.
    """

    source: str
    target: str
    type: str = MOUNT_TYPE_BIND

    def with_paths(self, source: str, target: str) -> 'Mount':
        """Return a copy with new source and target."""
        return replace(self, source=source, target=target)

    def to_docker(self) -> DockerMount:
        """Convert to the Docker SDK mount spec."""
        return DockerMount(target=self.target, source=self.source, type=self.type)
