"""Image introspection: what an image declares about the containers built from it."""

import logging
import posixpath
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.mount import Mount
from ..services.docker_service import DockerService
from ..services.exceptions import MalformedShareError
from ..utils.path_resolver import PathResolver
from .constants import GUEST_HOME_DIR, PROJECT_ROOT_LABEL, SHARE_LABEL_PREFIX
from .labels import propagate_labels

logger = logging.getLogger(__name__)


def parse_share(value: str) -> Mount:
    """Parse a ``source:target`` share declaration.

    Raises:
        MalformedShareError: If value isn't exactly two colon separated tokens
    """
    tokens = value.split(":")
    if len(tokens) != 2:
        raise MalformedShareError(value)
    return Mount(source=tokens[0], target=tokens[1])


@dataclass
class ImageDeclarations:
    """Sail metadata declared by an image."""

    labels: Dict[str, str] = field(default_factory=dict)
    shares: List[Mount] = field(default_factory=list)
    project_root: Optional[str] = None

    @classmethod
    def from_inspect(cls, attrs: Dict[str, Any]) -> 'ImageDeclarations':
        """Project an image inspect payload into its declarations.

        Raises:
            MalformedShareError: If any share label is malformed
        """
        labels = (attrs.get("Config") or {}).get("Labels") or {}
        shares = [
            parse_share(v) for k, v in labels.items() if k.startswith(SHARE_LABEL_PREFIX)
        ]
        return cls(
            labels=propagate_labels(labels),
            shares=shares,
            project_root=labels.get(PROJECT_ROOT_LABEL),
        )

    def project_dir(self, project_name: str) -> str:
        """Guest directory the project is mounted at, resolved."""
        parent = self.project_root or GUEST_HOME_DIR
        return PathResolver.resolve_guest_path(posixpath.join(parent, project_name))


class ImageIntrospector:
    """Reads sail declarations from images."""

    def __init__(self, docker_service: DockerService):
        self.docker_service = docker_service

    def inspect(self, image: str) -> ImageDeclarations:
        """Read the declarations of image.

        Raises:
            ImageNotFoundError: If image not found
            ImageInspectError: If inspection fails
            MalformedShareError: If a share label is malformed
        """
        declarations = ImageDeclarations.from_inspect(self.docker_service.inspect_image(image))
        logger.debug(
            f"Image {image} declares {len(declarations.shares)} share(s), "
            f"{len(declarations.labels)} sail label(s), project root {declarations.project_root}"
        )
        return declarations
