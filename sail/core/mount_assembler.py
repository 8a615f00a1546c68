"""Mount assembly for sail containers."""

import logging
from typing import Callable, List, Optional

from ..models.config import SailConfig
from ..models.mount import Mount
from ..models.runner import Runner
from ..services.exceptions import HostEnvironmentError
from ..utils.code_server import load_code_server
from ..utils.config_manager import meta_root
from ..utils.path_resolver import PathResolver
from .constants import (
    CODE_SERVER_BIN_PATH,
    GLOBAL_STORAGE_DIR,
    GLOBAL_STORAGE_DIR_MODE,
    GLOBAL_STORAGE_DIR_NAME,
    VSCODE_CONFIG_DIR,
    VSCODE_EXTENSIONS_DIR,
)
from .image_introspector import ImageDeclarations

logger = logging.getLogger(__name__)


def strip_duplicate_mounts(mounts: List[Mount]) -> List[Mount]:
    """Keep only the first mount for each guest target.

    Targets are compared once resolved, so ``~/x`` and ``/home/user/x`` are the
    same target.
    """
    seen = set()
    result = []
    for mount in mounts:
        target = PathResolver.resolve_guest_path(mount.target)
        if target in seen:
            logger.debug(f"Dropping mount {mount.source} -> {mount.target}, target already mounted")
            continue
        seen.add(target)
        result.append(mount)
    return result


def resolve_mounts(mounts: List[Mount], home_dir: Optional[str] = None) -> List[Mount]:
    """Resolve sources against the host home and targets against the guest home.

    Raises:
        HostEnvironmentError: If the host home directory can't be determined
    """
    if home_dir is None:
        home_dir = PathResolver.host_home_dir()
    return [
        m.with_paths(
            PathResolver.resolve_host_path(m.source, home_dir),
            PathResolver.resolve_guest_path(m.target),
        )
        for m in mounts
    ]


class MountAssembler:
    """Builds the ordered, deduplicated and resolved mount list for a container."""

    def __init__(
        self,
        config: SailConfig,
        code_server_loader: Callable[[SailConfig], str] = load_code_server,
    ):
        self.config = config
        self.code_server_loader = code_server_loader

    def global_storage_dir(self, container_name: str) -> str:
        """Create, if needed, and return the host global storage dir of a container.

        globalStorage holds the UI state and other code-server specific state.

        Raises:
            HostEnvironmentError: If the directory can't be created
        """
        path = meta_root(self.config) / container_name / GLOBAL_STORAGE_DIR_NAME
        try:
            path.mkdir(mode=GLOBAL_STORAGE_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise HostEnvironmentError(f"Failed to create {path}: {e}") from e
        return str(path)

    def builtin_mounts(self, runner: Runner, declarations: ImageDeclarations) -> List[Mount]:
        """Mounts every sail container gets, in priority order."""
        return [
            Mount(source=VSCODE_CONFIG_DIR, target=VSCODE_CONFIG_DIR),
            Mount(source=VSCODE_EXTENSIONS_DIR, target=VSCODE_EXTENSIONS_DIR),
            Mount(
                source=self.global_storage_dir(runner.container_name),
                target=GLOBAL_STORAGE_DIR,
            ),
            Mount(
                source=runner.project_local_dir,
                target=declarations.project_dir(runner.project_name),
            ),
            Mount(source=self.code_server_loader(self.config), target=CODE_SERVER_BIN_PATH),
        ]

    def assemble(self, runner: Runner, declarations: ImageDeclarations) -> List[Mount]:
        """Assemble the final mount list.

        Image shares come after the built-in mounts, so on a colliding target
        the built-in mount is kept and the share dropped.
        """
        mounts = self.builtin_mounts(runner, declarations)
        # Shares come from the final image so they include the hat and the base image.
        mounts.extend(declarations.shares)
        mounts = resolve_mounts(strip_duplicate_mounts(mounts))
        logger.debug(f"Assembled {len(mounts)} mount(s) for {runner.container_name}")
        return mounts
