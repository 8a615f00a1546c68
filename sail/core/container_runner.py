"""Container running functionality."""

import logging
import time
from typing import Callable, Dict, List, Optional

from ..models.config import SailConfig
from ..models.runner import RunMode, Runner
from ..services.docker_service import DockerService
from ..services.exceptions import (
    ContainerStartError,
    ContainerTimeoutError,
    DockerServiceError,
    MissingAddressError,
)
from ..utils.code_server import load_code_server
from ..utils.deadline import Deadline
from .constants import (
    CODE_SERVER_CMD,
    CONTAINER_LOG_PATH,
    CREATE_TIMEOUT,
    PROJECT_DIR_LABEL,
    PROJECT_LOCAL_DIR_LABEL,
    PROJECT_NAME_LABEL,
    SAIL_LABEL,
)
from .image_introspector import ImageIntrospector
from .mount_assembler import MountAssembler

logger = logging.getLogger(__name__)


def build_command(runner: Runner, project_dir: str) -> List[str]:
    """Entry command for the container.

    Interactive containers run code-server as the root process so the
    container is only up while code-server is. Its logs go both to a file in
    the container and to stdout, so `docker logs` shows a failed startup.
    """
    if runner.mode is RunMode.ONE_SHOT:
        cmd = f"{runner.test_cmd}; exit 1"
    else:
        cmd = f"cd {project_dir}; {CODE_SERVER_CMD} 2>&1 | tee {CONTAINER_LOG_PATH}"
    return ["bash", "-c", cmd]


def build_labels(runner: Runner, project_dir: str, image_labels: Dict[str, str]) -> Dict[str, str]:
    """Control labels recording how the container was built."""
    labels = {
        SAIL_LABEL: "",
        PROJECT_DIR_LABEL: project_dir,
        PROJECT_LOCAL_DIR_LABEL: runner.project_local_dir,
        PROJECT_NAME_LABEL: runner.project_name,
    }
    labels.update(image_labels)
    return labels


class ContainerRunner:
    """Assembles and starts sail containers."""

    def __init__(
        self,
        docker_service: DockerService,
        config: Optional[SailConfig] = None,
        code_server_loader: Callable[[SailConfig], str] = load_code_server,
        timeout: float = CREATE_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize container runner."""
        self.docker_service = docker_service
        self.config = config or SailConfig()
        self.introspector = ImageIntrospector(docker_service)
        self.mount_assembler = MountAssembler(self.config, code_server_loader)
        self.timeout = timeout
        self.clock = clock

    def run(self, runner: Runner, image: str) -> str:
        """Create and start a container for runner from image.

        Args:
            runner: Descriptor of the container to create
            image: Fully resolved image reference

        Returns:
            ID of the started container

        Raises:
            ServiceError: If assembly fails or the engine rejects a request
            MissingAddressError: If runner has no IP to attach with
            ContainerTimeoutError: If create and start don't finish in time
        """
        if not runner.ip:
            raise MissingAddressError(
                f"Container {runner.container_name} needs a static IP on network {runner.network}"
            )
        deadline = Deadline(self.timeout, clock=self.clock)

        declarations = self.introspector.inspect(image)
        project_dir = declarations.project_dir(runner.project_name)
        mounts = self.mount_assembler.assemble(runner, declarations)

        container_id = self.docker_service.create_container(
            name=runner.container_name,
            image=image,
            command=build_command(runner, project_dir),
            hostname=runner.hostname,
            user=runner.user,
            labels=build_labels(runner, project_dir, declarations.labels),
            mounts=mounts,
            network=runner.network,
            ip=runner.ip,
            privileged=True,
            timeout=deadline.check("create"),
        )

        try:
            self.docker_service.start_container(
                runner.container_name, timeout=deadline.check("start")
            )
        except (ContainerStartError, ContainerTimeoutError):
            self._remove_unstarted(runner.container_name)
            raise
        return container_id

    def _remove_unstarted(self, name: str):
        try:
            self.docker_service.remove_container(name, force=True)
        except DockerServiceError as e:
            logger.warning(f"Failed to remove unstarted container {name}: {e}")
