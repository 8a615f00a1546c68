"""Runner descriptor model."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.constants import GUEST_GROUP


class RunMode(str, Enum):
    """How the container's entry command behaves."""

    # code-server as the root process, lives as long as code-server does
    INTERACTIVE = "interactive"
    # runs a single command and exits
    ONE_SHOT = "one-shot"


@dataclass
class Runner:
    """Everything needed to assemble a sail container.

    A runner is never persisted. The container it describes carries all of
    its state in labels, so a runner can be rebuilt from the container at any
    time (see ``runner_from_container``).
    """

    container_name: str
    project_name: str
    hostname: str
    project_local_dir: str
    # uid on the host mapped to the container's "user" user
    host_user: str
    network: str
    ip: Optional[str] = None
    mode: RunMode = RunMode.INTERACTIVE
    test_cmd: Optional[str] = None

    def __post_init__(self):
        self.mode = RunMode(self.mode)
        if self.mode is RunMode.ONE_SHOT and not self.test_cmd:
            raise ValueError("one-shot runners need a command")
        if self.mode is RunMode.INTERACTIVE and self.test_cmd:
            raise ValueError("interactive runners don't take a command")

    @classmethod
    def one_shot(cls, command: str, **kwargs) -> 'Runner':
        """Create a runner whose container runs command once and exits."""
        return cls(mode=RunMode.ONE_SHOT, test_cmd=command, **kwargs)

    @property
    def user(self) -> str:
        """Container user spec, ``<uid>:user``.

        A host user recovered from an existing container already carries the
        group and is passed through as is.
        """
        if ":" in self.host_user:
            return self.host_user
        return f"{self.host_user}:{GUEST_GROUP}"
