"""Utilities for resolving home-relative paths on the host and in the guest."""

import os
import posixpath
from pathlib import Path
from typing import Optional

from ..core.constants import GUEST_HOME_DIR, HOME_PLACEHOLDER
from ..services.exceptions import HostEnvironmentError


class PathResolver:
    """Resolves ``~`` placeholders against host or guest home directories."""

    @staticmethod
    def resolve_path(home_dir: str, path: str) -> str:
        """Substitute a leading ``~`` in path with home_dir.

        Only a bare ``~`` or a ``~/`` prefix is a placeholder; ``~user`` style
        paths and everything else are returned untouched.
        """
        if path == HOME_PLACEHOLDER:
            return home_dir
        if path.startswith(HOME_PLACEHOLDER + "/"):
            return home_dir.rstrip("/") + path[len(HOME_PLACEHOLDER):]
        return path

    @staticmethod
    def host_home_dir() -> str:
        """Return the invoking user's home directory.

        Raises:
            HostEnvironmentError: If the home directory can't be determined
        """
        try:
            return str(Path.home())
        except (KeyError, RuntimeError) as e:
            raise HostEnvironmentError(f"Failed to determine host home directory: {e}") from e

    @classmethod
    def resolve_host_path(cls, path: str, home_dir: Optional[str] = None) -> str:
        """Resolve path against the host home and make it absolute."""
        if home_dir is None:
            home_dir = cls.host_home_dir()
        return os.path.abspath(cls.resolve_path(home_dir, path))

    @classmethod
    def resolve_guest_path(cls, path: str) -> str:
        """Resolve path against the fixed guest home.

        Relative results are taken relative to the guest home, so the returned
        path is always absolute.
        """
        resolved = cls.resolve_path(GUEST_HOME_DIR, path)
        if not posixpath.isabs(resolved):
            resolved = posixpath.join(GUEST_HOME_DIR, resolved)
        return posixpath.normpath(resolved)
