"""Locating the cached code-server binary mounted into containers."""

from pathlib import Path

from ..core.constants import CODE_SERVER_CACHE_DIR
from ..models.config import SailConfig
from ..services.exceptions import CodeServerNotFoundError
from .config_manager import meta_root


def load_code_server(config: SailConfig) -> str:
    """Return the host path of the code-server binary.

    An explicitly configured path wins over the cache under the meta root.
    Fetching the binary into the cache is not done here.

    Raises:
        CodeServerNotFoundError: If no binary is available
    """
    if config.code_server_path:
        path = Path(config.code_server_path).expanduser()
    else:
        path = meta_root(config) / CODE_SERVER_CACHE_DIR / "code-server"

    if not path.is_file():
        raise CodeServerNotFoundError(f"failed to load code-server: {path} does not exist")
    return str(path)
