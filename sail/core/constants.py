"""Constants used throughout sail."""


# Reserved label namespace
SAIL_LABEL = "sail"
BASE_IMAGE_LABEL = SAIL_LABEL + ".base_image"
HAT_LABEL = SAIL_LABEL + ".hat"
PROJECT_LOCAL_DIR_LABEL = SAIL_LABEL + ".project_local_dir"
PROJECT_DIR_LABEL = SAIL_LABEL + ".project_dir"
PROJECT_NAME_LABEL = SAIL_LABEL + ".project_name"

# Image-declared metadata
SHARE_LABEL_PREFIX = "share."
PROJECT_ROOT_LABEL = "project_root"

# Guest environment contract
GUEST_HOME_DIR = "/home/user"
GUEST_GROUP = "user"
HOME_PLACEHOLDER = "~"
VSCODE_CONFIG_DIR = "~/.config/Code"
VSCODE_EXTENSIONS_DIR = "~/.vscode/extensions"
GLOBAL_STORAGE_DIR = "~/.local/share/code-server/globalStorage/"
CONTAINER_LOG_PATH = "/tmp/code-server.log"
CODE_SERVER_BIN_PATH = "/usr/bin/code-server"

CODE_SERVER_CMD = (
    "code-server --data-dir ~/.config/Code --extensions-dir ~/.vscode/extensions "
    "--allow-http --no-auth"
)

# Host side
META_ROOT_DIR = "~/.config/sail"
GLOBAL_STORAGE_DIR_NAME = "globalStorage"
GLOBAL_STORAGE_DIR_MODE = 0o750
CODE_SERVER_CACHE_DIR = "code-server"
CONFIG_FILE_NAME = "config.json"

# Defaults
DEFAULT_NETWORK = "sail"
DEFAULT_SUBNET = "172.30.0.0/16"
DEFAULT_IMAGE = "codercom/ubuntu-dev"

# Timeout values
CREATE_TIMEOUT = 30  # seconds, covers create + start

MOUNT_TYPE_BIND = "bind"
