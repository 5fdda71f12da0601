"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    INVALID_INPUT = 2


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    EOL = "\n"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "ESMPATH_LOG_LEVEL"

    # Checked in order; first suffix match wins.
    MODULE_EXTENSIONS = (".mjs", ".js", ".jsx", ".mts", ".ts", ".tsx", ".cjs")

    # Directory names the tree scanner never descends into.
    EXCLUDED_DIRS = frozenset({"node_modules"})

    # Used by the CLI scan command when no --ext is given.
    DEFAULT_SCAN_EXTENSIONS = MODULE_EXTENSIONS

    HTTP_PREFIX = "http://"
    HTTPS_PREFIX = "https://"
    FILE_PREFIX = "file://"
    LOCAL_PREFIXES = ("file://", "/", "./", "../")

    DIR_MODE = 0o755
