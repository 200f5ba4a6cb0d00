"""User level settings providing defaults for the command line"""

import configparser
import logging
import os
import platform
from pathlib import Path
from typing import Optional

APP_NAME = "vrs"

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

default_cfg = {"git": {"commit": "true", "push": "true"}}

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/vrs").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))

logger = logging.getLogger(__name__)


def get_config_file() -> Path:
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A read-only accessor for the user settings file.

    Missing sections or keys fall back to the given default.

    Usage:
        config = ConfigAccessor()
        push = config.getboolean('git', 'push', default=True)
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Args:
            config_path: Path to the settings file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = Path(config_path)

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            try:
                self.config.read(self.config_path)
            except configparser.Error as e:
                logger.warning(
                    f"Ignoring unreadable settings file {self.config_path}: {e}"
                )
                self.config = configparser.ConfigParser()

    def getboolean(self, section: str, key: str, default: bool = False) -> bool:
        """
        Boolean value of ``key`` in ``section``.

        Values that configparser can't read as a boolean are ignored with a
        warning and ``default`` is returned.
        """
        try:
            return self.config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return default
        except ValueError:
            logger.warning(
                f"Invalid boolean for [{section}] {key} in {self.config_path}, "
                f"using {default}"
            )
            return default


def git_defaults(accessor: Optional[ConfigAccessor] = None) -> tuple[bool, bool]:
    """
    Default (commit, push) flags from the user settings, enabled when unset.
    """
    accessor = accessor or ConfigAccessor()
    commit = accessor.getboolean(
        "git", "commit", default=default_cfg["git"]["commit"] == "true"
    )
    push = accessor.getboolean(
        "git", "push", default=default_cfg["git"]["push"] == "true"
    )
    return commit, push
