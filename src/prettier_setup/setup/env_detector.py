"""Package manager detection.

The invoking package manager is identified from the npm_config_user_agent variable
(set by npm, yarn and pnpm when they run a bin), falling back to lock files in the
project directory.
"""

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

USER_AGENT_ENV = "npm_config_user_agent"


class PackageManager(Enum):
    """Supported JavaScript package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    def __str__(self) -> str:
        return self.value


# Checked in order: "pnpm" must win over "npm", which is a substring of it
USER_AGENT_ORDER = (PackageManager.PNPM, PackageManager.YARN, PackageManager.NPM)

LOCK_FILES = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("package-lock.json", PackageManager.NPM),
)

DEFAULT_MANAGER = PackageManager.NPM


def detect_package_manager(
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[Path] = None,
    exists: Optional[Callable[[str], bool]] = None,
) -> PackageManager:
    """Detect which package manager the user runs.

    Args:
        environ: Environment mapping (default: os.environ)
        cwd: Project directory to scan for lock files (default: current directory)
        exists: Lock file check taking a name relative to the project (default: checks cwd)

    Returns:
        Detected PackageManager; npm when nothing matches

    Example:
        >>> detect_package_manager({"npm_config_user_agent": "pnpm/8.15.1 npm/? node/v20.11.0"})
        <PackageManager.PNPM: 'pnpm'>
    """
    if environ is None:
        environ = os.environ
    if exists is None:
        root = Path.cwd() if cwd is None else cwd

        def exists(name: str) -> bool:
            return (root / name).exists()

    user_agent = environ.get(USER_AGENT_ENV, "")
    if user_agent:
        for manager in USER_AGENT_ORDER:
            if manager.value in user_agent:
                logger.debug(f"Detected {manager} from {USER_AGENT_ENV}: {user_agent}")
                return manager

    for lock_file, manager in LOCK_FILES:
        if exists(lock_file):
            logger.debug(f"Detected {manager} from {lock_file}")
            return manager

    logger.debug(f"No package manager signal found, defaulting to {DEFAULT_MANAGER}")
    return DEFAULT_MANAGER
