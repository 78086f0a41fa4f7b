"""Dependency installation through the detected package manager.

Install commands for every manager live in one table (INSTALL_COMMANDS). Commands run
as blocking subprocesses with output streamed straight to the terminal; failures are
logged and reported as False.
"""

import logging
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from ..console import SUCCESS
from .env_detector import PackageManager
from .materializer import ProjectFiles

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
FORMATTER_PACKAGE = "prettier"
SHARED_CONFIG_PACKAGE = "@dheerajmahra/prettier-config"

Runner = Callable[..., Any]


@dataclass(frozen=True)
class InstallCommands:
    """Command templates for one package manager.

    Attributes:
        add_dev: argv prefix adding a dev dependency
        add_dev_exact: argv prefix adding a dev dependency pinned to an exact version
        run_prefix: Command used to run a locally installed bin
    """

    add_dev: tuple[str, ...]
    add_dev_exact: tuple[str, ...]
    run_prefix: str


INSTALL_COMMANDS: dict[PackageManager, InstallCommands] = {
    PackageManager.NPM: InstallCommands(
        add_dev=("npm", "install", "--save-dev"),
        add_dev_exact=("npm", "install", "--save-dev", "--save-exact"),
        run_prefix="npx",
    ),
    PackageManager.YARN: InstallCommands(
        add_dev=("yarn", "add", "-D"),
        add_dev_exact=("yarn", "add", "--dev", "--exact"),
        run_prefix="yarn",
    ),
    PackageManager.PNPM: InstallCommands(
        add_dev=("pnpm", "add", "-D"),
        add_dev_exact=("pnpm", "add", "--save-dev", "--save-exact"),
        run_prefix="pnpm",
    ),
}


def build_install_command(manager: PackageManager, package: str, exact: bool = False) -> list[str]:
    """Build the argv for installing package as a dev dependency.

    Examples:
        >>> build_install_command(PackageManager.YARN, "prettier", exact=True)
        ['yarn', 'add', '--dev', '--exact', 'prettier']
    """
    commands = INSTALL_COMMANDS[manager]
    prefix = commands.add_dev_exact if exact else commands.add_dev
    return [*prefix, package]


def run_command_prefix(manager: PackageManager) -> str:
    return INSTALL_COMMANDS[manager].run_prefix


def is_formatter_installed(files: ProjectFiles, package: str = FORMATTER_PACKAGE) -> bool:
    """Check whether package.json declares the formatter.

    Looks at dependencies and devDependencies. A missing or malformed package.json
    counts as not installed.
    """
    try:
        manifest = files.read_json(PACKAGE_JSON)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read {PACKAGE_JSON}: {e}")
        return False

    if not isinstance(manifest, dict):
        return False

    all_deps: dict[str, Any] = {}
    for section in ("dependencies", "devDependencies"):
        deps = manifest.get(section)
        if isinstance(deps, dict):
            all_deps.update(deps)

    return package in all_deps


def install_package(
    manager: PackageManager,
    package: str,
    exact: bool = False,
    runner: Optional[Runner] = None,
) -> bool:
    """Install a dev dependency with the given package manager.

    Args:
        manager: Package manager to use
        package: Package name (optionally with a version spec)
        exact: Pin the exact resolved version
        runner: subprocess.run-compatible callable (for tests)

    Returns:
        True if the command exited successfully
    """
    if runner is None:
        runner = subprocess.run

    command = build_install_command(manager, package, exact=exact)
    # Resolve npm.cmd and friends on Windows; shell=False needs a real executable
    executable = shutil.which(command[0])
    if executable:
        command[0] = executable

    logger.info(f"Installing {package} with {manager}...")
    logger.debug(f"Running: {' '.join(command)}")

    try:
        # No capture: the manager's progress output goes straight to the terminal
        runner(command, check=True)
    except subprocess.CalledProcessError as e:
        logger.error(f"Failed to install {package}")
        logger.error(f"Command exited with status {e.returncode}")
        return False
    except OSError as e:
        logger.error(f"Failed to install {package}")
        logger.error(str(e))
        return False

    logger.log(SUCCESS, f"Installed {package}")
    return True


def install_formatter(
    manager: PackageManager,
    runner: Optional[Runner] = None,
    package: str = FORMATTER_PACKAGE,
) -> bool:
    """Install the formatter pinned to an exact version."""
    return install_package(manager, package, exact=True, runner=runner)


def install_shared_config(
    manager: PackageManager,
    runner: Optional[Runner] = None,
    package: str = SHARED_CONFIG_PACKAGE,
) -> bool:
    """Install the shared config package."""
    return install_package(manager, package, exact=False, runner=runner)
