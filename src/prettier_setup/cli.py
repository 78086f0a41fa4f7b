"""prettier-setup command-line entry point.

Usage:
    prettier-setup        (or: npx/pnpm dlx/yarn dlx, python -m prettier_setup)

Run from a project root containing package.json. Exit status is 0 on success and 1
when package.json is missing, the shared config cannot be installed, or anything
unexpected goes wrong.
"""

import argparse
import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from prettier_setup import __version__
from prettier_setup.console import configure_logging, debug_enabled, header, highlight
from prettier_setup.exceptions import InstallError, PackageJsonNotFoundError, SetupError
from prettier_setup.setup.env_detector import PackageManager, detect_package_manager
from prettier_setup.setup.installer import (
    PACKAGE_JSON,
    Runner,
    install_formatter,
    install_shared_config,
    is_formatter_installed,
    run_command_prefix,
)
from prettier_setup.setup.materializer import (
    ProjectFiles,
    create_config_pointer,
    create_editor_settings,
    create_ignore_file,
)
from prettier_setup.setup.settings import SetupSettings, load_settings

logger = logging.getLogger(__name__)


def check_package_json(files: ProjectFiles) -> None:
    """Ensure the project has a package.json.

    Raises:
        PackageJsonNotFoundError: If package.json is missing
    """
    if not files.exists(PACKAGE_JSON):
        raise PackageJsonNotFoundError(str(files.path(PACKAGE_JSON)))


def run_setup(
    files: ProjectFiles,
    settings: SetupSettings,
    environ: Optional[Mapping[str, str]] = None,
    runner: Optional[Runner] = None,
) -> PackageManager:
    """Run every setup step against the project in files.root.

    Returns:
        The detected package manager

    Raises:
        PackageJsonNotFoundError: package.json is missing (nothing is written)
        InstallError: The shared config package failed to install
    """
    check_package_json(files)

    manager = detect_package_manager(environ=environ, exists=files.exists)
    logger.info(f"Detected package manager: {manager}")

    if not is_formatter_installed(files, settings.formatter_package):
        if not install_formatter(manager, runner=runner, package=settings.formatter_package):
            logger.warning(
                f"Could not install {settings.formatter_package} automatically. "
                "You can install it manually later."
            )
    else:
        logger.debug(f"{settings.formatter_package} already declared in {PACKAGE_JSON}")

    # Always reinstalled so the project tracks the latest published config
    if not install_shared_config(manager, runner=runner, package=settings.config_package):
        raise InstallError(settings.config_package)

    create_config_pointer(files, settings)
    create_ignore_file(files, settings)
    create_editor_settings(files, settings)

    return manager


def print_summary(manager: PackageManager) -> None:
    header("✨ Setup complete!")
    logger.info("You can now use prettier with your new config:")
    print(f"  {highlight(f'{run_command_prefix(manager)} prettier --write .')}")
    print()
    logger.info("VS Code is now configured to format on save using Prettier!")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prettier-setup",
        description="Install a shared Prettier config and editor settings into the current project.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[list[str]] = None,
    cwd: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    runner: Optional[Runner] = None,
) -> int:
    """Run the setup workflow and return the process exit status."""
    build_parser().parse_args(argv)

    if environ is None:
        environ = os.environ
    project_dir = Path.cwd() if cwd is None else Path(cwd)

    handler = configure_logging(debug=debug_enabled(environ))
    try:
        header("💅🏻 Setting up Prettier Config by Dheeraj Mahra")
        settings = load_settings(project_dir)
        manager = run_setup(ProjectFiles(project_dir), settings, environ=environ, runner=runner)
        print_summary(manager)
        return 0
    except SetupError as e:
        logger.error(str(e))
        if e.hint:
            logger.info(e.hint)
        return 1
    except Exception:
        logger.exception("An error occurred while setting up Prettier Configs:")
        return 1
    finally:
        logging.getLogger("prettier_setup").removeHandler(handler)


if __name__ == "__main__":
    sys.exit(main())
