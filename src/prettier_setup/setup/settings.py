"""Settings for the setup workflow.

Defaults target @dheerajmahra/prettier-config. A project (or user) can override package
and file names with a small YAML file:

    # .prettier-setup.yaml
    config_package: "@acme/prettier-config"
    editor_dir: ".vscode"
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml
from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

PROJECT_SETTINGS_FILE = ".prettier-setup.yaml"
APP_NAME = "prettier-setup"


@dataclass(frozen=True)
class SetupSettings:
    """Package and file names used by the workflow.

    Attributes:
        formatter_package: Formatter package to ensure is installed
        config_package: Shared config package, referenced from the config pointer
        config_file: Config pointer file name
        ignore_file: Ignore-patterns file name
        editor_dir: Editor settings directory
        editor_settings_file: Settings file inside editor_dir
    """

    formatter_package: str = "prettier"
    config_package: str = "@dheerajmahra/prettier-config"
    config_file: str = ".prettierrc"
    ignore_file: str = ".prettierignore"
    editor_dir: str = ".vscode"
    editor_settings_file: str = "settings.json"

    @property
    def editor_settings_path(self) -> str:
        return f"{self.editor_dir}/{self.editor_settings_file}"


def settings_paths(project_dir: Path) -> list[Path]:
    """Candidate settings files, highest priority first."""
    return [
        project_dir / PROJECT_SETTINGS_FILE,
        Path(user_config_dir(APP_NAME)) / "config.yaml",
    ]


def load_settings(project_dir: Optional[Path] = None) -> SetupSettings:
    """Load settings from the first settings file found, else defaults.

    Args:
        project_dir: Project root (default: current directory)

    Returns:
        SetupSettings with any valid overrides applied
    """
    if project_dir is None:
        project_dir = Path.cwd()

    for config_path in settings_paths(project_dir):
        if not config_path.exists():
            continue
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load settings from {config_path}: {e}")
            return SetupSettings()

        logger.debug(f"Loaded settings from {config_path}")
        return apply_overrides(SetupSettings(), data, source=config_path)

    return SetupSettings()


def apply_overrides(settings: SetupSettings, data: Any, source: Optional[Path] = None) -> SetupSettings:
    """Apply a mapping of overrides, skipping unknown keys and non-string values."""
    if data is None:
        return settings
    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings in {source}: expected a mapping")
        return settings

    known = {f.name for f in fields(SetupSettings)}
    overrides: dict[str, str] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown setting '{key}' in {source}")
        elif not isinstance(value, str) or not value:
            logger.warning(f"Ignoring setting '{key}' in {source}: expected a non-empty string")
        else:
            overrides[key] = value

    return replace(settings, **overrides)
