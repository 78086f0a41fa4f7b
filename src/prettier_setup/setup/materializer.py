"""Project file materializers.

Writes .prettierrc, .prettierignore and .vscode/settings.json into the project. Every
function returns True when it wrote something and False when it skipped or failed;
none of them raise. All file access goes through ProjectFiles so callers can substitute
an in-memory implementation.
"""

import json
import logging
from pathlib import Path
from typing import Any

from ..console import SUCCESS
from .settings import SetupSettings

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
IGNORE_TEMPLATE = "prettierignore"
SETTINGS_TEMPLATE = "settings.json"


class ProjectFiles:
    """File access rooted at a project directory.

    Paths are relative to the root and use forward slashes.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def path(self, relpath: str) -> Path:
        return self.root / relpath

    def exists(self, relpath: str) -> bool:
        return self.path(relpath).exists()

    def read_text(self, relpath: str) -> str:
        return self.path(relpath).read_text(encoding="utf-8")

    def write_text(self, relpath: str, content: str) -> None:
        self.path(relpath).write_text(content, encoding="utf-8")

    def ensure_dir(self, relpath: str) -> None:
        self.path(relpath).mkdir(parents=True, exist_ok=True)

    def read_json(self, relpath: str) -> Any:
        return json.loads(self.read_text(relpath))

    def write_json(self, relpath: str, data: Any) -> None:
        self.write_text(relpath, json.dumps(data, indent=2, ensure_ascii=False))


def create_config_pointer(files: ProjectFiles, settings: SetupSettings) -> bool:
    """Write a config file that points Prettier at the shared config package.

    Prettier accepts a JSON string in .prettierrc and resolves it as a module name.
    """
    target = settings.config_file
    if files.exists(target):
        logger.warning(f"{target} already exists. Skipping...")
        return False

    try:
        files.write_text(target, json.dumps(settings.config_package))
    except OSError as e:
        logger.error(f"Failed to create {target}: {e}")
        return False

    logger.log(SUCCESS, f"Created {target}")
    return True


def create_ignore_file(files: ProjectFiles, settings: SetupSettings, template_dir: Path = TEMPLATE_DIR) -> bool:
    """Copy the bundled ignore template into the project."""
    target = settings.ignore_file
    if files.exists(target):
        logger.warning(f"{target} already exists. Skipping...")
        return False

    try:
        content = (template_dir / IGNORE_TEMPLATE).read_text(encoding="utf-8")
        files.write_text(target, content)
    except OSError as e:
        logger.error(f"Failed to create {target} from template: {e}")
        return False

    logger.log(SUCCESS, f"Created {target}")
    return True


def merge_settings(existing: dict[str, Any], template: dict[str, Any]) -> dict[str, Any]:
    """Shallow-merge template keys over existing editor settings."""
    return {**existing, **template}


def create_editor_settings(files: ProjectFiles, settings: SetupSettings, template_dir: Path = TEMPLATE_DIR) -> bool:
    """Create or update the editor settings file.

    A missing settings file is copied verbatim from the template. An existing one is
    parsed, merged with the template (template keys win) and rewritten pretty-printed.

    Returns:
        True if the settings file was written, False on any failure
    """
    target = settings.editor_settings_path
    template_path = template_dir / SETTINGS_TEMPLATE

    try:
        files.ensure_dir(settings.editor_dir)
    except OSError as e:
        logger.error(f"Failed to create {settings.editor_dir}: {e}")
        return False

    if files.exists(target):
        try:
            existing = files.read_json(target)
            if not isinstance(existing, dict):
                raise ValueError(f"expected a JSON object, got {type(existing).__name__}")
            template = json.loads(template_path.read_text(encoding="utf-8"))
            files.write_json(target, merge_settings(existing, template))
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Failed to update {target}: {e}")
            return False

        logger.log(SUCCESS, f"Updated {target} with Prettier configuration")
        return True

    try:
        files.write_text(target, template_path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error(f"Failed to create {target} from template: {e}")
        return False

    logger.log(SUCCESS, f"Created {target}")
    return True
