"""Setup workflow components.

This package contains the steps run by the prettier-setup command:
- env_detector: Package manager detection
- installer: Dependency installation
- materializer: Config, ignore and editor settings files
- settings: Package/file name settings and their YAML overrides
"""

from prettier_setup.setup.env_detector import PackageManager, detect_package_manager
from prettier_setup.setup.installer import (
    INSTALL_COMMANDS,
    InstallCommands,
    build_install_command,
    install_formatter,
    install_shared_config,
    is_formatter_installed,
)
from prettier_setup.setup.materializer import (
    ProjectFiles,
    create_config_pointer,
    create_editor_settings,
    create_ignore_file,
    merge_settings,
)
from prettier_setup.setup.settings import SetupSettings, load_settings

__all__ = [
    # Environment detection
    "PackageManager",
    "detect_package_manager",
    # Installer
    "INSTALL_COMMANDS",
    "InstallCommands",
    "build_install_command",
    "install_formatter",
    "install_shared_config",
    "is_formatter_installed",
    # Materializer
    "ProjectFiles",
    "create_config_pointer",
    "create_editor_settings",
    "create_ignore_file",
    "merge_settings",
    # Settings
    "SetupSettings",
    "load_settings",
]
