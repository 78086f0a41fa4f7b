"""prettier-setup: install and wire up a shared Prettier config in a JS project."""

from prettier_setup.prettier_config import PRETTIER_CONFIG, render_prettier_config, validate_prettier_config

__version__ = "1.0.0"

__all__ = [
    "PRETTIER_CONFIG",
    "__version__",
    "render_prettier_config",
    "validate_prettier_config",
]
