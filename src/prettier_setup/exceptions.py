"""Custom exceptions for the prettier-setup workflow.

Only fatal conditions are modelled as exceptions:
- PackageJsonNotFoundError: Raised when the project has no package.json
- InstallError: Raised when the shared config package cannot be installed

Everything else degrades to a boolean result at the component boundary.
"""

from typing import Optional


class SetupError(Exception):
    """Base class for errors that abort the setup run.

    Args:
        message: Error description
        hint: Actionable follow-up shown to the user (optional)

    Example:
        >>> raise SetupError("Setup failed", hint="Re-run with PRETTIER_SETUP_DEBUG=1")
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class PackageJsonNotFoundError(SetupError):
    """Raised when package.json is missing from the working directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            "package.json not found in current directory",
            hint="Please run this command in a project with package.json",
        )


class InstallError(SetupError):
    """Raised when a required package could not be installed.

    Args:
        package: Name of the package that failed to install
    """

    def __init__(self, package: str):
        self.package = package
        super().__init__(f"Setup failed. Could not install {package}.")
