"""Pytest configuration and shared fixtures."""

import json
import subprocess
from pathlib import Path

import pytest

from prettier_setup.setup.materializer import ProjectFiles
from prettier_setup.setup.settings import SetupSettings


class FakeRunner:
    """subprocess.run stand-in that records commands.

    Commands whose last argument is in fail_packages raise CalledProcessError.
    """

    def __init__(self, fail_packages=(), error=None):
        self.calls: list[list[str]] = []
        self.fail_packages = set(fail_packages)
        self.error = error

    def __call__(self, command, check=False, **kwargs):
        self.calls.append(list(command))
        if self.error is not None:
            raise self.error
        if command[-1] in self.fail_packages:
            raise subprocess.CalledProcessError(1, command)
        return subprocess.CompletedProcess(command, 0)

    @property
    def packages(self) -> list[str]:
        return [call[-1] for call in self.calls]


class MemoryFiles(ProjectFiles):
    """In-memory ProjectFiles for tests that should not touch disk."""

    def __init__(self, initial=None):
        super().__init__("/project")
        self.contents = dict(initial or {})
        self.dirs = set()

    def exists(self, relpath):
        return relpath in self.contents or relpath in self.dirs

    def read_text(self, relpath):
        try:
            return self.contents[relpath]
        except KeyError:
            raise FileNotFoundError(relpath) from None

    def write_text(self, relpath, content):
        self.contents[relpath] = content

    def ensure_dir(self, relpath):
        self.dirs.add(relpath)


@pytest.fixture(autouse=True)
def no_path_lookup(monkeypatch):
    """Keep install commands independent of what is on PATH."""
    monkeypatch.setattr("prettier_setup.setup.installer.shutil.which", lambda name: None)


@pytest.fixture(autouse=True)
def isolated_user_config(monkeypatch, tmp_path_factory):
    """Point the user settings directory at an empty temp dir."""
    user_dir = tmp_path_factory.mktemp("user-config")
    monkeypatch.setattr("prettier_setup.setup.settings.user_config_dir", lambda app: str(user_dir))
    return user_dir


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for runners that fail for given packages or raise a given error."""
    return FakeRunner


@pytest.fixture
def make_memory_files():
    """Factory for in-memory project files."""
    return MemoryFiles


@pytest.fixture
def settings():
    return SetupSettings()


@pytest.fixture
def project(tmp_path) -> Path:
    """Project directory with a minimal package.json."""
    manifest = {"name": "demo", "version": "1.0.0", "devDependencies": {"eslint": "^9.0.0"}}
    (tmp_path / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    return tmp_path


@pytest.fixture
def files(project) -> ProjectFiles:
    return ProjectFiles(project)


@pytest.fixture
def template_dir() -> Path:
    """Bundled templates shipped with the package."""
    return Path(__file__).parent.parent / "src" / "prettier_setup" / "templates"
